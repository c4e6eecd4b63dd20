import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from src.adapter.services.database import Database


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path):
    """Create a fresh SQLite test database per test"""
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'notas_fiscais_test.db'}")
    await database.ensure_schema()

    yield database

    await database.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    """Create a new database session for each test"""
    async with database.session() as session:
        yield session


@pytest_asyncio.fixture
async def client(database):
    """Create test client bound to the test database"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig, database=database)

    # Use ASGITransport for httpx AsyncClient
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
