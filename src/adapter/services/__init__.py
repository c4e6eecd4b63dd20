from .database import Database
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "Database",
    "SqlAlchemyUnitOfWork",
]
