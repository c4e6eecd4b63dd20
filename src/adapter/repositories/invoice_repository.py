"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlalchemy.orm import selectinload
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations. Line items are always loaded
    eagerly since lazy loading is not available on an async session.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_with_items(self) -> List[Invoice]:
        statement = select(Invoice).options(selectinload(Invoice.items))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_with_items(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID with its line items loaded

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = (
            select(Invoice)
            .options(selectinload(Invoice.items))
            .where(Invoice.id == invoice_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def create_with_items(self, invoice: Invoice) -> Invoice:
        """
        Stage a new invoice together with its line items

        The flush assigns line item IDs; nothing is visible to other
        sessions until the unit of work commits.

        Args:
            invoice: Invoice entity with its items attached

        Returns:
            Invoice with store-assigned line item IDs
        """
        self.session.add(invoice)
        await self.session.flush()
        return invoice

    async def update(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        return invoice
