"""Invoice Repository Interface

Defines the contract for invoice persistence operations. An invoice is
always read and written together with its line items.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoices and their line items for invoicing operations.
    """

    @abstractmethod
    async def list_with_items(self) -> List[Invoice]:
        """
        Retrieve all invoices with their line items loaded

        Returns:
            List of invoices in store-default order
        """
        pass

    @abstractmethod
    async def get_with_items(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID with its line items loaded

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_with_items(self, invoice: Invoice) -> Invoice:
        """
        Stage a new invoice together with its line items

        Invoice and items are written in the caller's unit of work, so
        they become visible together on commit or not at all.

        Args:
            invoice: Invoice entity with its items attached

        Returns:
            Invoice with store-assigned line item IDs
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass
