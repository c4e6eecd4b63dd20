"""ListInvoices Use Case

Returns every invoice with its line items.
"""

import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO

logger = logging.getLogger(__name__)


class ListInvoices:
    """
    Use Case: List all invoices

    Business Rules:
    1. Read-only
    2. Items are loaded with each invoice
    3. No pagination or filtering; order is whatever the store returns
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[List[InvoiceResponseDTO]]:
        try:
            invoices = await self.invoice_repo.list_with_items()
            return Return.ok([InvoiceResponseDTO.from_invoice(invoice) for invoice in invoices])

        except Exception as e:
            logger.exception("Failed to list invoices")
            return Return.err(
                Error(
                    code="STORE_UNAVAILABLE",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )
