"""GetInvoice Use Case

Returns one invoice with its line items.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceResponseDTO

logger = logging.getLogger(__name__)


class GetInvoice:
    """
    Use Case: Retrieve invoice by ID

    Business Rules:
    1. Invoice must exist
    2. Items are loaded with the invoice
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: str) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice lookup

        Args:
            invoice_id: Invoice ID

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            invoice = await self.invoice_repo.get_with_items(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            return Return.ok(InvoiceResponseDTO.from_invoice(invoice))

        except Exception as e:
            logger.exception(f"Failed to retrieve invoice {invoice_id}")
            return Return.err(
                Error(
                    code="STORE_UNAVAILABLE",
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
