"""PrintInvoice Use Case

Marks an invoice as printed.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utc_now
from .dtos import InvoiceResponseDTO, PrintInvoiceResponseDTO

logger = logging.getLogger(__name__)

PRINTED_MESSAGE = "Invoice printed successfully"


class PrintInvoice:
    """
    Use Case: Move invoice from Draft to Printed

    Business Rules:
    1. Invoice must exist
    2. Sets status=Printed and printed_at=now
    3. Printing an already printed invoice re-applies the transition and
       overwrites printed_at
    4. Concurrent prints on the same invoice: last write wins

    Flow:
    1. Retrieve invoice with items
    2. Apply print transition
    3. Commit transaction
    4. Return invoice with confirmation message
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.clock = clock

    async def execute(self, invoice_id: str) -> Result[PrintInvoiceResponseDTO]:
        """
        Execute print transition

        Args:
            invoice_id: Invoice ID to print

        Returns:
            Result[PrintInvoiceResponseDTO]: Success with invoice and message or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_with_items(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            if invoice.is_printed:
                logger.info(f"Invoice {invoice.id} was already printed, printing again")

            # Step 2: Apply transition
            invoice.mark_printed(self.clock())
            updated_invoice = await self.invoice_repo.update(invoice)

            # Step 3: Commit transaction
            await self.uow.commit()

            logger.info(f"Invoice {updated_invoice.number} printed (id={updated_invoice.id})")

            # Step 4: Build response
            return Return.ok(
                PrintInvoiceResponseDTO(
                    invoice=InvoiceResponseDTO.from_invoice(updated_invoice),
                    message=PRINTED_MESSAGE,
                )
            )

        except Exception as e:
            logger.exception(f"Failed to print invoice {invoice_id}")
            await self._rollback()
            return Return.err(
                Error(
                    code="STORE_UNAVAILABLE",
                    message="Failed to print invoice",
                    reason=str(e),
                )
            )

    async def _rollback(self) -> None:
        # The original failure is reported even when rollback fails
        try:
            await self.uow.rollback()
        except Exception:
            logger.exception("Rollback failed")
