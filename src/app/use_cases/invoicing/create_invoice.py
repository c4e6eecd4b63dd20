"""CreateInvoice Use Case

Issues a draft invoice (nota fiscal) with its line items.
"""

import logging
from datetime import datetime
from typing import Callable
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utc_now
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_line import InvoiceLine
from src.domain.types import quantize_amount
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create draft invoice with line items

    Business Rules:
    1. Each input item is copied into a line item owned by the invoice
    2. Unit prices are rounded to 6 decimal places, the stored scale, and
       total_amount = sum(quantity * unit_price) over the rounded prices
    3. Invoice number is NF + creation timestamp (seconds resolution);
       invoices created within the same second share a number
    4. Invoice is created with status=Draft and no printed_at
    5. Invoice and line items are committed in one transaction
    6. Items are not validated: empty lists, zero or negative values pass

    Flow:
    1. Build line items from the command
    2. Compute total and number
    3. Stage invoice with its items
    4. Commit transaction
    5. Return response
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

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer_id and items

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice details or error
        """
        try:
            now = self.clock()

            # Step 1: Copy items into owned line items, prices at the stored scale
            lines = [
                InvoiceLine(
                    product_id=item.product_id,
                    description=item.description,
                    quantity=item.quantity,
                    unit_price=quantize_amount(item.unit_price),
                )
                for item in command.items
            ]

            # Step 2-3: Stage invoice with its items
            invoice = Invoice(
                number=Invoice.number_for(now),
                customer_id=command.customer_id,
                total_amount=Invoice.compute_total(lines),
                status=InvoiceStatus.DRAFT,
                issued_at=now,
                printed_at=None,
                items=lines,
            )

            created_invoice = await self.invoice_repo.create_with_items(invoice)

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Invoice {created_invoice.number} created (id={created_invoice.id}, "
                f"items={len(created_invoice.items)}, total={created_invoice.total_amount})"
            )

            # Step 5: Build response
            return Return.ok(InvoiceResponseDTO.from_invoice(created_invoice))

        except Exception as e:
            logger.exception("Failed to create invoice")
            await self._rollback()
            return Return.err(
                Error(
                    code="STORE_UNAVAILABLE",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

    async def _rollback(self) -> None:
        # The original failure is reported even when rollback fails
        try:
            await self.uow.rollback()
        except Exception:
            logger.exception("Rollback failed")
