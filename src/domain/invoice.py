"""Invoice Domain Entity

Tracks fiscal invoices (notas fiscais) and their print status.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid, utc_now
from src.domain.types import UTCDateTime, amount_type

if TYPE_CHECKING:
    from src.domain.invoice_line import InvoiceLine


NUMBER_PREFIX = "NF"
NUMBER_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    DRAFT = "Draft"
    PRINTED = "Printed"


class Invoice(BaseModel, table=True):
    """
    Invoice - Fiscal invoice issued to a customer

    Domain Rules:
    - total_amount is the sum of quantity * unit_price over all lines
    - Lines are fixed once the invoice is created
    - Status transitions: Draft -> Printed (no way back)
    - printed_at is set if and only if status is Printed
    - number derives from the creation second and is NOT unique: two invoices
      created within the same second share a number
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_number', 'number'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice identifier (UUID4)"
    )

    number: str = Field(
        sa_column=Column(String(20), nullable=False),
        description="Human-readable number (NF + yyyyMMddHHmmss)"
    )

    customer_id: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="Opaque reference to the customer"
    )

    total_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(amount_type(), nullable=False),
        description="Sum of quantity * unit_price over all lines (precision: 18,6)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.DRAFT,
        description="Invoice status (Draft, Printed)"
    )

    issued_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UTCDateTime(), nullable=False),
        description="Timestamp when invoice was issued (UTC)"
    )

    printed_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(UTCDateTime(), nullable=True),
        description="Timestamp when invoice was printed (UTC)"
    )

    items: List["InvoiceLine"] = Relationship(
        back_populates="invoice",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "lazy": "selectin",
            "order_by": "InvoiceLine.id",
        },
    )

    @staticmethod
    def number_for(moment: datetime) -> str:
        """Format the invoice number for the given creation instant"""
        return f"{NUMBER_PREFIX}{moment.strftime(NUMBER_TIMESTAMP_FORMAT)}"

    @staticmethod
    def compute_total(lines: Iterable["InvoiceLine"]) -> Decimal:
        return sum((line.total_price for line in lines), Decimal("0"))

    def mark_printed(self, moment: datetime) -> None:
        """
        Move the invoice to Printed

        Re-printing an already printed invoice applies the transition again
        and overwrites printed_at.
        """
        self.status = InvoiceStatus.PRINTED
        self.printed_at = moment

    @property
    def is_printed(self) -> bool:
        return self.status == InvoiceStatus.PRINTED

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "6f1c1e9e-3f5e-4a53-9d7a-0c2f7b1e5a10",
                "number": "NF20251113201131",
                "customer_id": "c0a80121-7ac0-4e1c-8b1a-3d2f9e7b6a55",
                "total_amount": "25.500000",
                "status": "Draft",
                "issued_at": "2025-11-13T20:11:31Z",
                "printed_at": None
            }
        }
