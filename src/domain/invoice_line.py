"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Optional
from sqlmodel import Field, Column, Index, Relationship
from sqlalchemy import BigInteger, ForeignKey, Integer, String
from src.domain.base import BaseModel
from src.domain.types import amount_type

if TYPE_CHECKING:
    from src.domain.invoice import Invoice


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice and is deleted with it
    - description is a snapshot of the product description at invoice time
    - total_price = quantity * unit_price (derived, not stored)
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: Optional[str] = Field(
        default=None,
        sa_column=Column(
            String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False
        ),
        description="Foreign key to Invoice"
    )

    product_id: str = Field(
        sa_column=Column(String(64), nullable=False),
        description="Opaque reference to the product"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Product description at invoice time"
    )

    quantity: int = Field(
        description="Quantity of units"
    )

    unit_price: Decimal = Field(
        sa_column=Column(amount_type(), nullable=False),
        description="Price per unit (precision: 18,6)"
    )

    invoice: Optional["Invoice"] = Relationship(back_populates="items")

    @property
    def total_price(self) -> Decimal:
        return self.quantity * self.unit_price

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "invoice_id": "6f1c1e9e-3f5e-4a53-9d7a-0c2f7b1e5a10",
                "product_id": "5b7d3c1a-9e2f-4c8b-a6d4-1f0e2b3c4d5e",
                "description": "Teclado mecanico",
                "quantity": 2,
                "unit_price": "10.000000"
            }
        }
