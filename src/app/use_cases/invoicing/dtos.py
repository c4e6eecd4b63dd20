"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs. Fields are
exposed in camelCase on the wire and accept snake_case on input too.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine


class CreateInvoiceLineCommandDTO(BaseModel):
    """One line item of a CreateInvoice command"""

    product_id: str = Field(
        ...,
        description="Product identifier"
    )

    description: str = Field(
        default="",
        description="Product description, copied onto the invoice"
    )

    quantity: int = Field(
        ...,
        description="Quantity of units"
    )

    unit_price: Decimal = Field(
        ...,
        description="Price per unit"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    customer_id: str = Field(
        ...,
        description="Customer identifier"
    )

    items: List[CreateInvoiceLineCommandDTO] = Field(
        default_factory=list,
        description="Line items, in order (may be empty)"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "customerId": "c0a80121-7ac0-4e1c-8b1a-3d2f9e7b6a55",
                "items": [
                    {
                        "productId": "5b7d3c1a-9e2f-4c8b-a6d4-1f0e2b3c4d5e",
                        "description": "Teclado mecanico",
                        "quantity": 2,
                        "unitPrice": "10.00"
                    }
                ]
            }
        }


class InvoiceLineDTO(BaseModel):
    """Line item as returned inside an invoice response"""

    id: int = Field(..., description="Line item ID")
    invoice_id: str = Field(..., description="Owning invoice ID")
    product_id: str = Field(..., description="Product identifier")
    description: str = Field(..., description="Product description at invoice time")
    quantity: int = Field(..., description="Quantity of units")
    unit_price: Decimal = Field(..., description="Price per unit")

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_line(cls, line: InvoiceLine) -> "InvoiceLineDTO":
        return cls(
            id=line.id,
            invoice_id=line.invoice_id,
            product_id=line.product_id,
            description=line.description,
            quantity=line.quantity,
            unit_price=line.unit_price,
        )


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by ListInvoices, GetInvoice and CreateInvoice.
    """

    id: str = Field(
        ...,
        description="Invoice ID"
    )

    number: str = Field(
        ...,
        description="Invoice number (NF + yyyyMMddHHmmss)"
    )

    customer_id: str = Field(
        ...,
        description="Customer identifier"
    )

    total_amount: Decimal = Field(
        ...,
        description="Sum of quantity * unit price over all items"
    )

    status: str = Field(
        ...,
        description="Invoice status (Draft, Printed)"
    )

    issued_at: datetime = Field(
        ...,
        description="Timestamp when invoice was issued"
    )

    printed_at: Optional[datetime] = Field(
        default=None,
        description="Timestamp when invoice was printed"
    )

    items: List[InvoiceLineDTO] = Field(
        default_factory=list,
        description="Invoice line items"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "6f1c1e9e-3f5e-4a53-9d7a-0c2f7b1e5a10",
                "number": "NF20251113201131",
                "customerId": "c0a80121-7ac0-4e1c-8b1a-3d2f9e7b6a55",
                "totalAmount": "25.500000",
                "status": "Draft",
                "issuedAt": "2025-11-13T20:11:31Z",
                "printedAt": None,
                "items": [
                    {
                        "id": 1,
                        "invoiceId": "6f1c1e9e-3f5e-4a53-9d7a-0c2f7b1e5a10",
                        "productId": "5b7d3c1a-9e2f-4c8b-a6d4-1f0e2b3c4d5e",
                        "description": "Teclado mecanico",
                        "quantity": 2,
                        "unitPrice": "10.000000"
                    }
                ]
            }
        }

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            number=invoice.number,
            customer_id=invoice.customer_id,
            total_amount=invoice.total_amount,
            status=invoice.status.value,
            issued_at=invoice.issued_at,
            printed_at=invoice.printed_at,
            items=[InvoiceLineDTO.from_line(line) for line in invoice.items],
        )


class PrintInvoiceResponseDTO(BaseModel):
    """
    Response DTO for the print operation

    Returned by PrintInvoice use case.
    """

    invoice: InvoiceResponseDTO = Field(
        ...,
        description="Invoice after the print transition"
    )

    message: str = Field(
        ...,
        description="Confirmation message"
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
