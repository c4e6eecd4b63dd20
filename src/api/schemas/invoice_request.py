"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests. Only the shape of the
body is checked; quantities, prices and item counts are taken as given.
"""

from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class InvoiceItemRequestSchema(BaseModel):
    """One line item in a create invoice request"""

    product_id: str = Field(
        ...,
        description="Product identifier"
    )

    description: str = Field(
        default="",
        description="Product description at invoice time"
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


class CreateInvoiceRequestSchema(BaseModel):
    """
    Request schema for creating an invoice

    Used for POST /notas-fiscais endpoint.
    """

    customer_id: str = Field(
        ...,
        description="Customer identifier"
    )

    items: List[InvoiceItemRequestSchema] = Field(
        default_factory=list,
        description="Line items (may be empty)"
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
                    },
                    {
                        "productId": "9a8b7c6d-5e4f-4a3b-2c1d-0e9f8a7b6c5d",
                        "description": "Mouse",
                        "quantity": 1,
                        "unitPrice": "5.50"
                    }
                ]
            }
        }
