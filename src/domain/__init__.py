from .base import BaseModel, generate_uuid, utc_now
from .invoice import Invoice, InvoiceStatus
from .invoice_line import InvoiceLine
from .types import quantize_amount

__all__ = [
    "BaseModel",
    "generate_uuid",
    "utc_now",
    "Invoice",
    "InvoiceStatus",
    "InvoiceLine",
    "quantize_amount",
]
