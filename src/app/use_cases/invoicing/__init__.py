"""Invoicing domain use cases"""
from .list_invoices import ListInvoices
from .get_invoice import GetInvoice
from .create_invoice import CreateInvoice
from .print_invoice import PrintInvoice
from .dtos import (
    CreateInvoiceLineCommandDTO,
    CreateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceResponseDTO,
    PrintInvoiceResponseDTO,
)

__all__ = [
    "ListInvoices",
    "GetInvoice",
    "CreateInvoice",
    "PrintInvoice",
    "CreateInvoiceLineCommandDTO",
    "CreateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceResponseDTO",
    "PrintInvoiceResponseDTO",
]
