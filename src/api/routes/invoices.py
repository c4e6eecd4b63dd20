"""Invoice API Routes

FastAPI routes for nota fiscal operations: list, retrieve, create and print.
"""

from typing import List
from fastapi import APIRouter, Depends, Request, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.invoice_request import CreateInvoiceRequestSchema
from src.app.use_cases.invoicing.dtos import (
    CreateInvoiceCommandDTO,
    CreateInvoiceLineCommandDTO,
    InvoiceResponseDTO,
    PrintInvoiceResponseDTO,
)
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.create_invoice import CreateInvoice
from src.app.use_cases.invoicing.print_invoice import PrintInvoice
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError
from libs.result import Error

router = APIRouter(prefix="/notas-fiscais", tags=["Notas Fiscais"])

NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "INVOICE_NOT_FOUND",
                    "message": "Invoice with ID 6f1c1e9e-3f5e-4a53-9d7a-0c2f7b1e5a10 not found"
                }
            }
        }
    }
}

STORE_UNAVAILABLE_RESPONSE = {
    "description": "Persistence store unavailable",
    "content": {
        "application/json": {
            "example": {
                "error": {
                    "code": "STORE_UNAVAILABLE",
                    "message": "Failed to create invoice"
                }
            }
        }
    }
}


def raise_for_error(error: Error):
    if error.code == "INVOICE_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    if error.code == "STORE_UNAVAILABLE":
        raise ClientError(error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    raise ClientError(error)


@router.get(
    "",
    response_model=List[InvoiceResponseDTO],
    status_code=status.HTTP_200_OK,
    responses={503: STORE_UNAVAILABLE_RESPONSE},
)
async def list_invoices(session: AsyncSession = Depends(get_session)):
    """
    List all invoices with their items.

    No pagination or filtering; invoices come back in store order.

    **Returns:**
    - 200: Array of invoices
    - 503: Store unavailable
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = ListInvoices(invoice_repo)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE, 503: STORE_UNAVAILABLE_RESPONSE},
)
async def get_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Retrieve one invoice with its items.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: Invoice
    - 404: Invoice not found
    """
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = GetInvoice(invoice_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={503: STORE_UNAVAILABLE_RESPONSE},
)
async def create_invoice(
    request: Request,
    response: Response,
    body: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Create a draft invoice with its items.

    The total is the sum of quantity * unitPrice over all items. Items are not
    validated and may be empty. The invoice number is derived from the
    creation second, so two invoices created in the same second share it.

    **Example request:**
    ```json
    {
      "customerId": "c0a80121-7ac0-4e1c-8b1a-3d2f9e7b6a55",
      "items": [
        {"productId": "5b7d...", "description": "Teclado", "quantity": 2, "unitPrice": "10.00"},
        {"productId": "9a8b...", "description": "Mouse", "quantity": 1, "unitPrice": "5.50"}
      ]
    }
    ```

    **Returns:**
    - 201: Invoice created, `Location` header points at the invoice
    - 503: Store unavailable
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    command = CreateInvoiceCommandDTO(
        customer_id=body.customer_id,
        items=[
            CreateInvoiceLineCommandDTO(
                product_id=item.product_id,
                description=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in body.items
        ],
    )

    use_case = CreateInvoice(uow, invoice_repo)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    response.headers["Location"] = str(
        request.url_for("get_invoice", invoice_id=result.value.id)
    )
    return result.value


@router.post(
    "/{invoice_id}/imprimir",
    response_model=PrintInvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE, 503: STORE_UNAVAILABLE_RESPONSE},
)
async def print_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session)
):
    """
    Mark an invoice as printed.

    Sets status to Printed and stamps printedAt. Printing again stamps a new
    printedAt.

    **Path parameters:**
    - `invoice_id` (required): Invoice ID

    **Returns:**
    - 200: `{"invoice": {...}, "message": "Invoice printed successfully"}`
    - 404: Invoice not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    invoice_repo = SqlAlchemyInvoiceRepository(session)

    use_case = PrintInvoice(uow, invoice_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
