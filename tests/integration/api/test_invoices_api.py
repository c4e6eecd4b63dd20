"""Integration tests for Invoice API endpoints"""

import pytest
from decimal import Decimal
from httpx import AsyncClient
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository

BASE_URL = "/api/notas-fiscais"

TWO_ITEM_PAYLOAD = {
    "customerId": "c0a80121-7ac0-4e1c-8b1a-3d2f9e7b6a55",
    "items": [
        {
            "productId": "5b7d3c1a-9e2f-4c8b-a6d4-1f0e2b3c4d5e",
            "description": "Teclado",
            "quantity": 2,
            "unitPrice": "10.00",
        },
        {
            "productId": "9a8b7c6d-5e4f-4a3b-2c1d-0e9f8a7b6c5d",
            "description": "Mouse",
            "quantity": 1,
            "unitPrice": "5.50",
        },
    ],
}


class TestInvoicesAPIIntegration:
    """Integration test suite for Invoice API endpoints"""

    @pytest.mark.asyncio
    async def test_create_invoice_returns_201(self, client: AsyncClient):
        # Act
        response = await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["customerId"] == TWO_ITEM_PAYLOAD["customerId"]
        assert Decimal(data["totalAmount"]) == Decimal("25.50")
        assert data["status"] == "Draft"
        assert data["printedAt"] is None
        assert data["number"].startswith("NF")
        assert len(data["items"]) == 2
        assert data["items"][0]["productId"] == TWO_ITEM_PAYLOAD["items"][0]["productId"]
        assert data["items"][0]["invoiceId"] == data["id"]
        assert isinstance(data["items"][0]["id"], int)

    @pytest.mark.asyncio
    async def test_create_invoice_location_refetches_invoice(self, client: AsyncClient):
        response = await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)
        created = response.json()

        location = response.headers["location"]
        assert location.endswith(f"{BASE_URL}/{created['id']}")

        fetched = await client.get(location)
        assert fetched.status_code == 200
        assert fetched.json()["id"] == created["id"]
        assert fetched.json()["number"] == created["number"]

    @pytest.mark.asyncio
    async def test_create_invoice_with_no_items(self, client: AsyncClient):
        response = await client.post(BASE_URL, json={"customerId": "cust_1", "items": []})

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["totalAmount"]) == Decimal("0")
        assert data["items"] == []

    @pytest.mark.asyncio
    async def test_create_invoice_accepts_snake_case(self, client: AsyncClient):
        payload = {
            "customer_id": "cust_snake",
            "items": [
                {"product_id": "p1", "description": "Cabo", "quantity": 4, "unit_price": "2.25"}
            ],
        }

        response = await client.post(BASE_URL, json=payload)

        assert response.status_code == 201
        assert Decimal(response.json()["totalAmount"]) == Decimal("9.00")

    @pytest.mark.asyncio
    async def test_create_invoice_malformed_body(self, client: AsyncClient):
        # quantity must be an integer
        payload = {
            "customerId": "cust_1",
            "items": [{"productId": "p1", "quantity": "many", "unitPrice": "1.00"}],
        }

        response = await client.post(BASE_URL, json=payload)

        assert response.status_code == 422  # Pydantic validation error

    @pytest.mark.asyncio
    async def test_list_invoices(self, client: AsyncClient):
        # Arrange
        first = (await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)).json()
        second = (await client.post(BASE_URL, json={"customerId": "cust_2"})).json()

        # Act
        response = await client.get(BASE_URL)

        # Assert
        assert response.status_code == 200
        data = {invoice["id"]: invoice for invoice in response.json()}
        assert set(data) == {first["id"], second["id"]}
        assert len(data[first["id"]]["items"]) == 2
        assert data[second["id"]]["items"] == []

    @pytest.mark.asyncio
    async def test_list_invoices_empty(self, client: AsyncClient):
        response = await client.get(BASE_URL)

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_print_invoice(self, client: AsyncClient):
        # Arrange
        created = (await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)).json()

        # Act
        response = await client.post(f"{BASE_URL}/{created['id']}/imprimir")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Invoice printed successfully"
        assert data["invoice"]["id"] == created["id"]
        assert data["invoice"]["status"] == "Printed"
        assert data["invoice"]["printedAt"] is not None
        assert len(data["invoice"]["items"]) == 2

        listed = (await client.get(BASE_URL)).json()
        assert listed[0]["status"] == "Printed"
        assert listed[0]["printedAt"] is not None

    @pytest.mark.asyncio
    async def test_print_unknown_invoice_returns_404(self, client: AsyncClient):
        created = (await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)).json()

        response = await client.post(f"{BASE_URL}/does-not-exist/imprimir")

        assert response.status_code == 404
        data = response.json()
        assert "error" in data
        assert data["error"]["code"] == "INVOICE_NOT_FOUND"

        fetched = (await client.get(f"{BASE_URL}/{created['id']}")).json()
        assert fetched["status"] == "Draft"
        assert fetched["printedAt"] is None

    @pytest.mark.asyncio
    async def test_get_unknown_invoice_returns_404(self, client: AsyncClient):
        response = await client.get(f"{BASE_URL}/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_amounts_read_back_unchanged(self, client: AsyncClient):
        payload = {
            "customerId": "cust_precision",
            "items": [
                {"productId": "p1", "description": "Parafuso", "quantity": 10, "unitPrice": "0.0000001"},
                {"productId": "p2", "description": "Porca", "quantity": 3, "unitPrice": "0.1234567"},
                {"productId": "p3", "description": "Servidor", "quantity": 1, "unitPrice": "123456789012.345678"},
            ],
        }

        created = (await client.post(BASE_URL, json=payload)).json()
        listed = (await client.get(BASE_URL)).json()[0]
        fetched = (await client.get(f"{BASE_URL}/{created['id']}")).json()

        assert Decimal(created["totalAmount"]) == Decimal("123456789012.716049")
        for invoice in (listed, fetched):
            assert Decimal(invoice["totalAmount"]) == Decimal(created["totalAmount"])
            assert [Decimal(item["unitPrice"]) for item in invoice["items"]] == [
                Decimal(item["unitPrice"]) for item in created["items"]
            ]
            assert Decimal(invoice["totalAmount"]) == sum(
                (item["quantity"] * Decimal(item["unitPrice"]) for item in invoice["items"]),
                Decimal("0"),
            )

    @pytest.mark.asyncio
    async def test_timestamps_read_back_as_utc(self, client: AsyncClient):
        created = (await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)).json()
        printed = (await client.post(f"{BASE_URL}/{created['id']}/imprimir")).json()["invoice"]

        fetched = (await client.get(f"{BASE_URL}/{created['id']}")).json()
        listed = (await client.get(BASE_URL)).json()[0]

        assert created["issuedAt"].endswith("Z")
        assert fetched["issuedAt"] == listed["issuedAt"] == created["issuedAt"]
        assert fetched["printedAt"] == listed["printedAt"] == printed["printedAt"]
        assert printed["printedAt"].endswith("Z")

    @pytest.mark.asyncio
    async def test_list_store_failure_returns_503(self, client: AsyncClient, monkeypatch):
        async def unavailable(self):
            raise ConnectionError("database is locked")

        monkeypatch.setattr(SqlAlchemyInvoiceRepository, "list_with_items", unavailable)

        response = await client.get(BASE_URL)

        assert response.status_code == 503
        assert response.json() == {
            "error": {"code": "STORE_UNAVAILABLE", "message": "Failed to list invoices"}
        }

    @pytest.mark.asyncio
    async def test_create_store_failure_returns_503(self, client: AsyncClient, monkeypatch):
        async def unavailable(self, invoice):
            raise ConnectionError("database is locked")

        monkeypatch.setattr(SqlAlchemyInvoiceRepository, "create_with_items", unavailable)

        response = await client.post(BASE_URL, json=TWO_ITEM_PAYLOAD)

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "STORE_UNAVAILABLE"
        assert response.json()["error"]["message"] == "Failed to create invoice"

        monkeypatch.undo()
        assert (await client.get(BASE_URL)).json() == []
