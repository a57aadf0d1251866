import pytest

from modules.tables.models.table_models import TableStatus
from tests.factories import TableFactory, MenuItemFactory


class TestTableAPI:

    def test_list_tables_ordered_by_number(self, client):
        TableFactory(number=7)
        TableFactory(number=2)

        response = client.get("/tables")

        assert response.status_code == 200
        assert [t["number"] for t in response.json()] == [2, 7]

    def test_create_table(self, client):
        response = client.post("/tables", json={"number": 12})

        assert response.status_code == 201
        data = response.json()
        assert data["number"] == 12
        assert data["status"] == "Free"
        assert data["customer_count"] is None

    def test_create_table_duplicate_number(self, client):
        TableFactory(number=4)

        response = client.post("/tables", json={"number": 4})

        assert response.status_code == 409
        assert response.json()["error_code"] == "CONFLICT"

    @pytest.mark.parametrize("payload", [{}, {"number": 0}, {"number": -3}])
    def test_create_table_invalid(self, client, payload):
        response = client.post("/tables", json=payload)

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_INPUT"

    def test_get_table(self, client):
        table = TableFactory(number=9)

        response = client.get(f"/tables/{table.id}")

        assert response.status_code == 200
        assert response.json()["number"] == 9

    def test_get_table_not_found(self, client):
        response = client.get("/tables/321")

        assert response.status_code == 404
        assert response.json()["detail"] == "Table with id 321 not found"

    def test_update_table_is_partial(self, client):
        table = TableFactory(number=1)

        response = client.put(
            f"/tables/{table.id}",
            json={"status": "Billing", "customer_count": 4},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["number"] == 1
        assert data["status"] == "Billing"
        assert data["customer_count"] == 4

    def test_update_table_number_conflict(self, client):
        TableFactory(number=1)
        second = TableFactory(number=2)

        response = client.put(f"/tables/{second.id}", json={"number": 1})

        assert response.status_code == 409

    def test_update_table_invalid_status(self, client):
        table = TableFactory()

        response = client.put(f"/tables/{table.id}", json={"status": "Closed"})

        assert response.status_code == 400

    def test_delete_table_removes_its_orders(self, client):
        table = TableFactory()
        dish = MenuItemFactory()
        order_id = client.post("/orders", json={
            "table_id": table.id,
            "items": [{"menu_item_id": dish.id, "quantity": 1}],
        }).json()["id"]

        response = client.delete(f"/tables/{table.id}")

        assert response.status_code == 200
        assert "message" in response.json()
        assert client.get(f"/tables/{table.id}").status_code == 404
        assert client.get(f"/orders/{order_id}").status_code == 404

    def test_sync_status(self, client, db_session):
        stale = TableFactory(number=1, status=TableStatus.SERVING,
                             customer_count=2)
        TableFactory(number=2)

        response = client.post("/tables/sync-status")

        assert response.status_code == 200
        assert response.json()["tables_updated"] == 2
        db_session.refresh(stale)
        assert stale.status == TableStatus.FREE
        assert stale.customer_count is None

    def test_table_orders_lists_active_orders(self, client):
        table = TableFactory()
        dish = MenuItemFactory(name="Tiramisu")
        paid_id = client.post("/orders", json={
            "table_id": table.id,
            "items": [{"menu_item_id": dish.id, "quantity": 1}],
        }).json()["id"]
        client.patch(f"/orders/{paid_id}/status", json={"status": "Paid"})
        open_id = client.post("/orders", json={
            "table_id": table.id,
            "items": [{"menu_item_id": dish.id, "quantity": 2}],
        }).json()["id"]

        response = client.get(f"/tables/{table.id}/orders")

        assert response.status_code == 200
        orders = response.json()
        assert [o["id"] for o in orders] == [open_id]
        assert orders[0]["order_items"][0]["item_name"] == "Tiramisu"

    def test_table_orders_unknown_table(self, client):
        response = client.get("/tables/77/orders")

        assert response.status_code == 404
