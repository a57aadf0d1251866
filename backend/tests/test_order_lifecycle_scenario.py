"""
End-to-end walk through a table's evening, driven only through the API.
"""
from decimal import Decimal


def _table(client, table_id):
    return client.get(f"/tables/{table_id}").json()


class TestOrderLifecycle:

    def test_table_five_from_order_to_payment(self, client):
        table = client.post("/tables", json={"number": 5}).json()
        pasta = client.post("/menu", json={
            "name": "Pasta", "price": "10.00", "category": "Mains",
            "image": "https://placehold.co/100x100.png",
        }).json()
        lemonade = client.post("/menu", json={
            "name": "Lemonade", "price": "5.00", "category": "Drinks",
            "image": "https://placehold.co/100x100.png",
        }).json()

        response = client.post("/orders", json={
            "table_id": table["id"],
            "items": [
                {"menu_item_id": pasta["id"], "quantity": 2},
                {"menu_item_id": lemonade["id"], "quantity": 1},
            ],
        })
        assert response.status_code == 201
        order = response.json()
        assert Decimal(order["total_amount"]) == Decimal("25.00")
        assert order["status"] == "Pending"

        table = _table(client, table["id"])
        assert table["status"] == "Occupied"
        assert table["customer_count"] == 3

        response = client.patch(
            f"/orders/{order['id']}/status", json={"status": "Ready"})
        assert response.status_code == 200
        assert _table(client, table["id"])["status"] == "Serving"

        # A bulk resync agrees with the incremental update
        sync = client.post("/tables/sync-status").json()
        assert sync["tables_updated"] == 1
        assert _table(client, table["id"])["status"] == "Serving"

        response = client.patch(
            f"/orders/{order['id']}/status", json={"status": "Paid"})
        assert response.status_code == 200

        table = _table(client, table["id"])
        assert table["status"] == "Free"
        assert table["customer_count"] is None
        assert client.get(f"/tables/{table['id']}/orders").json() == []

    def test_settling_through_put_opens_the_bill(self, client):
        table = client.post("/tables", json={"number": 11}).json()
        soup = client.post("/menu", json={
            "name": "Soup", "price": "7.25", "category": "Starters",
            "image": "https://placehold.co/100x100.png",
        }).json()
        order = client.post("/orders", json={
            "table_id": table["id"],
            "items": [{"menu_item_id": soup["id"], "quantity": 2}],
        }).json()
        assert Decimal(order["total_amount"]) == Decimal("14.50")

        for status in ("Preparing", "Ready", "Served"):
            client.put(f"/orders/{order['id']}", json={"status": status})
        client.put(f"/orders/{order['id']}", json={"status": "Paid"})

        table = _table(client, table["id"])
        assert table["status"] == "Billing"
        assert table["customer_count"] == 2

        # Clearing the table once the guests leave
        response = client.post("/tables/sync-status")
        assert response.status_code == 200
        assert _table(client, table["id"])["status"] == "Free"

    def test_paid_order_can_be_reopened(self, client):
        table = client.post("/tables", json={"number": 2}).json()
        tea = client.post("/menu", json={
            "name": "Tea", "price": "2.50", "category": "Drinks",
            "image": "https://placehold.co/100x100.png",
        }).json()
        order = client.post("/orders", json={
            "table_id": table["id"],
            "items": [{"menu_item_id": tea["id"], "quantity": 1}],
        }).json()
        client.patch(f"/orders/{order['id']}/status", json={"status": "Paid"})

        response = client.patch(
            f"/orders/{order['id']}/status", json={"status": "Pending"})

        assert response.status_code == 200
        assert response.json()["status"] == "Pending"
        assert _table(client, table["id"])["status"] == "Occupied"

    def test_menu_price_change_does_not_touch_placed_orders(self, client):
        table = client.post("/tables", json={"number": 6}).json()
        wine = client.post("/menu", json={
            "name": "House Red Wine", "price": "7.00", "category": "Drinks",
            "image": "https://placehold.co/100x100.png",
        }).json()
        order = client.post("/orders", json={
            "table_id": table["id"],
            "items": [{"menu_item_id": wine["id"], "quantity": 3}],
        }).json()

        client.put(f"/menu/{wine['id']}", json={"price": "9.00"})

        reloaded = client.get(f"/orders/{order['id']}").json()
        assert Decimal(reloaded["total_amount"]) == Decimal("21.00")
        assert Decimal(reloaded["order_items"][0]["unit_price"]) == Decimal("7.00")
