def _seed_demo(client):
    r = client.post("/admin/seed/demo")
    assert r.status_code == 201
    return r.json()


def test_admin_schema_and_demo_seed(client):
    r = client.post("/admin/schema")
    assert r.status_code == 201
    assert r.json()["meta"]["count"] == 10

    body = _seed_demo(client)
    assert body["ok"] is True
    assert body["data"]["suppliers"] == 4
    assert body["meta"]["total"] == sum(body["data"].values())


def test_admin_seed_rolls_back_on_violation(client):
    payload = {
        "suppliers": [{"id": 1, "name": "ElectroWorld", "region": "Asia", "email": "sales@electroworld.com"}],
        "customers": [{"name": "Pat", "loyalty_status": "Platinum"}],
    }
    r = client.post("/admin/seed", json=payload)

    assert r.status_code == 409
    body = r.json()
    assert body["ok"] is False
    assert body["meta"] == {"kind": "check", "table": "customers"}
    assert client.get("/records/suppliers").json()["data"] == []


def test_create_and_read_record(client):
    r = client.post("/records/suppliers", json={"name": "ElectroWorld", "region": "Asia", "email": "sales@electroworld.com"})
    assert r.status_code == 201
    supplier = r.json()["data"]
    assert supplier["id"] >= 1

    r = client.get(f"/records/suppliers/{supplier['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "ElectroWorld"

    r = client.get("/records/suppliers")
    assert r.json()["meta"]["count"] == 1


def test_record_validation_and_constraint_errors(client):
    # shape problem: caught before the database
    r = client.post("/records/inventories", json={"warehouse_id": 1, "quantity_in_stock": 3})
    assert r.status_code == 422
    assert r.json()["ok"] is False

    # value problem: rejected by the CHECK constraint
    r = client.post("/records/customers", json={"name": "Pat", "loyalty_status": "Platinum"})
    assert r.status_code == 409
    assert r.json()["meta"]["kind"] == "check"

    # missing parent
    r = client.post("/records/products", json={"name": "X", "category": "Y", "unit_price": 1, "supplier_id": 99})
    assert r.status_code == 409
    assert r.json()["meta"]["kind"] == "foreign_key"


def test_explicit_null_is_rejected_but_omitted_key_defaults(client):
    r = client.post("/records/customers", json={"name": "Nulla", "loyalty_status": None})
    assert r.status_code == 409
    assert r.json()["meta"] == {"kind": "not_null", "table": "customers"}

    r = client.post("/records/customers", json={"name": "Dana"})
    assert r.status_code == 201
    assert r.json()["data"]["loyalty_status"] == "Bronze"

    assert client.get("/records/customers").json()["meta"]["count"] == 1


def test_unknown_entity_and_missing_record(client):
    assert client.post("/records/invoices", json={}).status_code == 404
    assert client.get("/records/customers/999").status_code == 404
    assert client.delete("/records/customers/999").status_code == 404


def test_delete_product_in_use_is_conflict(client):
    _seed_demo(client)

    r = client.delete("/records/products/1")
    assert r.status_code == 409
    assert r.json()["meta"] == {"kind": "foreign_key", "table": "products"}


def test_delete_order_cascades(client):
    _seed_demo(client)

    r = client.delete("/records/orders/1")
    assert r.status_code == 200
    assert r.json()["data"]["deleted"] == 1

    details = client.get("/records/order_details").json()["data"]
    assert all(d["order_id"] != 1 for d in details)
    assert len(details) == 4


def test_reports_catalogue(client):
    r = client.get("/reports")
    items = r.json()["data"]
    assert len(items) == 17
    _seed_demo(client)

    # every advertised path answers
    for item in items:
        resp = client.get(item["path"])
        assert resp.status_code == 200, item["path"]
        assert resp.json()["meta"]["report"] == item["name"]


def test_report_parameters(client):
    _seed_demo(client)

    r = client.get("/reports/low-stock-by-category")
    assert [row["product_name"] for row in r.json()["data"]] == ["Phone"]

    r = client.get("/reports/high-value-order-lines", params={"loyalty_status": "Gold"})
    rows = r.json()["data"]
    assert sorted(row["order_id"] for row in rows) == [1, 4]

    r = client.get("/reports/orders-in-period", params={"start": "2025-01-01", "end": "2025-12-31"})
    assert [row["order_id"] for row in r.json()["data"]] == [4]
    assert r.json()["meta"]["start"] == "2025-01-01"

    r = client.get("/reports/products-by-price", params={"sort": "unit_price"})
    assert r.json()["data"][0]["name"] == "Apples"


def test_report_parameter_errors(client):
    r = client.get("/reports/orders-in-period", params={"start": "2024-12-31", "end": "2024-01-01"})
    assert r.status_code == 422

    r = client.get("/reports/high-value-order-lines", params={"loyalty_status": "Platinum"})
    assert r.status_code == 422

    r = client.get("/reports/products-by-price", params={"sort": "name"})
    assert r.status_code == 422

    r = client.get("/reports/low-stock-inventory", params={"threshold": -1})
    assert r.status_code == 422


def test_report_by_catalogue_name(client):
    _seed_demo(client)

    r = client.get("/reports/low_stock_inventory", params={"threshold": 11})
    assert r.status_code == 200
    body = r.json()
    assert [row["inventory_id"] for row in body["data"]] == [1]
    assert body["meta"]["report"] == "low_stock_inventory"
    assert body["meta"]["threshold"] == 11

    r = client.get("/reports/products_by_price", params={"descending": "false"})
    assert r.json()["data"][0]["name"] == "Apples"

    r = client.get("/reports/orders_in_period", params={"start": "2025-01-01", "end": "2025-12-31"})
    assert [row["order_id"] for row in r.json()["data"]] == [4]


def test_report_by_catalogue_name_errors(client):
    r = client.get("/reports/drop_everything")
    assert r.status_code == 404
    assert r.json()["ok"] is False

    assert client.get("/reports/low_stock_inventory", params={"limit": 5}).status_code == 422
    assert client.get("/reports/heavy_shipments", params={"min_weight": "heavy"}).status_code == 422
    assert client.get("/reports/orders_in_period", params={"start": "2024-12-31", "end": "2024-01-01"}).status_code == 422
