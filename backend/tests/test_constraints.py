from datetime import datetime

import pytest

from supplychain.domain.errors import ConstraintViolation, UnknownEntity
from supplychain.services.record_service import count_records, create_record, as_dict


def test_customer_loyalty_status_outside_enum_is_rejected(db, make):
    make("customers", name="Known", loyalty_status="Silver")

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "customers", {"name": "Platinum Pete", "loyalty_status": "Platinum"})

    assert exc.value.kind == "check"
    assert exc.value.table == "customers"
    assert count_records(db, "customers") == 1


def test_customer_loyalty_defaults_to_bronze(make):
    c = make("customers", name="New Customer")
    assert c.loyalty_status == "Bronze"


def test_inventory_without_product_is_rejected(db, warehouse):
    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "inventories", {"warehouse_id": warehouse.id, "quantity_in_stock": 5})

    assert exc.value.kind == "not_null"
    assert count_records(db, "inventories") == 0


def test_inventory_negative_stock_is_rejected(db, product, warehouse):
    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "inventories", {
            "product_id": product.id, "warehouse_id": warehouse.id, "quantity_in_stock": -1,
        })
    assert exc.value.kind == "check"


def test_inventory_stock_defaults_to_zero(make, product, warehouse):
    inv = make("inventories", product_id=product.id, warehouse_id=warehouse.id)
    assert inv.quantity_in_stock == 0


@pytest.mark.parametrize("entity, values", [
    ("inventories", {"quantity_in_stock": None}),
    ("customers", {"name": "Nulla", "loyalty_status": None}),
    ("orders", {"status": None}),
    ("orders", {"order_date": None}),
    ("product_movements", {"quantity": 1, "movement_type": "Received", "movement_date": None}),
])
def test_explicit_null_in_defaulted_column_is_rejected(db, make, customer, product, supplier, warehouse, entity, values):
    parents = {
        "inventories": {"product_id": product.id, "warehouse_id": warehouse.id},
        "customers": {},
        "orders": {"customer_id": customer.id, "product_id": product.id, "supplier_id": supplier.id},
        "product_movements": {"product_id": product.id, "warehouse_id": warehouse.id},
    }[entity]
    if entity == "product_movements":
        parents["shipment_id"] = make("shipments", supplier_id=supplier.id, warehouse_id=warehouse.id).id
    before = count_records(db, entity)

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, entity, {**parents, **values})

    assert exc.value.kind == "not_null"
    assert exc.value.table == entity
    assert count_records(db, entity) == before


def test_supplier_requires_name_and_email(db):
    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "suppliers", {"name": "No Contact"})
    assert exc.value.kind == "not_null"
    assert count_records(db, "suppliers") == 0


def test_product_negative_price_is_rejected(db, supplier):
    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "products", {
            "name": "Broken", "category": "Electronics", "unit_price": -1, "supplier_id": supplier.id,
        })
    assert exc.value.kind == "check"


def test_product_free_item_is_allowed(make, supplier):
    p = make("products", name="Sticker", category="Promo", unit_price=0, supplier_id=supplier.id)
    assert p.id is not None


def test_product_with_unknown_supplier_is_rejected(db):
    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "products", {
            "name": "Orphan", "category": "Electronics", "unit_price": 10, "supplier_id": 999,
        })
    assert exc.value.kind == "foreign_key"
    assert count_records(db, "products") == 0


def test_order_defaults_and_status_check(db, make, customer, product, supplier):
    order = make("orders", customer_id=customer.id, product_id=product.id, supplier_id=supplier.id)

    assert order.status == "Pending"
    assert isinstance(order.order_date, datetime)

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "orders", {
            "customer_id": customer.id, "product_id": product.id,
            "supplier_id": supplier.id, "status": "Lost",
        })
    assert exc.value.kind == "check"
    assert count_records(db, "orders") == 1


@pytest.mark.parametrize("quantity", [0, -3])
def test_order_detail_quantity_must_be_positive(db, make, customer, product, supplier, quantity):
    order = make("orders", customer_id=customer.id, product_id=product.id, supplier_id=supplier.id)

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "order_details", {"order_id": order.id, "product_id": product.id, "quantity": quantity})

    assert exc.value.kind == "check"
    assert count_records(db, "order_details") == 0


def test_order_detail_for_missing_order_is_rejected(db, product):
    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "order_details", {"order_id": 42, "product_id": product.id, "quantity": 1})
    assert exc.value.kind == "foreign_key"


def test_shipment_status_check(db, make, supplier, warehouse):
    ok_row = make("shipments", supplier_id=supplier.id, warehouse_id=warehouse.id, status="In Transit", weight=12.5)
    assert ok_row.status == "In Transit"

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "shipments", {"supplier_id": supplier.id, "warehouse_id": warehouse.id, "status": "Teleported"})
    assert exc.value.kind == "check"


def test_product_movement_checks(db, make, supplier, warehouse, product):
    shipment = make("shipments", supplier_id=supplier.id, warehouse_id=warehouse.id, status="Received")
    base = {"shipment_id": shipment.id, "product_id": product.id, "warehouse_id": warehouse.id}

    moved = make("product_movements", quantity=5, movement_type="Shipped", **base)
    assert moved.movement_date is not None

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "product_movements", {**base, "quantity": 5, "movement_type": "Stolen"})
    assert exc.value.kind == "check"

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "product_movements", {**base, "quantity": 0, "movement_type": "Shipped"})
    assert exc.value.kind == "check"

    assert count_records(db, "product_movements") == 1


def test_supplier_product_pair_is_unique(db, make, supplier, product):
    make("supplier_products", supplier_id=supplier.id, product_id=product.id)

    with pytest.raises(ConstraintViolation) as exc:
        create_record(db, "supplier_products", {"supplier_id": supplier.id, "product_id": product.id})

    assert exc.value.kind == "unique"
    assert count_records(db, "supplier_products") == 1


def test_warehouse_capacity_cannot_be_negative(db):
    with pytest.raises(ConstraintViolation):
        create_record(db, "warehouses", {"location": "Nowhere", "capacity": -10})


def test_session_is_usable_after_rejection(db, make):
    with pytest.raises(ConstraintViolation):
        create_record(db, "customers", {"name": "X", "loyalty_status": "Diamond"})

    c = make("customers", name="Y", loyalty_status="Gold")
    assert as_dict(c)["loyalty_status"] == "Gold"


def test_unknown_entity_and_columns(db):
    with pytest.raises(UnknownEntity):
        create_record(db, "invoices", {"total": 1})
    with pytest.raises(ValueError):
        create_record(db, "customers", {"name": "Z", "shoe_size": 44})
