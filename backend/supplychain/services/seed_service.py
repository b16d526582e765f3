# backend/supplychain/services/seed_service.py
"""
Seed loading: insert a SeedData payload in foreign-key order, all or nothing.
"""
from __future__ import annotations
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Union

from sqlalchemy import insert, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..models import MODELS_BY_TABLE
from ..schemas.seed import SeedData
from ..domain.errors import ConstraintViolation

logger = logging.getLogger(__name__)


def _as_seed_data(data: Union[SeedData, Mapping[str, Any]]) -> SeedData:
    if isinstance(data, SeedData):
        return data
    return SeedData.model_validate(dict(data))


def _sync_sequences(db: Session, tables) -> None:
    # explicit ids do not advance PostgreSQL serial sequences
    if db.bind.dialect.name != "postgresql":
        return
    for table in tables:
        db.execute(
            text(
                "SELECT setval(pg_get_serial_sequence(:t, 'id'), "
                "COALESCE((SELECT MAX(id) FROM " + table + "), 1))"
            ),
            {"t": table},
        )


def seed(db: Session, data: Union[SeedData, Mapping[str, Any]]) -> Dict[str, int]:
    """
    Insert every row of `data` inside one transaction.

    Args:
        db: Open session
        data: SeedData, or a mapping of table name -> list of row dicts

    Returns:
        Inserted row count per table, in insert order

    Raises:
        ConstraintViolation: the first rejected table; nothing from the seed is kept
    """
    payload = _as_seed_data(data)
    counts: Dict[str, int] = {}
    table = None
    try:
        for table in SeedData.model_fields:
            rows = getattr(payload, table)
            if not rows:
                continue
            target = MODELS_BY_TABLE[table].__table__
            for row in rows:
                # unset keys take the column default; an explicit None stays NULL
                values = row.model_dump(exclude_unset=True)
                if values.get("id") is None:
                    values.pop("id", None)
                db.execute(insert(target).values(**values))
            counts[table] = len(rows)
        table = None
        _sync_sequences(db, counts)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        violation = ConstraintViolation.from_integrity_error(e, table)
        logger.warning("seed rolled back: %s", violation)
        raise violation from e
    except Exception:
        db.rollback()
        logger.exception("seed failed")
        raise

    logger.info("seed loaded: %s", ", ".join(f"{t}={n}" for t, n in counts.items()) or "nothing")
    return counts


# ---------- demo data (deterministic; every catalogued report returns rows) ----------

DEMO_DATA: Dict[str, list] = {
    "suppliers": [
        {"id": 1, "name": "ElectroWorld", "region": "Asia",          "phone": "+86-21-5550-0101", "email": "sales@electroworld.com"},
        {"id": 2, "name": "FreshFarms",   "region": "Europe",        "phone": "+31-10-555-0202",  "email": "orders@freshfarms.com"},
        {"id": 3, "name": "SteelWorks",   "region": "North America", "phone": "+1-312-555-0303",  "email": "supply@steelworks.com"},
        {"id": 4, "name": "GadgetHub",    "region": "Asia",          "phone": "+81-3-5550-0404",  "email": "hello@gadgethub.com"},
    ],
    "customers": [
        {"id": 1, "name": "Alice Martin", "email": "alice@shopmail.com", "loyalty_status": "Gold"},
        {"id": 2, "name": "Bob Chen",     "email": "bob@shopmail.com",   "loyalty_status": "Silver"},
        {"id": 3, "name": "Carla Ruiz",   "email": "carla@shopmail.com", "loyalty_status": "Bronze"},
    ],
    "warehouses": [
        {"id": 1, "location": "Shanghai",  "capacity": 10000},
        {"id": 2, "location": "Rotterdam", "capacity": 25000},
        {"id": 3, "location": "Chicago",   "capacity": 8000},
    ],
    "products": [
        {"id": 1, "name": "Phone",      "category": "Electronics",  "unit_price": Decimal("200.00"), "supplier_id": 1},
        {"id": 2, "name": "Laptop",     "category": "Electronics",  "unit_price": Decimal("900.00"), "supplier_id": 1},
        {"id": 3, "name": "Apples",     "category": "Groceries",    "unit_price": Decimal("1.50"),   "supplier_id": 2},
        {"id": 4, "name": "Steel Beam", "category": "Construction", "unit_price": Decimal("120.00"), "supplier_id": 3},
        {"id": 5, "name": "Headphones", "category": "Electronics",  "unit_price": Decimal("45.00"),  "supplier_id": 4},
    ],
    "supplier_products": [
        {"id": 1, "supplier_id": 1, "product_id": 1},
        {"id": 2, "supplier_id": 1, "product_id": 2},
        {"id": 3, "supplier_id": 2, "product_id": 3},
        {"id": 4, "supplier_id": 3, "product_id": 4},
        {"id": 5, "supplier_id": 4, "product_id": 1},
        {"id": 6, "supplier_id": 4, "product_id": 5},
    ],
    "orders": [
        {"id": 1, "customer_id": 1, "product_id": 1, "supplier_id": 1, "order_date": datetime(2024, 2, 10, 9, 30),  "status": "Completed"},
        {"id": 2, "customer_id": 2, "product_id": 3, "supplier_id": 2, "order_date": datetime(2024, 5, 3, 14, 0),   "status": "Pending"},
        {"id": 3, "customer_id": 3, "product_id": 4, "supplier_id": 3, "order_date": datetime(2024, 11, 20, 8, 15), "status": "Shipped"},
        {"id": 4, "customer_id": 1, "product_id": 2, "supplier_id": 1, "order_date": datetime(2025, 1, 15, 16, 45), "status": "Completed"},
        {"id": 5, "customer_id": 2, "product_id": 5, "supplier_id": 4, "order_date": datetime(2023, 12, 30, 11, 0), "status": "Cancelled"},
    ],
    "order_details": [
        {"id": 1, "order_id": 1, "product_id": 1, "quantity": 3},
        {"id": 2, "order_id": 2, "product_id": 3, "quantity": 100},
        {"id": 3, "order_id": 3, "product_id": 4, "quantity": 5},
        {"id": 4, "order_id": 4, "product_id": 2, "quantity": 1},
        {"id": 5, "order_id": 5, "product_id": 5, "quantity": 2},
    ],
    "inventories": [
        {"id": 1, "product_id": 1, "warehouse_id": 1, "product_category": "Electronics",  "quantity_in_stock": 10},
        {"id": 2, "product_id": 2, "warehouse_id": 1, "product_category": "Electronics",  "quantity_in_stock": 75},
        {"id": 3, "product_id": 3, "warehouse_id": 2, "product_category": "Groceries",    "quantity_in_stock": 500},
        {"id": 4, "product_id": 4, "warehouse_id": 3, "product_category": "Construction", "quantity_in_stock": 30},
        {"id": 5, "product_id": 5, "warehouse_id": 1, "product_category": "Electronics",  "quantity_in_stock": 40},
        {"id": 6, "product_id": 1, "warehouse_id": 3, "product_category": "Electronics",  "quantity_in_stock": 120},
    ],
    "shipments": [
        {"id": 1, "supplier_id": 1, "warehouse_id": 1, "delivery_date": date(2024, 3, 1),  "status": "Received",   "weight": Decimal("250.00")},
        {"id": 2, "supplier_id": 3, "warehouse_id": 3, "delivery_date": date(2024, 6, 12), "status": "Received",   "weight": Decimal("5400.00")},
        {"id": 3, "supplier_id": 2, "warehouse_id": 2, "delivery_date": date(2024, 9, 5),  "status": "In Transit", "weight": Decimal("1800.00")},
        {"id": 4, "supplier_id": 4, "warehouse_id": 1, "delivery_date": None,              "status": "Pending",    "weight": Decimal("80.00")},
    ],
    "product_movements": [
        {"id": 1, "shipment_id": 1, "product_id": 1, "warehouse_id": 1, "quantity": 50,  "movement_type": "Received",    "movement_date": datetime(2024, 3, 1)},
        {"id": 2, "shipment_id": 1, "product_id": 1, "warehouse_id": 1, "quantity": 20,  "movement_type": "Shipped",     "movement_date": datetime(2024, 3, 15)},
        {"id": 3, "shipment_id": 2, "product_id": 4, "warehouse_id": 3, "quantity": 40,  "movement_type": "Received",    "movement_date": datetime(2024, 6, 12)},
        {"id": 4, "shipment_id": 2, "product_id": 4, "warehouse_id": 3, "quantity": 10,  "movement_type": "Shipped",     "movement_date": datetime(2024, 7, 1)},
        {"id": 5, "shipment_id": 3, "product_id": 3, "warehouse_id": 2, "quantity": 200, "movement_type": "Transferred", "movement_date": datetime(2024, 9, 6)},
    ],
}


def seed_demo(db: Session) -> Dict[str, int]:
    return seed(db, DEMO_DATA)
