# backend/supplychain/services/query_service.py
"""
Read-only report queries over the supply-chain schema.

Every accessor takes a Session and returns a list of dicts whose keys follow
the projection order. Row order is only guaranteed where an ORDER BY is
present.
"""
from __future__ import annotations
import inspect
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Mapping, Optional

from sqlalchemy import func, desc
from sqlalchemy.orm import Session

from ..models import (
    Customer,
    Inventory,
    Order,
    OrderDetail,
    Product,
    ProductMovement,
    Shipment,
    Supplier,
    SupplierProduct,
    Warehouse,
)
from ..domain.errors import UnknownQuery

Row = Dict[str, Any]

LOW_STOCK_THRESHOLD = 50
CATEGORY_STOCK_THRESHOLD = 20
DEFAULT_CATEGORY = "Electronics"
HEAVY_SHIPMENT_WEIGHT = Decimal("1000")
HIGH_VALUE_THRESHOLD = Decimal("500")
PERIOD_START = date(2024, 1, 1)
PERIOD_END = date(2024, 12, 31)


def _rows(q) -> List[Row]:
    return [dict(r._mapping) for r in q.all()]


# =========================
# Joins
# =========================
def orders_overview(db: Session) -> List[Row]:
    q = (
        db.query(
            Order.id.label("order_id"),
            Customer.name.label("customer_name"),
            Product.name.label("product_name"),
            Order.order_date.label("order_date"),
            Order.status.label("status"),
        )
        .join(Customer, Customer.id == Order.customer_id)
        .join(Product, Product.id == Order.product_id)
    )
    return _rows(q)


def supplier_catalog(db: Session) -> List[Row]:
    """Products each supplier can deliver, through the supplier_products link."""
    q = (
        db.query(
            Supplier.name.label("supplier_name"),
            Product.name.label("product_name"),
            Product.category.label("category"),
        )
        .join(SupplierProduct, SupplierProduct.supplier_id == Supplier.id)
        .join(Product, Product.id == SupplierProduct.product_id)
        .order_by(Supplier.name, Product.name)
    )
    return _rows(q)


# =========================
# Predicate filters
# =========================
def completed_orders(db: Session) -> List[Row]:
    q = (
        db.query(
            Order.id.label("order_id"),
            Customer.name.label("customer_name"),
            Order.order_date.label("order_date"),
        )
        .join(Customer, Customer.id == Order.customer_id)
        .filter(Order.status == "Completed")
    )
    return _rows(q)


def orders_in_period(db: Session, start: date = PERIOD_START, end: date = PERIOD_END) -> List[Row]:
    """Orders placed between two calendar days, both days included."""
    if end < start:
        raise ValueError("end must not be before start")
    start_dt = datetime.combine(start, time.min)
    end_dt = datetime.combine(end + timedelta(days=1), time.min)
    q = (
        db.query(
            Order.id.label("order_id"),
            Order.customer_id.label("customer_id"),
            Order.order_date.label("order_date"),
            Order.status.label("status"),
        )
        .filter(Order.order_date >= start_dt, Order.order_date < end_dt)
        .order_by(Order.order_date.asc())
    )
    return _rows(q)


def low_stock_inventory(db: Session, threshold: int = LOW_STOCK_THRESHOLD) -> List[Row]:
    q = (
        db.query(
            Inventory.id.label("inventory_id"),
            Product.name.label("product_name"),
            Warehouse.location.label("warehouse_location"),
            Inventory.quantity_in_stock.label("quantity_in_stock"),
        )
        .join(Product, Product.id == Inventory.product_id)
        .join(Warehouse, Warehouse.id == Inventory.warehouse_id)
        .filter(Inventory.quantity_in_stock < threshold)
    )
    return _rows(q)


def low_stock_by_category(
    db: Session,
    threshold: int = CATEGORY_STOCK_THRESHOLD,
    category: str = DEFAULT_CATEGORY,
) -> List[Row]:
    q = (
        db.query(
            Product.name.label("product_name"),
            Product.category.label("category"),
            Inventory.quantity_in_stock.label("quantity_in_stock"),
            Warehouse.location.label("warehouse_location"),
        )
        .join(Product, Product.id == Inventory.product_id)
        .join(Warehouse, Warehouse.id == Inventory.warehouse_id)
        .filter(Inventory.quantity_in_stock < threshold, Product.category == category)
    )
    return _rows(q)


def heavy_shipments(db: Session, min_weight: Decimal = HEAVY_SHIPMENT_WEIGHT) -> List[Row]:
    q = (
        db.query(
            Shipment.id.label("shipment_id"),
            Supplier.name.label("supplier_name"),
            Warehouse.location.label("warehouse_location"),
            Shipment.weight.label("weight"),
            Shipment.status.label("status"),
        )
        .join(Supplier, Supplier.id == Shipment.supplier_id)
        .join(Warehouse, Warehouse.id == Shipment.warehouse_id)
        .filter(Shipment.weight > min_weight)
    )
    return _rows(q)


def received_shipments(db: Session) -> List[Row]:
    q = (
        db.query(
            Shipment.id.label("shipment_id"),
            Supplier.name.label("supplier_name"),
            Warehouse.location.label("warehouse_location"),
            Shipment.delivery_date.label("delivery_date"),
        )
        .join(Supplier, Supplier.id == Shipment.supplier_id)
        .join(Warehouse, Warehouse.id == Shipment.warehouse_id)
        .filter(Shipment.status == "Received")
    )
    return _rows(q)


def shipped_movements(db: Session) -> List[Row]:
    q = (
        db.query(
            ProductMovement.id.label("movement_id"),
            Product.name.label("product_name"),
            Warehouse.location.label("warehouse_location"),
            ProductMovement.quantity.label("quantity"),
            ProductMovement.movement_date.label("movement_date"),
        )
        .join(Product, Product.id == ProductMovement.product_id)
        .join(Warehouse, Warehouse.id == ProductMovement.warehouse_id)
        .filter(ProductMovement.movement_type == "Shipped")
    )
    return _rows(q)


# =========================
# Derived columns
# =========================
def high_value_order_lines(
    db: Session,
    threshold: Decimal = HIGH_VALUE_THRESHOLD,
    loyalty_status: Optional[str] = None,
) -> List[Row]:
    """Order lines whose quantity * unit_price exceeds the threshold."""
    total_value = (OrderDetail.quantity * Product.unit_price).label("total_value")
    q = (
        db.query(
            Order.id.label("order_id"),
            Customer.name.label("customer_name"),
            Customer.loyalty_status.label("loyalty_status"),
            Product.name.label("product_name"),
            OrderDetail.quantity.label("quantity"),
            Product.unit_price.label("unit_price"),
            total_value,
        )
        .join(Order, Order.id == OrderDetail.order_id)
        .join(Customer, Customer.id == Order.customer_id)
        .join(Product, Product.id == OrderDetail.product_id)
        .filter(OrderDetail.quantity * Product.unit_price > threshold)
    )
    if loyalty_status:
        q = q.filter(Customer.loyalty_status == loyalty_status)
    return _rows(q)


# =========================
# Sorting
# =========================
def products_by_price(db: Session, descending: bool = True) -> List[Row]:
    q = db.query(
        Product.id.label("product_id"),
        Product.name.label("name"),
        Product.category.label("category"),
        Product.unit_price.label("unit_price"),
    )
    col = Product.unit_price
    q = q.order_by(col.desc() if descending else col.asc(), Product.id)
    return _rows(q)


def suppliers_by_name(db: Session) -> List[Row]:
    q = (
        db.query(
            Supplier.id.label("supplier_id"),
            Supplier.name.label("name"),
            Supplier.region.label("region"),
        )
        .order_by(Supplier.name.asc())
    )
    return _rows(q)


# =========================
# DISTINCT
# =========================
def distinct_inventory_categories(db: Session) -> List[Row]:
    q = (
        db.query(Inventory.product_category.label("product_category"))
        .filter(Inventory.product_category.isnot(None))
        .distinct()
    )
    return _rows(q)


def distinct_supplier_regions(db: Session) -> List[Row]:
    q = (
        db.query(Supplier.region.label("region"))
        .filter(Supplier.region.isnot(None))
        .distinct()
    )
    return _rows(q)


def distinct_supplier_categories(db: Session) -> List[Row]:
    q = (
        db.query(
            Supplier.name.label("supplier_name"),
            Product.category.label("category"),
        )
        .join(Product, Product.supplier_id == Supplier.id)
        .distinct()
    )
    return _rows(q)


# =========================
# Aggregation
# =========================
def stock_by_warehouse(db: Session) -> List[Row]:
    q = (
        db.query(
            Warehouse.id.label("warehouse_id"),
            Warehouse.location.label("warehouse_location"),
            func.sum(Inventory.quantity_in_stock).label("total_stock"),
        )
        .join(Inventory, Inventory.warehouse_id == Warehouse.id)
        .group_by(Warehouse.id, Warehouse.location)
        .order_by(desc("total_stock"), Warehouse.location)
    )
    return _rows(q)


def order_count_by_status(db: Session) -> List[Row]:
    q = (
        db.query(
            Order.status.label("status"),
            func.count(Order.id).label("order_count"),
        )
        .group_by(Order.status)
        .order_by(Order.status)
    )
    return _rows(q)


QUERY_CATALOG: Dict[str, Callable[..., List[Row]]] = {
    "orders_overview": orders_overview,
    "completed_orders": completed_orders,
    "orders_in_period": orders_in_period,
    "low_stock_inventory": low_stock_inventory,
    "low_stock_by_category": low_stock_by_category,
    "heavy_shipments": heavy_shipments,
    "received_shipments": received_shipments,
    "shipped_movements": shipped_movements,
    "high_value_order_lines": high_value_order_lines,
    "products_by_price": products_by_price,
    "suppliers_by_name": suppliers_by_name,
    "supplier_catalog": supplier_catalog,
    "distinct_inventory_categories": distinct_inventory_categories,
    "distinct_supplier_regions": distinct_supplier_regions,
    "distinct_supplier_categories": distinct_supplier_categories,
    "stock_by_warehouse": stock_by_warehouse,
    "order_count_by_status": order_count_by_status,
}


def get_query(name: str) -> Callable[..., List[Row]]:
    fn = QUERY_CATALOG.get(name)
    if fn is None:
        raise UnknownQuery(name)
    return fn


def run_query(db: Session, name: str, **params) -> List[Row]:
    return get_query(name)(db, **params)


def _coerce(default: Any, raw: str) -> Any:
    # bool before int: bool is an int subclass
    if isinstance(default, bool):
        if raw.lower() in ("1", "true", "yes"):
            return True
        if raw.lower() in ("0", "false", "no"):
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    if isinstance(default, int):
        return int(raw)
    if isinstance(default, Decimal):
        try:
            return Decimal(raw)
        except InvalidOperation:
            raise ValueError(f"not a number: {raw!r}") from None
    if isinstance(default, date):
        return date.fromisoformat(raw)
    return raw


def parse_params(name: str, raw: Mapping[str, str]) -> Dict[str, Any]:
    """
    Query-string values -> typed keyword arguments for the named query.
    Types follow each parameter's default; unknown or malformed values raise ValueError.
    """
    signature = inspect.signature(get_query(name))
    accepted = {p.name: p.default for p in list(signature.parameters.values())[1:]}
    params: Dict[str, Any] = {}
    for key, value in raw.items():
        if key not in accepted:
            raise ValueError(f"{name}: unknown parameter {key!r}")
        try:
            params[key] = _coerce(accepted[key], value)
        except ValueError as e:
            raise ValueError(f"{name}: bad value for {key!r}: {e}") from None
    return params
