# backend/supplychain/routers/reports.py
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from ..core.db import get_db
from ..core.api import ok, list_meta
from ..domain.constants import LOYALTY_STATUSES
from ..services import query_service as qs

router = APIRouter(prefix="/reports", tags=["reports"])

# ---------- shared: date range validation ----------
def validate_period(
    start: date = Query(qs.PERIOD_START, description="first day, e.g. 2024-01-01"),
    end:   date = Query(qs.PERIOD_END,   description="last day (included), e.g. 2024-12-31"),
) -> Tuple[date, date]:
    if end < start:
        raise HTTPException(status_code=422, detail="Invalid range: 'end' must not be before 'start'.")
    return (start, end)

def _report(name: str, rows: List[dict], **extra):
    return ok(rows, meta=list_meta(rows, {"report": name, **extra}))

@router.get("")
def list_reports():
    items = [{"name": name, "path": f"/reports/{name.replace('_', '-')}"} for name in qs.QUERY_CATALOG]
    return ok(items, meta=list_meta(items))

# =========================
# JOINS
# =========================
@router.get("/orders-overview")
def orders_overview(db: Session = Depends(get_db)):
    return _report("orders_overview", qs.orders_overview(db))

@router.get("/supplier-catalog")
def supplier_catalog(db: Session = Depends(get_db)):
    return _report("supplier_catalog", qs.supplier_catalog(db))

# =========================
# FILTERS
# =========================
@router.get("/completed-orders")
def completed_orders(db: Session = Depends(get_db)):
    return _report("completed_orders", qs.completed_orders(db))

@router.get("/orders-in-period")
def orders_in_period(
    period: Tuple[date, date] = Depends(validate_period),
    db: Session = Depends(get_db),
):
    start, end = period
    rows = qs.orders_in_period(db, start=start, end=end)
    return _report("orders_in_period", rows, start=start.isoformat(), end=end.isoformat())

@router.get("/low-stock-inventory")
def low_stock_inventory(
    threshold: int = Query(qs.LOW_STOCK_THRESHOLD, ge=0),
    db: Session = Depends(get_db),
):
    return _report("low_stock_inventory", qs.low_stock_inventory(db, threshold=threshold), threshold=threshold)

@router.get("/low-stock-by-category")
def low_stock_by_category(
    threshold: int = Query(qs.CATEGORY_STOCK_THRESHOLD, ge=0),
    category: str = Query(qs.DEFAULT_CATEGORY, min_length=1),
    db: Session = Depends(get_db),
):
    rows = qs.low_stock_by_category(db, threshold=threshold, category=category)
    return _report("low_stock_by_category", rows, threshold=threshold, category=category)

@router.get("/heavy-shipments")
def heavy_shipments(
    min_weight: Decimal = Query(qs.HEAVY_SHIPMENT_WEIGHT, ge=0),
    db: Session = Depends(get_db),
):
    return _report("heavy_shipments", qs.heavy_shipments(db, min_weight=min_weight), min_weight=min_weight)

@router.get("/received-shipments")
def received_shipments(db: Session = Depends(get_db)):
    return _report("received_shipments", qs.received_shipments(db))

@router.get("/shipped-movements")
def shipped_movements(db: Session = Depends(get_db)):
    return _report("shipped_movements", qs.shipped_movements(db))

# =========================
# DERIVED COLUMNS
# =========================
@router.get("/high-value-order-lines")
def high_value_order_lines(
    threshold: Decimal = Query(qs.HIGH_VALUE_THRESHOLD, ge=0),
    loyalty_status: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if loyalty_status is not None and loyalty_status not in LOYALTY_STATUSES:
        raise HTTPException(status_code=422, detail=f"loyalty_status must be one of {', '.join(LOYALTY_STATUSES)}")
    rows = qs.high_value_order_lines(db, threshold=threshold, loyalty_status=loyalty_status)
    return _report("high_value_order_lines", rows, threshold=threshold, loyalty_status=loyalty_status)

# =========================
# SORTING
# =========================
@router.get("/products-by-price")
def products_by_price(
    sort: str = Query("-unit_price", description="Allowed: unit_price, -unit_price"),
    db: Session = Depends(get_db),
):
    if sort not in ("unit_price", "-unit_price"):
        raise HTTPException(status_code=422, detail="sort must be 'unit_price' or '-unit_price'")
    rows = qs.products_by_price(db, descending=sort.startswith("-"))
    return _report("products_by_price", rows, sort=sort)

@router.get("/suppliers-by-name")
def suppliers_by_name(db: Session = Depends(get_db)):
    return _report("suppliers_by_name", qs.suppliers_by_name(db))

# =========================
# DISTINCT
# =========================
@router.get("/distinct-inventory-categories")
def distinct_inventory_categories(db: Session = Depends(get_db)):
    return _report("distinct_inventory_categories", qs.distinct_inventory_categories(db))

@router.get("/distinct-supplier-regions")
def distinct_supplier_regions(db: Session = Depends(get_db)):
    return _report("distinct_supplier_regions", qs.distinct_supplier_regions(db))

@router.get("/distinct-supplier-categories")
def distinct_supplier_categories(db: Session = Depends(get_db)):
    return _report("distinct_supplier_categories", qs.distinct_supplier_categories(db))

# =========================
# AGGREGATION
# =========================
@router.get("/stock-by-warehouse")
def stock_by_warehouse(db: Session = Depends(get_db)):
    return _report("stock_by_warehouse", qs.stock_by_warehouse(db))

@router.get("/order-count-by-status")
def order_count_by_status(db: Session = Depends(get_db)):
    return _report("order_count_by_status", qs.order_count_by_status(db))

# =========================
# BY CATALOGUE NAME (registered last so the typed routes above win)
# =========================
@router.get("/{name}")
def run_named_report(name: str, request: Request, db: Session = Depends(get_db)):
    # "low-stock-inventory" and "low_stock_inventory" name the same report
    key = name.replace("-", "_")
    params = qs.parse_params(key, request.query_params)
    return _report(key, qs.run_query(db, key, **params), **params)
