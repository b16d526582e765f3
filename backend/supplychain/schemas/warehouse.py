# backend/supplychain/schemas/warehouse.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

class WarehouseCreate(BaseModel):
    id: Optional[int] = None
    location: str
    capacity: Optional[int] = None

class InventoryCreate(BaseModel):
    id: Optional[int] = None
    product_id: int
    warehouse_id: int
    product_category: Optional[str] = None
    quantity_in_stock: Optional[int] = None

class ShipmentCreate(BaseModel):
    id: Optional[int] = None
    supplier_id: int
    warehouse_id: int
    delivery_date: Optional[date] = None
    status: Optional[str] = None
    weight: Optional[Decimal] = None

class ProductMovementCreate(BaseModel):
    id: Optional[int] = None
    shipment_id: int
    product_id: int
    warehouse_id: int
    quantity: int
    movement_type: str
    movement_date: Optional[datetime] = None
