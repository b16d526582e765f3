# backend/supplychain/schemas/orders.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

class OrderCreate(BaseModel):
    id: Optional[int] = None
    customer_id: int
    product_id: int
    supplier_id: int
    order_date: Optional[datetime] = None  # engine default: CURRENT_TIMESTAMP
    status: Optional[str] = None           # engine default: 'Pending'

class OrderDetailCreate(BaseModel):
    id: Optional[int] = None
    order_id: int
    product_id: int
    quantity: int
