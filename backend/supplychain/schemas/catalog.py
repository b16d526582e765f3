# backend/supplychain/schemas/catalog.py
from typing import Optional
from decimal import Decimal

from pydantic import BaseModel, EmailStr

# Value domains (enums, ranges) are left to the database CHECK constraints;
# these models only fix the shape of a row.

class SupplierCreate(BaseModel):
    id: Optional[int] = None
    name: str
    region: Optional[str] = None
    phone: Optional[str] = None
    email: EmailStr

class CustomerCreate(BaseModel):
    id: Optional[int] = None
    name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    loyalty_status: Optional[str] = None

class ProductCreate(BaseModel):
    id: Optional[int] = None
    name: str
    category: str
    unit_price: Decimal
    supplier_id: int

class SupplierProductCreate(BaseModel):
    id: Optional[int] = None
    supplier_id: int
    product_id: int
