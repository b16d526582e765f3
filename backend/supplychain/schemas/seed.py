# backend/supplychain/schemas/seed.py
from typing import Dict, List, Type

from pydantic import BaseModel

from .catalog import SupplierCreate, CustomerCreate, ProductCreate, SupplierProductCreate
from .orders import OrderCreate, OrderDetailCreate
from .warehouse import WarehouseCreate, InventoryCreate, ShipmentCreate, ProductMovementCreate

# table name -> row shape accepted on insert
CREATE_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "suppliers": SupplierCreate,
    "customers": CustomerCreate,
    "warehouses": WarehouseCreate,
    "products": ProductCreate,
    "supplier_products": SupplierProductCreate,
    "orders": OrderCreate,
    "order_details": OrderDetailCreate,
    "inventories": InventoryCreate,
    "shipments": ShipmentCreate,
    "product_movements": ProductMovementCreate,
}

class SeedData(BaseModel):
    """Rows to insert, keyed by table. Field order is the insert order."""
    suppliers: List[SupplierCreate] = []
    customers: List[CustomerCreate] = []
    warehouses: List[WarehouseCreate] = []
    products: List[ProductCreate] = []
    supplier_products: List[SupplierProductCreate] = []
    orders: List[OrderCreate] = []
    order_details: List[OrderDetailCreate] = []
    inventories: List[InventoryCreate] = []
    shipments: List[ShipmentCreate] = []
    product_movements: List[ProductMovementCreate] = []
