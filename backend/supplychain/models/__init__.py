from .supplier import Supplier
from .customer import Customer
from .product import Product
from .order import Order, OrderDetail
from .warehouse import Warehouse
from .inventory import Inventory
from .shipment import Shipment
from .product_movement import ProductMovement
from .supplier_product import SupplierProduct

# FK dependency order: parents before children
MODELS = (
    Supplier,
    Customer,
    Warehouse,
    Product,
    SupplierProduct,
    Order,
    OrderDetail,
    Inventory,
    Shipment,
    ProductMovement,
)

MODELS_BY_TABLE = {m.__tablename__: m for m in MODELS}

__all__ = [
    "Supplier", "Customer", "Product", "Order", "OrderDetail", "Warehouse",
    "Inventory", "Shipment", "ProductMovement", "SupplierProduct",
    "MODELS", "MODELS_BY_TABLE",
]
