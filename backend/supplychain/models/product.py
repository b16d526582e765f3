from sqlalchemy import Column, Integer, String, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from ..core.db import Base

class Product(Base):
    __tablename__ = "products"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    name        = Column(String(200), nullable=False)
    category    = Column(String(100), nullable=False)
    unit_price  = Column(Numeric(10, 2), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)

    __table_args__ = (
        CheckConstraint("unit_price >= 0", name="ck_products_unit_price_nonneg"),
    )

    supplier = relationship("Supplier", back_populates="products")

    # no cascade on these edges: the engine rejects the delete while rows reference the product
    order_details = relationship("OrderDetail",     back_populates="product", passive_deletes="all")
    inventories   = relationship("Inventory",       back_populates="product", passive_deletes="all")
    movements     = relationship("ProductMovement", back_populates="product", passive_deletes="all")
    supplier_products = relationship("SupplierProduct", back_populates="product", passive_deletes="all")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', category='{self.category}')>"
