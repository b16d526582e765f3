from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from ..core.db import Base

class SupplierProduct(Base):
    """Many-to-many link: which suppliers can deliver which products."""
    __tablename__ = "supplier_products"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), nullable=False)
    product_id  = Column(Integer, ForeignKey("products.id"), nullable=False)

    __table_args__ = (
        UniqueConstraint("supplier_id", "product_id", name="uq_supplier_products_pair"),
    )

    supplier = relationship("Supplier", back_populates="supplier_products")
    product  = relationship("Product",  back_populates="supplier_products")
