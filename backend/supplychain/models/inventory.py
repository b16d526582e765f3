from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint, text
from sqlalchemy.orm import relationship
from ..core.db import Base

class Inventory(Base):
    __tablename__ = "inventories"

    id                = Column(Integer, primary_key=True, autoincrement=True)
    product_id        = Column(Integer, ForeignKey("products.id"), nullable=False)
    warehouse_id      = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    # denormalized copy of products.category read by the category reports
    product_category  = Column(String(100))
    quantity_in_stock = Column(Integer, nullable=False, server_default=text("0"))

    __table_args__ = (
        CheckConstraint("quantity_in_stock >= 0", name="ck_inventories_quantity_nonneg"),
    )

    product   = relationship("Product",   back_populates="inventories")
    warehouse = relationship("Warehouse", back_populates="inventories")
