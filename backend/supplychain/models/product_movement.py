from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from ..core.db import Base
from ..domain.constants import MOVEMENT_TYPES, in_list

class ProductMovement(Base):
    __tablename__ = "product_movements"

    id            = Column(Integer, primary_key=True, autoincrement=True)
    shipment_id   = Column(Integer, ForeignKey("shipments.id", ondelete="CASCADE"), nullable=False)
    product_id    = Column(Integer, ForeignKey("products.id"), nullable=False)
    warehouse_id  = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    quantity      = Column(Integer, nullable=False)
    movement_type = Column(String(20), nullable=False)
    movement_date = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_product_movements_quantity_positive"),
        CheckConstraint(in_list("movement_type", MOVEMENT_TYPES), name="ck_product_movements_type"),
    )

    shipment  = relationship("Shipment",  back_populates="movements")
    product   = relationship("Product",   back_populates="movements")
    warehouse = relationship("Warehouse", back_populates="movements")
