from sqlalchemy import Column, Integer, String, Date, Numeric, ForeignKey, CheckConstraint, text
from sqlalchemy.orm import relationship
from ..core.db import Base
from ..domain.constants import SHIPMENT_STATUSES, DEFAULT_SHIPMENT_STATUS, in_list

class Shipment(Base):
    __tablename__ = "shipments"

    id            = Column(Integer, primary_key=True, autoincrement=True)
    supplier_id   = Column(Integer, ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False)
    warehouse_id  = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    delivery_date = Column(Date)
    status        = Column(String(20), nullable=False, server_default=text(f"'{DEFAULT_SHIPMENT_STATUS}'"))
    weight        = Column(Numeric(10, 2))

    __table_args__ = (
        CheckConstraint(in_list("status", SHIPMENT_STATUSES), name="ck_shipments_status"),
    )

    supplier  = relationship("Supplier",  back_populates="shipments")
    warehouse = relationship("Warehouse", back_populates="shipments")
    movements = relationship("ProductMovement", back_populates="shipment", passive_deletes=True)
