from sqlalchemy import Column, Integer, String, CheckConstraint
from sqlalchemy.orm import relationship
from ..core.db import Base

class Warehouse(Base):
    __tablename__ = "warehouses"

    id       = Column(Integer, primary_key=True, autoincrement=True)
    location = Column(String(200), nullable=False)
    capacity = Column(Integer)

    __table_args__ = (
        CheckConstraint("capacity IS NULL OR capacity >= 0", name="ck_warehouses_capacity_nonneg"),
    )

    inventories = relationship("Inventory",       back_populates="warehouse", passive_deletes="all")
    shipments   = relationship("Shipment",        back_populates="warehouse", passive_deletes="all")
    movements   = relationship("ProductMovement", back_populates="warehouse", passive_deletes="all")
