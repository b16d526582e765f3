from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..core.db import Base

class Supplier(Base):
    __tablename__ = "suppliers"

    id     = Column(Integer, primary_key=True, autoincrement=True)
    name   = Column(String(200), nullable=False)
    region = Column(String(100))
    phone  = Column(String(50))
    email  = Column(String(200), nullable=False)

    # cascaded by the engine (ON DELETE CASCADE), not by the ORM
    orders            = relationship("Order",           back_populates="supplier", passive_deletes=True)
    shipments         = relationship("Shipment",        back_populates="supplier", passive_deletes=True)

    # restrict: a supplier still owning products or catalogue links cannot be deleted
    products          = relationship("Product",         back_populates="supplier", passive_deletes="all")
    supplier_products = relationship("SupplierProduct", back_populates="supplier", passive_deletes="all")

    def __repr__(self):
        return f"<Supplier(id={self.id}, name='{self.name}')>"
