from sqlalchemy import Column, Integer, String, CheckConstraint, text
from sqlalchemy.orm import relationship
from ..core.db import Base
from ..domain.constants import LOYALTY_STATUSES, DEFAULT_LOYALTY_STATUS, in_list

class Customer(Base):
    __tablename__ = "customers"

    id             = Column(Integer, primary_key=True, autoincrement=True)
    name           = Column(String(200), nullable=False)
    email          = Column(String(200))
    phone          = Column(String(50))
    loyalty_status = Column(String(20), nullable=False, server_default=text(f"'{DEFAULT_LOYALTY_STATUS}'"))

    __table_args__ = (
        CheckConstraint(in_list("loyalty_status", LOYALTY_STATUSES), name="ck_customers_loyalty_status"),
    )

    orders = relationship("Order", back_populates="customer", passive_deletes="all")
