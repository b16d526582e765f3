from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, CheckConstraint, func, text
from sqlalchemy.orm import relationship
from ..core.db import Base
from ..domain.constants import ORDER_STATUSES, DEFAULT_ORDER_STATUS, in_list

class Order(Base):
    __tablename__ = "orders"

    id          = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False)
    product_id  = Column(Integer, ForeignKey("products.id"), nullable=False)
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False)
    order_date  = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    status      = Column(String(20), nullable=False, server_default=text(f"'{DEFAULT_ORDER_STATUS}'"))

    __table_args__ = (
        CheckConstraint(in_list("status", ORDER_STATUSES), name="ck_orders_status"),
    )

    customer = relationship("Customer", back_populates="orders")
    supplier = relationship("Supplier", back_populates="orders")
    product  = relationship("Product")
    details  = relationship("OrderDetail", back_populates="order", passive_deletes=True)


class OrderDetail(Base):
    __tablename__ = "order_details"

    id         = Column(Integer, primary_key=True, autoincrement=True)
    order_id   = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity   = Column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_details_quantity_positive"),
    )

    order   = relationship("Order",   back_populates="details")
    product = relationship("Product", back_populates="order_details")
