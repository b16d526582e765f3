"""initial supply chain schema: 10 tables, FK cascades, CHECK constraints

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17 09:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("region", sa.String(100)),
        sa.Column("phone", sa.String(50)),
        sa.Column("email", sa.String(200), nullable=False),
    )
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("email", sa.String(200)),
        sa.Column("phone", sa.String(50)),
        sa.Column("loyalty_status", sa.String(20), nullable=False, server_default=sa.text("'Bronze'")),
        sa.CheckConstraint("loyalty_status IN ('Bronze','Silver','Gold')", name="ck_customers_loyalty_status"),
    )
    op.create_table(
        "warehouses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("location", sa.String(200), nullable=False),
        sa.Column("capacity", sa.Integer()),
        sa.CheckConstraint("capacity IS NULL OR capacity >= 0", name="ck_warehouses_capacity_nonneg"),
    )
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id"), nullable=False),
        sa.CheckConstraint("unit_price >= 0", name="ck_products_unit_price_nonneg"),
    )
    op.create_table(
        "supplier_products",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.UniqueConstraint("supplier_id", "product_id", name="uq_supplier_products_pair"),
    )
    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False),
        sa.Column("order_date", sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'Pending'")),
        sa.CheckConstraint("status IN ('Pending','Completed','Shipped','Cancelled')", name="ck_orders_status"),
    )
    op.create_table(
        "order_details",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_order_details_quantity_positive"),
    )
    op.create_table(
        "inventories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), sa.ForeignKey("warehouses.id"), nullable=False),
        sa.Column("product_category", sa.String(100)),
        sa.Column("quantity_in_stock", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.CheckConstraint("quantity_in_stock >= 0", name="ck_inventories_quantity_nonneg"),
    )
    op.create_table(
        "shipments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("supplier_id", sa.Integer(), sa.ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), sa.ForeignKey("warehouses.id"), nullable=False),
        sa.Column("delivery_date", sa.Date()),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'Pending'")),
        sa.Column("weight", sa.Numeric(10, 2)),
        sa.CheckConstraint("status IN ('Pending','In Transit','Received','Cancelled')", name="ck_shipments_status"),
    )
    op.create_table(
        "product_movements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("shipment_id", sa.Integer(), sa.ForeignKey("shipments.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("warehouse_id", sa.Integer(), sa.ForeignKey("warehouses.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("movement_type", sa.String(20), nullable=False),
        sa.Column("movement_date", sa.DateTime(), nullable=False, server_default=sa.func.current_timestamp()),
        sa.CheckConstraint("quantity > 0", name="ck_product_movements_quantity_positive"),
        sa.CheckConstraint(
            "movement_type IN ('Received','Shipped','Transferred','Returned')",
            name="ck_product_movements_type",
        ),
    )


def downgrade() -> None:
    for table in (
        "product_movements",
        "shipments",
        "inventories",
        "order_details",
        "orders",
        "supplier_products",
        "products",
        "warehouses",
        "customers",
        "suppliers",
    ):
        op.drop_table(table)
