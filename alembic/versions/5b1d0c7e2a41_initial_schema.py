"""initial_schema

Revision ID: 5b1d0c7e2a41
Revises:
Create Date: 2026-10-18 09:12:44.210381
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1d0c7e2a41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""

    # MANUFACTURERS
    op.create_table(
        "manufacturer",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("id_type", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_manufacturer_id", "manufacturer", ["id"], unique=False)

    # PRODUCTS
    op.create_table(
        "product",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=True),
        sa.Column("storage_condition", sa.String(), nullable=False),
        sa.Column(
            "manufacturer_id",
            sa.String(),
            sa.ForeignKey("manufacturer.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
    )
    op.create_index("ix_product_id", "product", ["id"], unique=False)
    op.create_index("ix_product_manufacturer_id", "product", ["manufacturer_id"], unique=False)

    # WAREHOUSES
    op.create_table(
        "warehouse",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_warehouse_id", "warehouse", ["id"], unique=False)

    # INVENTORY LOTS
    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column(
            "warehouse_id",
            sa.Integer(),
            sa.ForeignKey("warehouse.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.CheckConstraint("quantity >= 0", name="ck_inventory_quantity_non_negative"),
    )
    op.create_index("ix_inventory_id", "inventory", ["id"], unique=False)
    op.create_index("ix_inventory_warehouse_id", "inventory", ["warehouse_id"], unique=False)

    op.create_table(
        "inventory_product",
        sa.Column(
            "inventory_id",
            sa.Integer(),
            sa.ForeignKey("inventory.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("product.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("ix_inventory_product_product_id", "inventory_product", ["product_id"], unique=False)

    # SALESPEOPLE & CUSTOMERS
    op.create_table(
        "salesperson",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("id_type", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_salesperson_id", "salesperson", ["id"], unique=False)
    op.create_index("ix_salesperson_email", "salesperson", ["email"], unique=True)

    op.create_table(
        "customer",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("id_type", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("address", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column(
            "salesperson_id",
            sa.String(),
            sa.ForeignKey("salesperson.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_customer_id", "customer", ["id"], unique=False)
    op.create_index("ix_customer_salesperson_id", "customer", ["salesperson_id"], unique=False)

    # ORDERS
    op.create_table(
        "order",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("total", sa.Numeric(10, 2), nullable=False),
        sa.Column(
            "customer_id",
            sa.String(),
            sa.ForeignKey("customer.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "salesperson_id",
            sa.String(),
            sa.ForeignKey("salesperson.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('pending', 'sent', 'delivered')",
            name="ck_order_status_valid",
        ),
    )
    op.create_index("ix_order_id", "order", ["id"], unique=False)
    op.create_index("ix_order_customer_id", "order", ["customer_id"], unique=False)
    op.create_index("ix_order_salesperson_id", "order", ["salesperson_id"], unique=False)
    op.create_index("ix_order_created_at", "order", ["created_at"], unique=False)
    op.create_index(
        "ix_order_salesperson_created",
        "order",
        ["salesperson_id", "created_at"],
        unique=False,
    )

    op.create_table(
        "order_product",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "order_id",
            sa.Integer(),
            sa.ForeignKey("order.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("product.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price_at_order", sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint("quantity > 0", name="ck_order_product_quantity_positive"),
    )
    op.create_index("ix_order_product_id", "order_product", ["id"], unique=False)
    op.create_index("ix_order_product_order_id", "order_product", ["order_id"], unique=False)
    op.create_index("ix_order_product_product_id", "order_product", ["product_id"], unique=False)

    # DELIVERIES
    op.create_table(
        "delivery",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "order_id",
            sa.Integer(),
            sa.ForeignKey("order.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("estimated_delivery_date", sa.Date(), nullable=False),
        sa.Column("actual_delivery_date", sa.Date(), nullable=True),
        sa.Column("tracking_number", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "status IN ('pending', 'in_transit', 'delivered', 'failed')",
            name="ck_delivery_status_valid",
        ),
    )
    op.create_index("ix_delivery_id", "delivery", ["id"], unique=False)
    op.create_index("ix_delivery_order_id", "delivery", ["order_id"], unique=True)

    # FIELD ACTIVITY
    op.create_table(
        "visit",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("comments", sa.String(), nullable=False),
        sa.Column(
            "customer_id",
            sa.String(),
            sa.ForeignKey("customer.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "salesperson_id",
            sa.String(),
            sa.ForeignKey("salesperson.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_visit_id", "visit", ["id"], unique=False)
    op.create_index("ix_visit_customer_id", "visit", ["customer_id"], unique=False)
    op.create_index("ix_visit_salesperson_date", "visit", ["salesperson_id", "date"], unique=False)

    op.create_table(
        "statement",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column(
            "salesperson_id",
            sa.String(),
            sa.ForeignKey("salesperson.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "customer_id",
            sa.String(),
            sa.ForeignKey("customer.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_statement_id", "statement", ["id"], unique=False)
    op.create_index("ix_statement_salesperson_id", "statement", ["salesperson_id"], unique=False)
    op.create_index("ix_statement_customer_id", "statement", ["customer_id"], unique=False)

    op.create_table(
        "sales_plan",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("period", sa.String(), nullable=False),
        sa.Column(
            "salesperson_id",
            sa.String(),
            sa.ForeignKey("salesperson.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
        sa.CheckConstraint(
            "period IN ('monthly', 'quarterly', 'annually')",
            name="ck_sales_plan_period_valid",
        ),
    )
    op.create_index("ix_sales_plan_id", "sales_plan", ["id"], unique=False)
    op.create_index("ix_sales_plan_salesperson_id", "sales_plan", ["salesperson_id"], unique=False)

    # REPORTS
    op.create_table(
        "report",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column(
            "salesperson_id",
            sa.String(),
            sa.ForeignKey("salesperson.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("period_type", sa.String(20), nullable=True),
        sa.Column("period_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("period_end", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint(
            "period_type IN ('monthly', 'quarterly', 'semiannually')",
            name="ck_report_period_type_valid",
        ),
        sa.CheckConstraint("period_end >= period_start", name="ck_report_period_valid"),
    )
    op.create_index("ix_report_id", "report", ["id"], unique=False)
    op.create_index("ix_report_salesperson_id", "report", ["salesperson_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("report")
    op.drop_table("sales_plan")
    op.drop_table("statement")
    op.drop_table("visit")
    op.drop_table("delivery")
    op.drop_table("order_product")
    op.drop_table("order")
    op.drop_table("customer")
    op.drop_table("salesperson")
    op.drop_table("inventory_product")
    op.drop_table("inventory")
    op.drop_table("warehouse")
    op.drop_table("product")
    op.drop_table("manufacturer")
