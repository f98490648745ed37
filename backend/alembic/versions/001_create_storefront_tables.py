"""Initial migration: create user, product, order_header, payment tables

Revision ID: 001_initial
Revises:
Create Date: 2025-08-19 00:00:00.000000

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id_user", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id_user"),
    )
    op.create_index("ix_user_email", "user", ["email"])
    op.create_index("ix_user_deleted_at", "user", ["deleted_at"])

    op.create_table(
        "product",
        sa.Column("id_product", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("artist", sa.String(), nullable=False),
        sa.Column("genre_id", sa.Integer(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("publication_date", sa.Date(), nullable=True),
        sa.Column("description", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id_product"),
    )
    op.create_index("ix_product_name", "product", ["name"])
    op.create_index("ix_product_genre_id", "product", ["genre_id"])
    op.create_index("ix_product_deleted_at", "product", ["deleted_at"])

    op.create_table(
        "order_header",
        sa.Column("id_order_header", sa.Integer(), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("total", sa.Float(), nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        sa.Column("notes", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id_order_header"),
    )
    op.create_index("ix_order_header_customer_id", "order_header", ["customer_id"])
    op.create_index("ix_order_header_status", "order_header", ["status"])
    op.create_index("ix_order_header_deleted_at", "order_header", ["deleted_at"])

    op.create_table(
        "payment",
        sa.Column("id_payment", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("method", sa.String(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("payment_date", sa.Date(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id_payment"),
    )
    op.create_index("ix_payment_order_id", "payment", ["order_id"])
    op.create_index("ix_payment_status", "payment", ["status"])
    op.create_index("ix_payment_deleted_at", "payment", ["deleted_at"])


def downgrade() -> None:
    op.drop_table("payment")
    op.drop_table("order_header")
    op.drop_table("product")
    op.drop_table("user")
