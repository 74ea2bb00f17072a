"""Initial marketplace schema

Revision ID: 20230115_000000
Revises: None
Create Date: 2023-01-15 00:00:00.000000

Creates the four marketplace tables:
- user: accounts with a unique username/email and a role
- category: admin-managed category vocabulary
- product: listings owned by a user
- product_category: product/category association rows

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20230115_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ID_TYPE = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    """Create all marketplace tables."""

    op.create_table(
        "user",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(16), nullable=False, server_default="user"),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_user_username", "user", ["username"], unique=True)

    op.create_table(
        "category",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("category_name", sa.String(128), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("category_name"),
    )

    op.create_table(
        "product",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("product_title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("location_country", sa.String(128), nullable=False),
        sa.Column("location_state", sa.String(128), nullable=False),
        sa.Column("location_city", sa.String(128), nullable=False),
        sa.Column("location_zip", sa.String(32), nullable=False),
        sa.Column("location_latitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("location_longitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("created_by", ID_TYPE, nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["created_by"], ["user.id"]),
    )
    op.create_index("ix_product_created_by", "product", ["created_by"])

    op.create_table(
        "product_category",
        sa.Column("id", ID_TYPE, autoincrement=True, nullable=False),
        sa.Column("product_id", ID_TYPE, nullable=False),
        sa.Column("category_id", ID_TYPE, nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["product_id"], ["product.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("product_id", "category_id", name="uq_product_category_pair"),
    )
    op.create_index("ix_product_category_product_id", "product_category", ["product_id"])
    op.create_index("ix_product_category_category_id", "product_category", ["category_id"])


def downgrade() -> None:
    """Drop all marketplace tables."""
    op.drop_index("ix_product_category_category_id", table_name="product_category")
    op.drop_index("ix_product_category_product_id", table_name="product_category")
    op.drop_table("product_category")
    op.drop_index("ix_product_created_by", table_name="product")
    op.drop_table("product")
    op.drop_table("category")
    op.drop_index("ix_user_username", table_name="user")
    op.drop_table("user")
