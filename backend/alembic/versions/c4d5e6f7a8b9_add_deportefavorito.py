"""Add deportefavorito join table.

Revision ID: c4d5e6f7a8b9
Revises: 8a9b0c1d2e3f
Create Date: 2026-10-01 09:20:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "c4d5e6f7a8b9"
down_revision = "8a9b0c1d2e3f"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "deportefavorito",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(length=255), nullable=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("categoria_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
    )
    op.create_index("ix_deportefavorito_user", "deportefavorito", ["user_id"])
    op.create_index("ix_deportefavorito_categoria", "deportefavorito", ["categoria_id"])


def downgrade() -> None:
    op.drop_index("ix_deportefavorito_categoria", table_name="deportefavorito")
    op.drop_index("ix_deportefavorito_user", table_name="deportefavorito")
    op.drop_table("deportefavorito")
