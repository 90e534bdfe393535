"""Add evento table.

Revision ID: 8a9b0c1d2e3f
Revises: 5e1f0a2b3c4d
Create Date: 2026-10-01 09:10:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "8a9b0c1d2e3f"
down_revision = "5e1f0a2b3c4d"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "evento",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        sa.Column("nombre", sa.String(length=255), nullable=True),
        sa.Column("descripcion", sa.String(length=1000), nullable=True),
        sa.Column("lugar", sa.String(length=255), nullable=True),
        sa.Column("fecha", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_evento_fecha", "evento", ["fecha"])


def downgrade() -> None:
    op.drop_index("ix_evento_fecha", table_name="evento")
    op.drop_table("evento")
