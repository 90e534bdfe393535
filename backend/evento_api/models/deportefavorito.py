import sqlalchemy as sa
from sqlalchemy import Integer, String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from evento_api.db.base import Base
from evento_api.models.category import Category
from evento_api.models.user import User

class Deportefavorito(Base):
    """Tabla puente usuario <-> categoría con el deporte favorito."""

    __tablename__ = "deportefavorito"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nombre: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_id: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)
    categoria_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"), nullable=True)

    user: Mapped[User | None] = relationship()
    categoria: Mapped[Category | None] = relationship()

    __table_args__ = (
        sa.Index("ix_deportefavorito_user", "user_id"),
        sa.Index("ix_deportefavorito_categoria", "categoria_id"),
    )
