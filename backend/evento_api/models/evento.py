from datetime import datetime

from sqlalchemy import BigInteger, Integer, String, DateTime, func, Index
from sqlalchemy.orm import Mapped, mapped_column
from evento_api.db.base import Base

class Evento(Base):
    __tablename__ = "evento"

    # BIGINT (Long); SQLite solo admite AUTOINCREMENT sobre INTEGER
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"), primary_key=True, autoincrement=True
    )
    nombre: Mapped[str | None] = mapped_column(String(255), nullable=True)
    descripcion: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    lugar: Mapped[str | None] = mapped_column(String(255), nullable=True)
    fecha: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=True
    )

    __table_args__ = (
        Index("ix_evento_fecha", "fecha"),
        # ids nunca reutilizados en SQLite; en PostgreSQL lo mantiene el repositorio con setval
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"Evento(id={self.id!r}, nombre={self.nombre!r}, lugar={self.lugar!r}, fecha={self.fecha!r})"
