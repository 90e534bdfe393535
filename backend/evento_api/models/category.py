from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from evento_api.db.base import Base

class Category(Base):
    """Destino de deportefavorito.categoria_id."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
