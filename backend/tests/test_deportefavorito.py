from uuid import uuid4

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError

from evento_api.models.category import Category
from evento_api.models.deportefavorito import Deportefavorito
from evento_api.models.user import User


def _create_user(db) -> User:
    user = User(username=f"user_{uuid4().hex[:8]}", email=f"user_{uuid4().hex}@test.local")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _create_category(db) -> Category:
    category = Category(name=f"Cat-{uuid4().hex[:8]}")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def test_deportefavorito_links_user_and_category(db):
    user = _create_user(db)
    category = _create_category(db)

    favorito = Deportefavorito(nombre="Pádel", user_id=user.id, categoria_id=category.id)
    db.add(favorito)
    db.commit()
    db.refresh(favorito)

    assert favorito.id is not None
    assert favorito.user.email == user.email
    assert favorito.categoria.name == category.name


def test_deportefavorito_nombre_is_optional(db):
    favorito = Deportefavorito(user_id=_create_user(db).id, categoria_id=_create_category(db).id)
    db.add(favorito)
    db.commit()
    assert favorito.nombre is None


def test_deportefavorito_rejects_unknown_foreign_keys(db):
    db.add(Deportefavorito(nombre="Golf", user_id=999, categoria_id=999))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_deportefavorito_schema(db):
    inspector = inspect(db.get_bind())
    columns = {c["name"]: c for c in inspector.get_columns("deportefavorito")}
    assert set(columns) == {"id", "nombre", "user_id", "categoria_id"}
    assert columns["nombre"]["nullable"] is True

    targets = {fk["referred_table"] for fk in inspector.get_foreign_keys("deportefavorito")}
    assert targets == {"users", "categories"}
