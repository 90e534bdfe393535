from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect


ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


def _config(url: str) -> Config:
    cfg = Config(str(ALEMBIC_INI))
    cfg.set_main_option("sqlalchemy.url", url)
    # no reconfigurar logging: deshabilitaría los loggers de la app
    cfg.attributes["configure_logger"] = False
    return cfg


def test_upgrade_creates_schema_and_downgrade_removes_it(tmp_path):
    url = f"sqlite:///{(tmp_path / 'migrations.db').as_posix()}"
    cfg = _config(url)
    engine = create_engine(url)

    command.upgrade(cfg, "head")
    tables = set(inspect(engine).get_table_names())
    assert {"users", "categories", "evento", "deportefavorito"} <= tables

    fks = inspect(engine).get_foreign_keys("deportefavorito")
    assert {fk["referred_table"] for fk in fks} == {"users", "categories"}

    command.downgrade(cfg, "base")
    remaining = set(inspect(engine).get_table_names())
    assert not {"users", "categories", "evento", "deportefavorito"} & remaining
    engine.dispose()


def test_migrations_match_models(tmp_path):
    url = f"sqlite:///{(tmp_path / 'models.db').as_posix()}"
    command.upgrade(_config(url), "head")
    engine = create_engine(url)

    columns = {c["name"] for c in inspect(engine).get_columns("evento")}
    assert columns == {"id", "nombre", "descripcion", "lugar", "fecha", "created_at", "updated_at"}
    assert {c["name"] for c in inspect(engine).get_columns("categories")} == {"id", "name"}
    engine.dispose()
