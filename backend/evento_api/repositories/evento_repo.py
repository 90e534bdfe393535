from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import select, text
from sqlalchemy.orm import Session

from evento_api.models.evento import Evento
from evento_api.schemas.evento import MAX_EVENTO_ID, MIN_EVENTO_ID, EventoPayload


class EventoRepository(Protocol):
    """Persistencia que consume EventoResource."""

    def save(self, payload: EventoPayload) -> Evento:
        """Asigna id si falta; si viene, inserta o sobrescribe por id."""
        ...

    def find_all(self) -> Sequence[Evento]: ...

    def find_one(self, evento_id: int) -> Evento | None: ...

    def delete(self, evento_id: int) -> None: ...


def _storable(evento_id: int) -> bool:
    return MIN_EVENTO_ID <= evento_id <= MAX_EVENTO_ID


class SqlAlchemyEventoRepository:
    def __init__(self, db: Session):
        self.db = db

    def save(self, payload: EventoPayload) -> Evento:
        if payload.id is None:
            evento = Evento(**payload.entity_fields())
            self.db.add(evento)
        else:
            # merge = upsert por clave primaria
            evento = self.db.merge(Evento(id=payload.id, **payload.entity_fields()))
            self.db.flush()
            self._advance_id_sequence(payload.id)
        self.db.commit()
        self.db.refresh(evento)
        return evento

    def _advance_id_sequence(self, evento_id: int) -> None:
        """En PostgreSQL un id explícito no mueve la secuencia: la adelantamos a mano."""
        if self.db.get_bind().dialect.name != "postgresql":
            return
        sequence = self.db.scalar(text("SELECT pg_get_serial_sequence('evento', 'id')"))
        if sequence is None:
            return
        # nombre sacado del catálogo, no de la petición
        last_value, is_called = self.db.execute(text(f"SELECT last_value, is_called FROM {sequence}")).one()
        next_id = last_value + 1 if is_called else last_value
        if evento_id >= next_id:
            self.db.execute(
                text("SELECT setval(CAST(:sequence AS regclass), :value, true)"),
                {"sequence": sequence, "value": evento_id},
            )

    def find_all(self) -> Sequence[Evento]:
        return self.db.scalars(select(Evento).order_by(Evento.id.asc())).all()

    def find_one(self, evento_id: int) -> Evento | None:
        if not _storable(evento_id):
            return None
        return self.db.get(Evento, evento_id)

    def delete(self, evento_id: int) -> None:
        if not _storable(evento_id):
            return
        evento = self.db.get(Evento, evento_id)
        if evento is None:
            return
        self.db.delete(evento)
        self.db.commit()
