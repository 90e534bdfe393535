import threading
from typing import Dict, List, Optional

from evento_api.models.evento import Evento
from evento_api.schemas.evento import EventoPayload

class MemoryEventoRepository:
    """
    Simula la BD en memoria.
    Misma interfaz que SqlAlchemyEventoRepository, así que se puede
    sustituir (EVENTO_STORE=memory) sin cambiar el endpoint.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._next_id = 1
        self.rows: Dict[int, dict] = {}

    def save(self, payload: EventoPayload) -> Evento:
        with self._lock:
            evento_id = payload.id
            if evento_id is None:
                evento_id = self._next_id
            # nunca reutilizar un id ya visto
            self._next_id = max(self._next_id, evento_id + 1)
            row = {"id": evento_id, **payload.entity_fields()}
            self.rows[evento_id] = row
            return Evento(**row)

    def find_all(self) -> List[Evento]:
        with self._lock:
            return [Evento(**row) for _, row in sorted(self.rows.items())]

    def find_one(self, evento_id: int) -> Optional[Evento]:
        with self._lock:
            row = self.rows.get(evento_id)
        return Evento(**row) if row is not None else None

    def delete(self, evento_id: int) -> None:
        with self._lock:
            self.rows.pop(evento_id, None)

    def clear(self) -> None:
        with self._lock:
            self.rows.clear()
            self._next_id = 1
