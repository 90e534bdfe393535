from fastapi import Depends
from sqlalchemy.orm import Session

from evento_api.core.config import settings
from evento_api.db.deps import get_db
from evento_api.repositories.evento_repo import EventoRepository, SqlAlchemyEventoRepository
from evento_api.repositories.memory_repo import MemoryEventoRepository
from evento_api.services.evento_resource import EventoResource

memory_evento_repo = MemoryEventoRepository()


def get_evento_repository(db: Session = Depends(get_db)) -> EventoRepository:
    if settings.evento_store == "memory":
        return memory_evento_repo
    return SqlAlchemyEventoRepository(db)


def get_evento_resource(repository: EventoRepository = Depends(get_evento_repository)) -> EventoResource:
    return EventoResource(repository)
