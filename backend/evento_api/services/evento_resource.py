import logging
from dataclasses import dataclass
from typing import Any

from fastapi import status

from evento_api.models.enums import ActionType
from evento_api.repositories.evento_repo import EventoRepository
from evento_api.schemas.evento import EventoPayload

logger = logging.getLogger(__name__)

ENTITY_NAME = "evento"
BASE_PATH = "/api/eventos"


@dataclass(frozen=True)
class NewEvento:
    payload: EventoPayload


@dataclass(frozen=True)
class ExistingEvento:
    id: int
    payload: EventoPayload


def classify(payload: EventoPayload) -> NewEvento | ExistingEvento:
    if payload.id is None:
        return NewEvento(payload)
    return ExistingEvento(payload.id, payload)


@dataclass(frozen=True)
class Notification:
    """Aviso para el cliente; la capa HTTP lo convierte en cabeceras."""

    action: ActionType
    domain: str
    entity_id: str | None = None
    key: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class ResourceResult:
    status: int
    body: Any = None
    notification: Notification | None = None
    location: str | None = None


class EventoResource:
    """
    CRUD de Evento sobre un repositorio inyectado.

    No guarda estado entre peticiones: toda la consistencia queda
    en el repositorio.
    """

    def __init__(self, repository: EventoRepository):
        self.repository = repository

    def create(self, payload: EventoPayload) -> ResourceResult:
        logger.debug("REST request to save Evento : %s", payload)
        submission = classify(payload)
        if isinstance(submission, ExistingEvento):
            return ResourceResult(
                status=status.HTTP_400_BAD_REQUEST,
                notification=Notification(
                    action=ActionType.FAILURE,
                    domain=ENTITY_NAME,
                    key="idexists",
                    message="A new evento cannot already have an ID",
                ),
            )
        result = self.repository.save(submission.payload)
        return ResourceResult(
            status=status.HTTP_201_CREATED,
            body=result,
            notification=Notification(ActionType.CREATE, ENTITY_NAME, entity_id=str(result.id)),
            location=f"{BASE_PATH}/{result.id}",
        )

    def update(self, payload: EventoPayload) -> ResourceResult:
        logger.debug("REST request to update Evento : %s", payload)
        submission = classify(payload)
        if isinstance(submission, NewEvento):
            # PUT sin id se comporta como POST (compatibilidad con clientes existentes)
            return self.create(payload)
        result = self.repository.save(submission.payload)
        return ResourceResult(
            status=status.HTTP_200_OK,
            body=result,
            notification=Notification(ActionType.UPDATE, ENTITY_NAME, entity_id=str(submission.id)),
        )

    def list_all(self) -> ResourceResult:
        logger.debug("REST request to get all Eventos")
        return ResourceResult(status=status.HTTP_200_OK, body=list(self.repository.find_all()))

    def get_by_id(self, evento_id: int) -> ResourceResult:
        logger.debug("REST request to get Evento : %s", evento_id)
        evento = self.repository.find_one(evento_id)
        if evento is None:
            return ResourceResult(status=status.HTTP_404_NOT_FOUND)
        return ResourceResult(status=status.HTTP_200_OK, body=evento)

    def delete_by_id(self, evento_id: int) -> ResourceResult:
        logger.debug("REST request to delete Evento : %s", evento_id)
        self.repository.delete(evento_id)
        return ResourceResult(
            status=status.HTTP_200_OK,
            notification=Notification(ActionType.DELETE, ENTITY_NAME, entity_id=str(evento_id)),
        )
