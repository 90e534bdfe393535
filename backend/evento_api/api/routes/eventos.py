from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse, Response

from evento_api.api.alerts import alert_headers
from evento_api.api.deps import get_evento_resource
from evento_api.core.config import settings
from evento_api.schemas.evento import EventoPayload, EventoResponse, EventoUpdatePayload
from evento_api.services.evento_resource import EventoResource, ResourceResult


router = APIRouter(prefix="/api/eventos", tags=["eventos"])


def _render(result: ResourceResult) -> Response:
    headers: dict[str, str] = {}
    if result.notification is not None:
        headers.update(
            alert_headers(
                result.notification,
                app_name=settings.app_name,
                translatable=settings.alerts_translatable,
            )
        )
    if result.location is not None:
        headers["Location"] = result.location

    if result.body is None:
        return Response(status_code=result.status, headers=headers)
    if isinstance(result.body, list):
        content = [EventoResponse.model_validate(item).model_dump(mode="json") for item in result.body]
    else:
        content = EventoResponse.model_validate(result.body).model_dump(mode="json")
    return JSONResponse(content, status_code=result.status, headers=headers)


@router.post(
    "",
    response_model=EventoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "El evento ya tiene id (cabeceras X-<app>-error)"},
    },
)
def create_evento(payload: EventoPayload, resource: EventoResource = Depends(get_evento_resource)):
    return _render(resource.create(payload))


@router.put(
    "",
    response_model=EventoResponse,
    responses={
        201: {"model": EventoResponse, "description": "Sin id: se crea como en POST"},
    },
)
def update_evento(payload: EventoUpdatePayload, resource: EventoResource = Depends(get_evento_resource)):
    return _render(resource.update(payload))


@router.get("", response_model=list[EventoResponse])
def list_eventos(resource: EventoResource = Depends(get_evento_resource)):
    return _render(resource.list_all())


@router.get(
    "/{evento_id}",
    response_model=EventoResponse,
    responses={404: {"description": "Evento no encontrado"}},
)
def get_evento(evento_id: int = Path(..., description="Identificador del evento"), resource: EventoResource = Depends(get_evento_resource)):
    return _render(resource.get_by_id(evento_id))


@router.delete(
    "/{evento_id}",
    response_class=Response,
    responses={200: {"description": "Evento eliminado (cabeceras X-<app>-alert)"}},
)
def delete_evento(evento_id: int = Path(..., description="Identificador del evento"), resource: EventoResource = Depends(get_evento_resource)):
    return _render(resource.delete_by_id(evento_id))
