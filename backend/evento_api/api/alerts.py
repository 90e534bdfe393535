import logging

from evento_api.models.enums import ActionType
from evento_api.services.evento_resource import Notification

logger = logging.getLogger(__name__)

_SUCCESS_MESSAGES: dict[ActionType, tuple[str, str]] = {
    ActionType.CREATE: ("created", "A new {domain} is created with identifier {id}"),
    ActionType.UPDATE: ("updated", "A {domain} is updated with identifier {id}"),
    ActionType.DELETE: ("deleted", "A {domain} is deleted with identifier {id}"),
}


def alert_header_names(app_name: str) -> list[str]:
    return [f"X-{app_name}-alert", f"X-{app_name}-error", f"X-{app_name}-params"]


def alert_headers(notification: Notification, *, app_name: str, translatable: bool = False) -> dict[str, str]:
    """
    Cabeceras de aviso que el frontend muestra como notificación.

    - éxito: X-<app>-alert con el mensaje (o la clave i18n) y X-<app>-params con el id
    - fallo: X-<app>-error con "error.<key>", el mensaje y el dominio en params
    """
    if notification.action is ActionType.FAILURE:
        logger.warning("Entity processing failed, %s", notification.message)
        return {
            f"X-{app_name}-error": f"error.{notification.key}",
            f"X-{app_name}-alert": notification.message or "",
            f"X-{app_name}-params": notification.domain,
        }

    suffix, template = _SUCCESS_MESSAGES[notification.action]
    if translatable:
        message = f"{app_name}.{notification.domain}.{suffix}"
    else:
        message = template.format(domain=notification.domain, id=notification.entity_id)
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": notification.entity_id or "",
    }
