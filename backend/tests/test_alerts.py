import logging

from evento_api.api.alerts import alert_header_names, alert_headers
from evento_api.models.enums import ActionType
from evento_api.services.evento_resource import Notification


def test_creation_alert_headers():
    headers = alert_headers(
        Notification(ActionType.CREATE, "evento", entity_id="3"),
        app_name="eventosApp",
    )
    assert headers == {
        "X-eventosApp-alert": "A new evento is created with identifier 3",
        "X-eventosApp-params": "3",
    }


def test_update_and_deletion_messages():
    update = alert_headers(Notification(ActionType.UPDATE, "evento", entity_id="4"), app_name="eventosApp")
    delete = alert_headers(Notification(ActionType.DELETE, "evento", entity_id="4"), app_name="eventosApp")
    assert update["X-eventosApp-alert"] == "A evento is updated with identifier 4"
    assert delete["X-eventosApp-alert"] == "A evento is deleted with identifier 4"


def test_translatable_alert_uses_i18n_key():
    headers = alert_headers(
        Notification(ActionType.DELETE, "evento", entity_id="9"),
        app_name="miApp",
        translatable=True,
    )
    assert headers == {"X-miApp-alert": "miApp.evento.deleted", "X-miApp-params": "9"}


def test_failure_alert_headers_are_logged(caplog):
    notification = Notification(
        ActionType.FAILURE,
        "evento",
        key="idexists",
        message="A new evento cannot already have an ID",
    )
    with caplog.at_level(logging.WARNING, logger="evento_api.api.alerts"):
        headers = alert_headers(notification, app_name="eventosApp")

    assert headers == {
        "X-eventosApp-error": "error.idexists",
        "X-eventosApp-alert": "A new evento cannot already have an ID",
        "X-eventosApp-params": "evento",
    }
    assert "Entity processing failed, A new evento cannot already have an ID" in caplog.text


def test_header_names_follow_app_name():
    assert alert_header_names("x") == ["X-x-alert", "X-x-error", "X-x-params"]
