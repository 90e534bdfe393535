from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# Rango de la columna BIGINT del id (Long)
MIN_EVENTO_ID = -(2**63)
MAX_EVENTO_ID = 2**63 - 1


class EventoBase(BaseModel):
    nombre: str | None = Field(None, max_length=255, examples=["Final de liga"])
    descripcion: str | None = Field(None, max_length=1000, examples=["Partido de cierre de temporada"])
    lugar: str | None = Field(None, max_length=255, examples=["Estadio Municipal"])
    fecha: datetime | None = Field(None, examples=["2026-06-14T18:00:00Z"])

    @field_serializer("fecha", when_used="json")
    def serialize_fecha(self, value: datetime | None):
        if value is None:
            return None
        dt = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        return dt.isoformat()


class EventoPayload(EventoBase):
    """Cuerpo de POST. Sin id es un evento nuevo; con id, uno existente (rechazado)."""

    id: int | None = None
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "nombre": "Final de liga",
                "descripcion": "Partido de cierre de temporada",
                "lugar": "Estadio Municipal",
                "fecha": "2026-06-14T18:00:00Z",
            }
        }
    )

    def entity_fields(self) -> dict:
        return self.model_dump(exclude={"id"})


class EventoResponse(EventoBase):
    id: int
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "nombre": "Final de liga",
                "descripcion": "Partido de cierre de temporada",
                "lugar": "Estadio Municipal",
                "fecha": "2026-06-14T18:00:00Z",
            }
        },
    )


class EventoUpdatePayload(EventoPayload):
    """Cuerpo de PUT: el id, si viene, se guarda tal cual y debe caber en BIGINT."""

    id: int | None = Field(None, ge=MIN_EVENTO_ID, le=MAX_EVENTO_ID)
