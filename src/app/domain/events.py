"""Evento do CDP recebido pela destination function.

Só os campos usados pelos handlers são tipados; o resto é ignorado.
Identidades, timestamp e context são mantidos como vieram (inclusive
`null`), pois são copiados literalmente para os payloads de saída.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from utils.errors import EventNotSupportedError, ValidationError

Identity = str | int


class EventType(str, Enum):
    """Tipos de evento do CDP."""

    IDENTIFY = "identify"
    GROUP = "group"
    TRACK = "track"
    PAGE = "page"
    SCREEN = "screen"
    ALIAS = "alias"
    DELETE = "delete"


class SegmentEvent(BaseModel):
    """Evento imutável, válido apenas durante uma invocação."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    type: EventType
    user_id: Identity | None = Field(default=None, alias="userId")
    anonymous_id: Identity | None = Field(default=None, alias="anonymousId")
    group_id: Identity | None = Field(default=None, alias="groupId")
    message_id: str | None = Field(default=None, alias="messageId")
    timestamp: Any = None
    context: dict[str, Any] | None = Field(default_factory=dict)
    traits: dict[str, Any] = Field(default_factory=dict)

    @field_validator("traits", mode="before")
    @classmethod
    def _null_mapping_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SegmentEvent:
        """Valida o payload bruto do runtime.

        Raises:
            EventNotSupportedError: `type` fora de EventType
            ValidationError: Payload malformado
        """
        if not isinstance(payload, Mapping):
            raise ValidationError("event payload must be an object")

        kind = payload.get("type")
        if not isinstance(kind, str) or kind not in {member.value for member in EventType}:
            raise EventNotSupportedError(f"{kind} is not supported")

        try:
            return cls.model_validate(dict(payload))
        except PydanticValidationError as exc:
            fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
            raise ValidationError(f"invalid event: {', '.join(fields)}") from exc
