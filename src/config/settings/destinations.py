"""Settings por invocação das destination functions.

O runtime entrega as settings a cada chamada, com chaves em camelCase
(`pendoTrackEventSecretKey`, `personasSpaceId`, `profileApiToken`).
Nada aqui é persistido ou cacheado.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from utils.errors import ValidationError


class DestinationSettings(BaseModel):
    """Campos comuns às duas destinations."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    personas_space_id: str = Field(
        ...,
        alias="personasSpaceId",
        min_length=1,
        description="ID do space consultado na Profile API.",
    )
    profile_api_token: str = Field(
        ...,
        alias="profileApiToken",
        min_length=1,
        description="Token da Profile API (usuário do Basic auth).",
    )

    @property
    @abstractmethod
    def integration_key(self) -> str:
        """Chave enviada no header x-pendo-integration-key."""

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any] | BaseModel) -> Any:
        """Valida as settings recebidas do runtime.

        Raises:
            ValidationError: Settings não são um objeto, ou chaves
                obrigatórias ausentes ou vazias
        """
        if isinstance(settings, cls):
            return settings
        if not isinstance(settings, Mapping):
            raise ValidationError("settings must be an object")
        try:
            return cls.model_validate(dict(settings))
        except PydanticValidationError as exc:
            keys = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
            raise ValidationError(f"missing or empty settings: {', '.join(keys)}") from exc


class TrackDestinationSettings(DestinationSettings):
    """Settings da destination de track (evento genérico com todos os traits)."""

    pendo_track_event_secret_key: str = Field(
        ...,
        alias="pendoTrackEventSecretKey",
        min_length=1,
        description="Secret do endpoint /data/track.",
    )

    @property
    def integration_key(self) -> str:
        return self.pendo_track_event_secret_key


class MetadataDestinationSettings(DestinationSettings):
    """Settings da destination de metadata (campos curados)."""

    pendo_integration_key: str = Field(
        ...,
        alias="pendoIntegrationKey",
        min_length=1,
        description="Integration key das APIs de metadata.",
    )

    @property
    def integration_key(self) -> str:
        return self.pendo_integration_key
