"""Base das destination functions Pendo.

Fluxo de cada handler suportado:
validar identidade → buscar perfil → montar payload → enviar → classificar.

Handlers não suportados (track, page, screen, alias, delete) sempre
levantam EventNotSupportedError.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from api.connectors.pendo import PendoClient
from api.connectors.profiles import ProfileApiClient, ProfileRecord
from app.domain.events import EventType, SegmentEvent
from app.infra.http import HttpClient, HttpClientConfig
from app.observability.correlation import correlation_scope
from config.settings.endpoints import get_endpoint_settings
from utils.errors import (
    DestinationFunctionError,
    EventNotSupportedError,
    RetryError,
    ValidationError,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    import httpx

    from app.protocols import PendoSenderProtocol, ProfileLookupProtocol
    from config.settings.destinations import DestinationSettings
    from config.settings.endpoints import EndpointSettings

logger = logging.getLogger(__name__)

SUPPORTED_EVENT_TYPES = frozenset({EventType.IDENTIFY, EventType.GROUP})


def reject_unsupported(event_type: EventType | str) -> None:
    """Levanta EventNotSupportedError para o tipo informado."""
    kind = event_type.value if isinstance(event_type, EventType) else event_type
    raise EventNotSupportedError(f"{kind} is not supported")


def require_identity(value: Any, field_name: str) -> str:
    """Retorna a identidade como string.

    Valores falsy (None, "", 0, False) levantam ValidationError.
    """
    if not value:
        raise ValidationError(f"{field_name} is required")
    return str(value)


class BaseDestination(ABC):
    """Handlers comuns às destinations.

    Subclasses implementam on_identify e on_group e declaram
    `settings_model` para a factory from_settings.
    """

    name: ClassVar[str] = "pendo"
    settings_model: ClassVar[type[DestinationSettings]]

    def __init__(
        self,
        *,
        profiles: ProfileLookupProtocol,
        pendo: PendoSenderProtocol,
    ) -> None:
        self._profiles = profiles
        self._pendo = pendo
        self._handlers: dict[EventType, Callable[[SegmentEvent], Awaitable[None]]] = {
            EventType.IDENTIFY: self.on_identify,
            EventType.GROUP: self.on_group,
            EventType.TRACK: self.on_track,
            EventType.PAGE: self.on_page,
            EventType.SCREEN: self.on_screen,
            EventType.ALIAS: self.on_alias,
            EventType.DELETE: self.on_delete,
        }

    @classmethod
    def from_settings(
        cls,
        settings: Mapping[str, Any] | DestinationSettings,
        *,
        http_client: httpx.AsyncClient | None = None,
        endpoints: EndpointSettings | None = None,
        **kwargs: Any,
    ) -> BaseDestination:
        """Monta a destination a partir das settings da invocação.

        Raises:
            ValidationError: Settings obrigatórias ausentes
        """
        parsed = cls.settings_model.from_mapping(settings)
        endpoints = endpoints or get_endpoint_settings()
        http = HttpClient(
            HttpClientConfig(timeout_seconds=endpoints.request_timeout_seconds),
            client=http_client,
        )
        profiles = ProfileApiClient(
            parsed.personas_space_id,
            parsed.profile_api_token,
            http_client=http,
            base_url=endpoints.profiles_api_base_url,
        )
        pendo = PendoClient(
            parsed.integration_key,
            http_client=http,
            base_url=endpoints.pendo_api_base_url,
        )
        return cls(profiles=profiles, pendo=pendo, **kwargs)

    async def dispatch(self, event: SegmentEvent) -> None:
        """Executa o handler correspondente a `event.type`."""
        await self._handlers[event.type](event)

    @abstractmethod
    async def on_identify(self, event: SegmentEvent) -> None: ...

    @abstractmethod
    async def on_group(self, event: SegmentEvent) -> None: ...

    async def on_track(self, event: SegmentEvent) -> None:
        reject_unsupported(EventType.TRACK)

    async def on_page(self, event: SegmentEvent) -> None:
        reject_unsupported(EventType.PAGE)

    async def on_screen(self, event: SegmentEvent) -> None:
        reject_unsupported(EventType.SCREEN)

    async def on_alias(self, event: SegmentEvent) -> None:
        reject_unsupported(EventType.ALIAS)

    async def on_delete(self, event: SegmentEvent) -> None:
        reject_unsupported(EventType.DELETE)

    async def fetch_profile(
        self,
        entity: str,
        lookup_key: str,
        lookup_value: str,
    ) -> ProfileRecord:
        """Busca o perfil; qualquer falha da consulta vira RetryError.

        Inclusive ProfileNotFoundError: o runtime decide quando desistir.
        """
        try:
            response = await self._profiles.query(entity, lookup_key, lookup_value)
        except RetryError:
            raise
        except Exception as exc:
            logger.warning(
                "profile_lookup_failed",
                extra={
                    "destination": self.name,
                    "entity": entity,
                    "error_type": type(exc).__name__,
                },
            )
            raise RetryError(
                str(exc) or type(exc).__name__,
                status_code=getattr(exc, "status_code", None),
            ) from exc
        return ProfileRecord.from_response(response)


def coerce_event(
    event: SegmentEvent | Mapping[str, Any],
    event_type: EventType | None = None,
) -> SegmentEvent:
    """Aceita SegmentEvent ou payload bruto.

    Com `event_type`, o tipo é fixado (entry points on_identify/on_group).
    """
    if isinstance(event, SegmentEvent):
        if event_type is None or event.type is event_type:
            return event
        return event.model_copy(update={"type": event_type})
    if event_type is not None and isinstance(event, Mapping):
        event = {**event, "type": event_type.value}
    return SegmentEvent.from_payload(event)


async def run_destination(
    destination_cls: type[BaseDestination],
    event: SegmentEvent | Mapping[str, Any],
    settings: Mapping[str, Any] | DestinationSettings,
    *,
    http_client: httpx.AsyncClient | None = None,
    event_type: EventType | None = None,
    **kwargs: Any,
) -> None:
    """Entry point usado pelo runtime: parse, correlation_id e dispatch.

    Raises:
        ValidationError: Evento ou settings inválidos
        RetryError: Falha transitória
        EventNotSupportedError: Tipo de evento não suportado
    """
    parsed = coerce_event(event, event_type)
    if parsed.type not in SUPPORTED_EVENT_TYPES:
        reject_unsupported(parsed.type)

    with correlation_scope(parsed.message_id):
        logger.info(
            "event_received",
            extra={"destination": destination_cls.name, "event_type": parsed.type.value},
        )
        try:
            destination = destination_cls.from_settings(
                settings, http_client=http_client, **kwargs
            )
            await destination.dispatch(parsed)
        except DestinationFunctionError as exc:
            logger.warning(
                "event_failed",
                extra={
                    "destination": destination_cls.name,
                    "event_type": parsed.type.value,
                    "error_type": type(exc).__name__,
                    "retryable": exc.retryable,
                    "status_code": exc.status_code,
                },
            )
            raise
        logger.info(
            "event_processed",
            extra={"destination": destination_cls.name, "event_type": parsed.type.value},
        )
