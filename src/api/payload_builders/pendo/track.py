"""Builder do evento track enviado a Pendo `/data/track`."""

from __future__ import annotations

from typing import Any

USER_TRAITS_EVENT = "User Traits Update"
ACCOUNT_TRAITS_EVENT = "Account Traits Update"


class _Missing:
    """Marca campo ausente na origem (diferente de `null` explícito)."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def provided(model: Any, field_name: str) -> Any:
    """Valor do campo do modelo pydantic, ou MISSING se não veio no input."""
    if field_name in model.model_fields_set:
        return getattr(model, field_name)
    return MISSING


def build_track_payload(
    *,
    event_name: str,
    visitor_id: Any,
    account_id: Any,
    timestamp: Any,
    traits: dict[str, Any],
    context: Any,
) -> dict[str, Any]:
    """Constrói o objeto track com o conjunto completo de traits.

    Chaves com valor MISSING são omitidas, como acontece na serialização
    JSON de campos ausentes; `None` explícito é enviado como `null`.
    `properties` recebe os traits sem transformação.

    Args:
        event_name: USER_TRAITS_EVENT ou ACCOUNT_TRAITS_EVENT
        visitor_id: userId do evento
        account_id: groupId (do perfil para users, do evento para groups)
        timestamp: Timestamp do evento, repassado como veio
        traits: Traits retornados pela Profile API
        context: Contexto do evento

    Returns:
        Payload do endpoint de track
    """
    payload: dict[str, Any] = {
        "type": "track",
        "event": event_name,
        "visitorId": visitor_id,
        "accountId": account_id,
        "timestamp": timestamp,
        "properties": traits,
        "context": context,
    }
    return {key: value for key, value in payload.items() if value is not MISSING}
