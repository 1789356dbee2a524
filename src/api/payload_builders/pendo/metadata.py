"""Builders de metadata para Pendo `/api/v1/metadata/...`.

Somente campos curados são enviados; traits ausentes ficam fora de `values`.
"""

from __future__ import annotations

from typing import Any

VISITOR_METADATA_FIELDS: tuple[str, ...] = ("country", "customer_role", "tester_role")
ACCOUNT_METADATA_FIELDS: tuple[str, ...] = ("current_plan", "premier_support")


def pick_values(traits: dict[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    """Seleciona os campos curados presentes em `traits`."""
    return {name: traits[name] for name in fields if name in traits}


def build_visitor_metadata_payload(
    visitor_id: Any,
    traits: dict[str, Any],
) -> list[dict[str, Any]]:
    """Payload de metadata de visitor (agent) para um único userId."""
    return [
        {
            "visitorId": visitor_id,
            "values": pick_values(traits, VISITOR_METADATA_FIELDS),
        }
    ]


def build_account_metadata_payload(
    group_id: Any,
    traits: dict[str, Any],
) -> list[dict[str, Any]]:
    """Payload de metadata custom de account para um único groupId."""
    return [
        {
            "groupId": group_id,
            "values": pick_values(traits, ACCOUNT_METADATA_FIELDS),
        }
    ]
