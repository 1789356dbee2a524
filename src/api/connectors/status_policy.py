"""Classificação de status HTTP em sucesso, retry ou erro terminal.

Cada call site (Profile API, Pendo track, Pendo metadata) recebe uma
StatusPolicy em vez de repetir os `if status >= 500 or status == 429`.
A tabela de regras é avaliada nesta ordem:

1. Regra explícita para o status exato
2. Status >= 500 → RETRY (quando retry_server_errors=True)
3. Default da policy
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from utils.errors import ProfileNotFoundError, RetryError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping


class Outcome(str, Enum):
    """Resultado da classificação de um status."""

    SUCCESS = "success"
    RETRY = "retry"
    INVALID = "invalid"


@dataclass(frozen=True)
class StatusRule:
    """Resultado associado a um status e sufixo opcional da mensagem."""

    outcome: Outcome
    reason: str = ""


SUCCESS = StatusRule(Outcome.SUCCESS)
RETRY = StatusRule(Outcome.RETRY)
INVALID = StatusRule(Outcome.INVALID)


@dataclass(frozen=True)
class StatusPolicy:
    """Política de status para um endpoint de destino.

    Attributes:
        name: Nome da policy (aparece nos logs)
        rules: Regras por status exato
        retry_server_errors: Trata qualquer 5xx como retry
        default: Regra aplicada quando nenhuma outra casa
        invalid_error: Exceção terminal levantada para Outcome.INVALID
    """

    name: str
    rules: Mapping[int, StatusRule] = field(default_factory=dict)
    retry_server_errors: bool = True
    default: StatusRule = SUCCESS
    invalid_error: type[ValidationError] = ValidationError

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def classify(self, status_code: int) -> StatusRule:
        """Retorna a regra aplicável ao status."""
        rule = self.rules.get(status_code)
        if rule is not None:
            return rule
        if self.retry_server_errors and status_code >= 500:
            return RETRY
        return self.default

    def enforce(self, status_code: int) -> Outcome:
        """Classifica o status e levanta o erro correspondente.

        Raises:
            RetryError: Status transitório
            ValidationError: Status terminal (classe definida por invalid_error)
        """
        rule = self.classify(status_code)
        if rule.outcome is Outcome.SUCCESS:
            return rule.outcome

        message = f"Failed with {status_code}"
        if rule.reason:
            message = f"{message}, {rule.reason}"

        if rule.outcome is Outcome.RETRY:
            raise RetryError(message, status_code=status_code)
        raise self.invalid_error(message, status_code=status_code)

    def with_rules(self, name: str, **overrides: StatusRule) -> StatusPolicy:
        """Cria uma cópia com regras extras (chaves no formato `status_400`)."""
        rules = dict(self.rules)
        for key, rule in overrides.items():
            rules[int(key.removeprefix("status_"))] = rule
        return StatusPolicy(
            name=name,
            rules=rules,
            retry_server_errors=self.retry_server_errors,
            default=self.default,
            invalid_error=self.invalid_error,
        )


# 401 é tratado como transitório: o token do Profile API pode estar rotacionando.
PROFILE_LOOKUP_POLICY = StatusPolicy(
    name="profile_lookup",
    rules={200: SUCCESS, 401: RETRY, 429: RETRY},
    default=INVALID,
    invalid_error=ProfileNotFoundError,
)

TRACK_IDENTIFY_POLICY = StatusPolicy(
    name="pendo_track_identify",
    rules={429: RETRY},
)

# TODO: confirmar com produto se 400 no group deve mesmo ser retry (identify não é).
TRACK_GROUP_POLICY = TRACK_IDENTIFY_POLICY.with_rules(
    "pendo_track_group",
    status_400=RETRY,
)

METADATA_POLICY = StatusPolicy(
    name="pendo_metadata",
    rules={
        400: StatusRule(
            Outcome.INVALID,
            "The format is unacceptable due to malformed JSON or missing field mappings.",
        ),
        408: StatusRule(Outcome.RETRY, "The call took too long and timed out."),
        429: RETRY,
    },
)
