"""Settings de endpoints externos (Profile API e Pendo).

Permite apontar para ambientes de staging/sandbox sem mudar código.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

PROFILES_API_BASE_URL: str = "https://profiles.segment.com"
PENDO_API_BASE_URL: str = "https://app.pendo.io"


@dataclass(frozen=True)
class EndpointSettings:
    """URLs base e timeout das chamadas HTTP.

    Attributes:
        profiles_api_base_url: URL base da Profile API
        pendo_api_base_url: URL base das APIs do Pendo
        request_timeout_seconds: Timeout por requisição
    """

    profiles_api_base_url: str = PROFILES_API_BASE_URL
    pendo_api_base_url: str = PENDO_API_BASE_URL
    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações de endpoints.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        for name, url in (
            ("PROFILES_API_BASE_URL", self.profiles_api_base_url),
            ("PENDO_API_BASE_URL", self.pendo_api_base_url),
        ):
            if not url.startswith(("https://", "http://")):
                errors.append(f"{name} deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> EndpointSettings:
    """Carrega EndpointSettings a partir de variáveis de ambiente."""
    return EndpointSettings(
        profiles_api_base_url=os.getenv("PROFILES_API_BASE_URL", PROFILES_API_BASE_URL),
        pendo_api_base_url=os.getenv("PENDO_API_BASE_URL", PENDO_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_endpoint_settings() -> EndpointSettings:
    """Retorna instância cacheada de EndpointSettings."""
    return _load_from_env()
