"""Cliente HTTP base para chamadas às APIs externas.

Uma tentativa por chamada: o retry é responsabilidade do runtime que hospeda
a destination function, acionado quando levantamos RetryError.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from app.observability.metrics import record_latency, record_outcome
from utils.errors import DestinationFunctionError, RetryError

if TYPE_CHECKING:
    from api.connectors.status_policy import StatusPolicy

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP que aplica uma StatusPolicy a cada resposta.

    Args:
        config: Configuração de timeout e headers
        client: httpx.AsyncClient compartilhado. Se None, abre um cliente
            por chamada.
        component: Nome usado em logs e métricas (ex: "profile_api")
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
        component: str = "http",
    ) -> None:
        self._config = config or HttpClientConfig()
        self._client = client
        self._component = component

    @property
    def component(self) -> str:
        return self._component

    def with_component(self, component: str) -> HttpClient:
        """Retorna cópia que compartilha config e client com outro nome."""
        return HttpClient(self._config, self._client, component)

    async def get(
        self,
        url: str,
        *,
        policy: StatusPolicy,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("GET", url, policy=policy, headers=headers)

    async def post(
        self,
        url: str,
        *,
        policy: StatusPolicy,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, policy=policy, json=json, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        *,
        policy: StatusPolicy,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Executa a requisição e classifica o status pela policy.

        Raises:
            RetryError: Falha de transporte ou status transitório
            ValidationError: Status terminal segundo a policy
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        start = time.perf_counter()
        try:
            response = await self._send(method, url, json, merged_headers)
        except httpx.TransportError as exc:
            record_outcome(policy.name, "retry")
            logger.warning(
                "http_transport_error",
                extra={
                    "component": self._component,
                    "method": method,
                    "policy": policy.name,
                    "error_type": type(exc).__name__,
                },
            )
            raise RetryError(str(exc) or type(exc).__name__) from exc
        finally:
            record_latency(self._component, method, (time.perf_counter() - start) * 1000)

        try:
            outcome = policy.enforce(response.status_code)
        except DestinationFunctionError as exc:
            record_outcome(policy.name, "retry" if exc.retryable else "invalid", response.status_code)
            logger.warning(
                "http_status_rejected",
                extra={
                    "component": self._component,
                    "method": method,
                    "policy": policy.name,
                    "status_code": response.status_code,
                    "retryable": exc.retryable,
                },
            )
            raise

        record_outcome(policy.name, outcome.value, response.status_code)
        logger.debug(
            "http_status_accepted",
            extra={
                "component": self._component,
                "method": method,
                "status_code": response.status_code,
            },
        )
        return response

    async def _send(
        self,
        method: str,
        url: str,
        json: Any,
        headers: dict[str, str],
    ) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(
                method,
                url,
                json=json,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
        async with httpx.AsyncClient(verify=self._config.verify_ssl) as client:
            return await client.request(
                method,
                url,
                json=json,
                headers=headers,
                timeout=self._config.timeout_seconds,
            )
