"""Transporte HTTP compartilhado pelos clientes calls e jobs.

Responsável por uma única troca request/response:
- monta URL a partir da raiz + segmentos de path (URL-encoded)
- injeta headers padrão e Authorization (quando há token provider)
- serializa query string e corpo JSON do request
- mapeia erros via `map_error_payload`
- desserializa respostas 2xx no tipo esperado

Sem retries, sem backoff: falhas de transporte do httpx propagam
inalteradas para o chamador.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar
from urllib.parse import quote

import httpx

from config.settings import DEFAULT_USER_AGENT

from .errors import map_error_payload
from .result import SchedulerResult
from .scheduler_logging import log_scheduler_error, log_success

if TYPE_CHECKING:
    from types import TracebackType

    from pydantic import BaseModel

    from app.protocols import TokenProviderProtocol

    from .models import SchedulerRequest

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound="BaseModel")


@dataclass
class SchedulerHttpClientConfig:
    """Configuração do transporte."""

    root_url: str
    timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    default_headers: dict[str, str] = field(default_factory=dict)


def build_path(*segments: str) -> str:
    """Monta o path absoluto a partir de segmentos, codificando cada um.

    >>> build_path("calls", "a b/c")
    '/calls/a%20b%2Fc'
    """
    return "/" + "/".join(quote(segment, safe="") for segment in segments)


class SchedulerHttpClient:
    """Executa requisições contra a Scheduler API.

    Composto pelos clientes de recurso (calls, jobs), nunca herdado.
    O `httpx.AsyncClient` pode ser injetado (compartilhado com o resto
    da aplicação); só é fechado em `aclose()` quando foi criado aqui.
    """

    def __init__(
        self,
        config: SchedulerHttpClientConfig,
        *,
        token_provider: TokenProviderProtocol | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not config.root_url:
            raise ValueError("root_url é obrigatório para o cliente Scheduler")
        self._config = config
        self._root_url = config.root_url.rstrip("/")
        self._token_provider = token_provider
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds),
            verify=config.verify_ssl,
        )

    @property
    def root_url(self) -> str:
        return self._root_url

    def build_url(self, *segments: str) -> str:
        return self._root_url + build_path(*segments)

    async def get(
        self,
        request: SchedulerRequest,
        response_type: type[ResponseT],
        *segments: str,
    ) -> SchedulerResult[ResponseT]:
        return await self.exchange("GET", segments, request, response_type)

    async def post(
        self,
        request: SchedulerRequest,
        response_type: type[ResponseT],
        *segments: str,
    ) -> SchedulerResult[ResponseT]:
        return await self.exchange("POST", segments, request, response_type)

    async def delete(
        self,
        request: SchedulerRequest,
        *segments: str,
    ) -> SchedulerResult[None]:
        return await self.exchange("DELETE", segments, request, None)

    async def exchange(
        self,
        method: str,
        segments: tuple[str, ...],
        request: SchedulerRequest,
        response_type: type[ResponseT] | None,
    ) -> SchedulerResult[ResponseT]:
        """Executa uma troca completa e devolve o resultado tagged.

        Raises:
            ValueError: Se o token provider devolver token vazio
            httpx.TransportError: Falhas de conexão/timeout (sem tratamento)
            pydantic.ValidationError: Corpo 2xx fora do contrato esperado
        """
        path = build_path(*segments)
        headers = await self._build_headers()
        params = request.query_params()

        response = await self._http.request(
            method,
            self.build_url(*segments),
            params=params or None,
            json=request.json_body(),
            headers=headers,
        )

        error = await map_error_payload(response)
        if error is not None:
            log_scheduler_error(error, method, path)
            return SchedulerResult.failure(error)

        log_success(method, path, response.status_code)
        if response_type is None or not response.content:
            return SchedulerResult.success(None)
        return SchedulerResult.success(response_type.model_validate_json(response.content))

    async def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
            **self._config.default_headers,
        }
        if self._token_provider is not None:
            token = await self._token_provider.get_token()
            if not token or not token.strip():
                logger.error("scheduler_access_token_missing")
                raise ValueError(
                    "access_token é obrigatório para a Scheduler API. "
                    "Verifique se SCHEDULER_ACCESS_TOKEN está configurado."
                )
            headers["Authorization"] = f"Bearer {token.strip()}"
        return headers

    async def aclose(self) -> None:
        """Fecha o AsyncClient se ele pertence a esta instância."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> SchedulerHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
