"""Conector Cloud Foundry Scheduler — adapter de borda para a Scheduler API v1.

Este módulo é o único ponto de IO para o Scheduler.
Responsabilidades:
- Transporte HTTP compartilhado (http_base)
- Clientes de recurso: calls (create, delete, list) e jobs (create)
- Modelos de request/response
- Mapeamento de payloads de erro em erros de domínio
"""

from .auth import StaticTokenProvider
from .calls import SchedulerCalls
from .client import SchedulerClient
from .errors import (
    SchedulerError,
    SchedulerException,
    SchedulerFailure,
    UnknownSchedulerException,
    map_error_payload,
    parse_error_payload,
)
from .http_base import SchedulerHttpClient, SchedulerHttpClientConfig, build_path
from .jobs import SchedulerJobs
from .result import SchedulerResult

__all__ = [
    "SchedulerCalls",
    "SchedulerClient",
    "SchedulerError",
    "SchedulerException",
    "SchedulerFailure",
    "SchedulerHttpClient",
    "SchedulerHttpClientConfig",
    "SchedulerJobs",
    "SchedulerResult",
    "StaticTokenProvider",
    "UnknownSchedulerException",
    "build_path",
    "map_error_payload",
    "parse_error_payload",
]
