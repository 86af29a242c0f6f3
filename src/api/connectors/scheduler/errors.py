"""Erros e mapeamento de payloads de erro da Scheduler API.

Três desfechos, decididos pelo status da resposta:
1. 2xx: sem erro (o corpo não é inspecionado)
2. não-2xx com corpo estruturado `{"description", "errors": [...]}`:
   SchedulerException
3. não-2xx com qualquer outro corpo: UnknownSchedulerException com o
   texto bruto, sem re-serialização
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, ValidationError

from config.logging import log_fallback

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)

UNKNOWN_SCHEDULER_EXCEPTION_MESSAGE = "Unknown Scheduler Exception"


class SchedulerError(BaseModel):
    """Causa individual de um erro de validação."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    resource: str
    message: str


class _ErrorPayload(BaseModel):
    """Formato estruturado do corpo de erro."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    description: str
    errors: tuple[SchedulerError, ...]


class SchedulerException(Exception):
    """Erro de domínio devolvido pelo servidor com causas itemizadas."""

    def __init__(
        self,
        status_code: int,
        description: str,
        errors: list[SchedulerError] | tuple[SchedulerError, ...],
    ) -> None:
        super().__init__(description)
        self.status_code = status_code
        self.description = description
        self.errors = list(errors)

    def __repr__(self) -> str:
        return (
            f"SchedulerException(status_code={self.status_code!r}, "
            f"description={self.description!r}, errors={self.errors!r})"
        )


class UnknownSchedulerException(Exception):
    """Resposta não-2xx cujo corpo não segue o formato estruturado.

    ``payload`` é o corpo decodificado como texto (``response.text``), não
    os bytes brutos: sequências inválidas no charset da resposta viram
    U+FFFD.
    """

    def __init__(self, status_code: int, payload: str) -> None:
        super().__init__(UNKNOWN_SCHEDULER_EXCEPTION_MESSAGE)
        self.status_code = status_code
        self.payload = payload

    def __repr__(self) -> str:
        return (
            f"UnknownSchedulerException(status_code={self.status_code!r}, "
            f"payload={self.payload!r})"
        )


SchedulerFailure = SchedulerException | UnknownSchedulerException


def is_success_status(status_code: int) -> bool:
    """True para status 2xx."""
    return 200 <= status_code < 300


def parse_error_payload(status_code: int, body: str) -> SchedulerFailure:
    """Converte o corpo de uma resposta não-2xx no erro correspondente.

    Qualquer falha de parse estrutural (JSON inválido, campos obrigatórios
    ausentes, tipos errados) resulta em UnknownSchedulerException.
    """
    try:
        payload = _ErrorPayload.model_validate_json(body)
    except ValidationError as exc:
        reason = exc.errors()[0]["type"] if exc.errors() else "invalid_payload"
        log_fallback(logger, "scheduler_error_mapper", reason=reason)
        return UnknownSchedulerException(status_code, body)

    return SchedulerException(status_code, payload.description, payload.errors)


async def map_error_payload(response: httpx.Response) -> SchedulerFailure | None:
    """Inspeciona a resposta e devolve o erro de domínio, se houver.

    Respostas em streaming são lidas por completo antes do parse; um
    corpo já carregado não é lido de novo.

    Args:
        response: Resposta httpx, carregada ou em streaming

    Returns:
        None para 2xx; SchedulerException ou UnknownSchedulerException
        caso contrário.
    """
    if is_success_status(response.status_code):
        return None
    await response.aread()
    return parse_error_payload(response.status_code, response.text)
