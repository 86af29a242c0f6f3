"""Logging JSON do cliente Scheduler.

Cada troca HTTP com a Scheduler API gera um evento estruturado
(`scheduler_request_success` em DEBUG, `scheduler_error_response` em
WARNING) com method, path e status_code; o handler instalado aqui acrescenta
service e correlation_id e mascara credenciais (auth_header, tokens) antes
da serialização.

Uso:
    from app.observability import get_correlation_id
    from config.logging import configure_logging

    # Uma vez, em app.bootstrap.initialize_app
    configure_logging(
        level="DEBUG",
        service_name="cf_scheduler_client",
        correlation_id_getter=get_correlation_id,
    )

    # Saída de `await scheduler.calls.delete(DeleteCallRequest(call_id="c1"))`:
    # {"level": "DEBUG", "message": "scheduler_request_success",
    #  "method": "DELETE", "path": "/calls/c1", "status_code": 204, ...}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "cf_scheduler_client"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala o handler JSON do cliente Scheduler no root logger.

    Chamada por app.bootstrap.initialize_app. Os handlers anteriores do
    root logger são descartados. Com level="INFO" os eventos
    `scheduler_request_success` (DEBUG) ficam de fora e apenas
    `scheduler_error_response` e fallbacks do mapper aparecem.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case insensitive).
        service_name: Valor do campo `service` em cada evento.
        correlation_id_getter: Fonte do campo `correlation_id`
            (app.observability.get_correlation_id no bootstrap).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado (geralmente __name__)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Registra que um corpo de erro caiu no caminho UnknownSchedulerException.

    O mapper de erros chama com o tipo do primeiro erro de validação do
    pydantic como `reason`; o corpo em si nunca é logado.

    Exemplo (400 com corpo "Invalid Error Response"):
        log_fallback(logger, "scheduler_error_mapper", reason="json_invalid")
        # {"message": "Fallback applied for scheduler_error_mapper",
        #  "fallback_used": true, "component": "scheduler_error_mapper",
        #  "reason": "json_invalid", ...}

    Args:
        logger: Logger do módulo chamador.
        component: Componente que aplicou o fallback.
        reason: Tipo do erro de parse.
        elapsed_ms: Duração, quando o chamador mede.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
