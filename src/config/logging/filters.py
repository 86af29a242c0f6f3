"""Filters de logging para injeção de contexto e redação.

- CorrelationIdFilter: adiciona correlation_id e service a cada record.
- SensitiveFieldFilter: mascara campos de `extra` que carregam credenciais
  (Authorization, auth_header, tokens). Calls do Scheduler transportam
  o header de autorização do endpoint alvo, então ele nunca pode vazar.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "***"

DEFAULT_SENSITIVE_FIELDS = frozenset(
    {
        "access_token",
        "auth_header",
        "authorization",
        "authorization_header",
        "token",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; correlation_id explícito via `extra` é preservado."""
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara atributos sensíveis do record (vindos de `extra`).

    A comparação de nomes é case-insensitive.
    """

    def __init__(self, fields: Iterable[str] = DEFAULT_SENSITIVE_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(name.lower() for name in fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in list(vars(record)):
            if name.lower() in self._fields:
                setattr(record, name, REDACTED)
        return True
