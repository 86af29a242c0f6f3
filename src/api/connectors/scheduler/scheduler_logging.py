"""Helpers de logging para a Scheduler API (sem tokens nem corpos)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import SchedulerException

if TYPE_CHECKING:
    from .errors import SchedulerFailure

logger = logging.getLogger(__name__)


def log_scheduler_error(
    error: SchedulerFailure,
    method: str,
    path: str,
) -> None:
    """Loga resposta de erro sem expor o corpo bruto."""
    if isinstance(error, SchedulerException):
        error_kind = "domain"
        error_count = len(error.errors)
    else:
        error_kind = "unknown"
        error_count = 0

    logger.warning(
        "scheduler_error_response",
        extra={
            "method": method,
            "path": path,
            "status_code": error.status_code,
            "error_kind": error_kind,
            "error_count": error_count,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga sucesso."""
    logger.debug(
        "scheduler_request_success",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )
