"""Formatter JSON do cliente Scheduler.

Campos presentes em todo log:
- asctime, level, logger, message
- correlation_id, service

Campos extras (ex: method, path, status_code) são anexados pelo
python-json-logger a partir de `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável: o formatter serializa na ordem do format string
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter dos eventos do conector Scheduler.

    Um POST /jobs rejeitado pela validação de cron vira:
        {
            "asctime": "2026-10-19 10:30:00,120",
            "level": "WARNING",
            "logger": "api.connectors.scheduler.scheduler_logging",
            "message": "scheduler_error_response",
            "correlation_id": "job-sync-42",
            "service": "cf_scheduler_client",
            "method": "POST",
            "path": "/jobs",
            "status_code": 400,
            "error_kind": "domain",
            "error_count": 1
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
