"""Bootstrap — inicialização e wiring.

Composition root: configura logging e conecta implementações concretas
(api.connectors.scheduler) aos protocolos.

Uso:
    from app.bootstrap import create_scheduler_client, initialize_app

    initialize_app()
    async with create_scheduler_client() as scheduler:
        ...
"""

from __future__ import annotations

import os

from app.bootstrap.scheduler_factory import create_scheduler_client
from app.observability import get_correlation_id
from config.logging import configure_logging

SERVICE_NAME = "cf_scheduler_client"

DEFAULT_LOG_LEVEL = "INFO"


def initialize_app() -> None:
    """Configura logging JSON com correlation_id (nível via LOG_LEVEL)."""
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "SERVICE_NAME",
    "create_scheduler_client",
    "initialize_app",
]
