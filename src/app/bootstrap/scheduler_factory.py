"""Factory de wiring do cliente Scheduler (bootstrap)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.scheduler import (
    SchedulerClient,
    SchedulerHttpClient,
    SchedulerHttpClientConfig,
    StaticTokenProvider,
)
from config.settings import get_scheduler_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols import TokenProviderProtocol
    from config.settings import SchedulerSettings

logger = logging.getLogger(__name__)


def create_scheduler_client(
    settings: SchedulerSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    token_provider: TokenProviderProtocol | None = None,
) -> SchedulerClient:
    """Cria SchedulerClient com dependências injetadas.

    Args:
        settings: SchedulerSettings opcional. Se None, carrega do ambiente.
        http_client: AsyncClient compartilhado (não é fechado pelo cliente).
        token_provider: Provider de token. Se None e houver
            access_token configurado, usa StaticTokenProvider.

    Raises:
        ValueError: Se as settings forem inválidas.
    """
    scheduler = settings or get_scheduler_settings()
    errors = scheduler.validate()
    if errors:
        logger.error("scheduler_settings_invalid", extra={"error_count": len(errors)})
        raise ValueError("Configuração do Scheduler inválida: " + "; ".join(errors))

    if token_provider is None and scheduler.access_token:
        token_provider = StaticTokenProvider(scheduler.access_token)

    config = SchedulerHttpClientConfig(
        root_url=scheduler.root_url,
        timeout_seconds=scheduler.request_timeout_seconds,
        user_agent=scheduler.user_agent,
        verify_ssl=scheduler.verify_ssl,
    )
    http = SchedulerHttpClient(
        config,
        token_provider=token_provider,
        http_client=http_client,
    )
    logger.info(
        "scheduler_client_created",
        extra={"root_url": scheduler.root_url, "authenticated": token_provider is not None},
    )
    return SchedulerClient(http)
