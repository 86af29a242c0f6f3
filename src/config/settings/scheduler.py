"""Settings do cliente Cloud Foundry Scheduler.

Configurações de acesso à Scheduler API v1 (recursos calls e jobs).
Lidas uma única vez do ambiente e cacheadas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SCHEDULER_CLIENT_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"cf-scheduler-client/{SCHEDULER_CLIENT_VERSION}"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class SchedulerSettings:
    """Configurações do cliente Scheduler.

    Attributes:
        api_base_url: URL raiz da Scheduler API (ex: https://scheduler.run.pivotal.io)
        access_token: Token OAuth usado no header Authorization
        request_timeout_seconds: Timeout por requisição HTTP
        verify_ssl: Valida certificado TLS do servidor
        user_agent: User-Agent enviado em todas as requisições
    """

    api_base_url: str = ""
    access_token: str = ""
    request_timeout_seconds: float = 30.0
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def root_url(self) -> str:
        """URL raiz sem barra final."""
        return self.api_base_url.rstrip("/")

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Scheduler.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url:
            errors.append("SCHEDULER_API_BASE_URL não configurado")
        elif not self.api_base_url.startswith(("http://", "https://")):
            errors.append("SCHEDULER_API_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("SCHEDULER_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not self.user_agent.strip():
            errors.append("SCHEDULER_USER_AGENT não pode ser vazio")

        return errors


def _load_from_env() -> SchedulerSettings:
    """Carrega SchedulerSettings a partir de variáveis de ambiente."""
    return SchedulerSettings(
        api_base_url=os.getenv("SCHEDULER_API_BASE_URL", ""),
        access_token=os.getenv("SCHEDULER_ACCESS_TOKEN", ""),
        request_timeout_seconds=float(
            os.getenv("SCHEDULER_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        verify_ssl=os.getenv("SCHEDULER_VERIFY_SSL", "true").strip().lower() in _TRUTHY,
        user_agent=os.getenv("SCHEDULER_USER_AGENT", DEFAULT_USER_AGENT),
    )


@lru_cache(maxsize=1)
def get_scheduler_settings() -> SchedulerSettings:
    """Retorna instância cacheada de SchedulerSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
