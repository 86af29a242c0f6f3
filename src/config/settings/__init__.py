"""Agregador de settings do cf-scheduler-client.

Re-exporta settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.scheduler import (
    DEFAULT_USER_AGENT,
    SCHEDULER_CLIENT_VERSION,
    SchedulerSettings,
    get_scheduler_settings,
)

__all__ = [
    # Constants
    "DEFAULT_USER_AGENT",
    "SCHEDULER_CLIENT_VERSION",
    # Scheduler
    "SchedulerSettings",
    "get_scheduler_settings",
]
