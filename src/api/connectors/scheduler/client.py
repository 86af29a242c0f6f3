"""Agregado dos clientes da Scheduler API sobre um transporte único."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .calls import SchedulerCalls
from .jobs import SchedulerJobs

if TYPE_CHECKING:
    from types import TracebackType

    from .http_base import SchedulerHttpClient


class SchedulerClient:
    """Expõe `calls` e `jobs` compartilhando o mesmo SchedulerHttpClient.

    Uso:
        async with create_scheduler_client() as scheduler:
            result = await scheduler.calls.list(ListCallsRequest(space_id="..."))
            page = result.unwrap()
    """

    def __init__(self, http: SchedulerHttpClient) -> None:
        self._http = http
        self.calls = SchedulerCalls(http)
        self.jobs = SchedulerJobs(http)

    @property
    def http(self) -> SchedulerHttpClient:
        return self._http

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> SchedulerClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
