"""Cliente do recurso jobs da Scheduler API v1."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import CreateJobResponse

if TYPE_CHECKING:
    from .http_base import SchedulerHttpClient
    from .models import CreateJobRequest
    from .result import SchedulerResult


class SchedulerJobs:
    """Operações sobre jobs."""

    def __init__(self, http: SchedulerHttpClient) -> None:
        self._http = http

    async def create(self, request: CreateJobRequest) -> SchedulerResult[CreateJobResponse]:
        """POST /jobs?app_guid={application_id}."""
        return await self._http.post(request, CreateJobResponse, "jobs")
