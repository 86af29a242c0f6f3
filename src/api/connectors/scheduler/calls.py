"""Cliente do recurso calls da Scheduler API v1."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import CreateCallResponse, ListCallsResponse

if TYPE_CHECKING:
    from .http_base import SchedulerHttpClient
    from .models import CreateCallRequest, DeleteCallRequest, ListCallsRequest
    from .result import SchedulerResult


class SchedulerCalls:
    """Operações sobre calls: create, delete e list."""

    def __init__(self, http: SchedulerHttpClient) -> None:
        self._http = http

    async def create(self, request: CreateCallRequest) -> SchedulerResult[CreateCallResponse]:
        """POST /calls?app_guid={application_id}."""
        return await self._http.post(request, CreateCallResponse, "calls")

    async def delete(self, request: DeleteCallRequest) -> SchedulerResult[None]:
        """DELETE /calls/{call_id}; sucesso (204) não tem payload."""
        return await self._http.delete(request, "calls", request.call_id)

    async def list(self, request: ListCallsRequest) -> SchedulerResult[ListCallsResponse]:
        """GET /calls filtrado por app_guid ou space_guid."""
        return await self._http.get(request, ListCallsResponse, "calls")
