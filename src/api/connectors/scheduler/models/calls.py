"""Contratos do recurso calls (Scheduler API v1)."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, model_validator

from .common import Pagination, SchedulerModel, SchedulerRequest


class CreateCallRequest(SchedulerRequest):
    """Request de criação de call.

    `application_id` vai na query (`app_guid`); o restante é o corpo.
    """

    query_fields: ClassVar[frozenset[str]] = frozenset({"application_id"})

    application_id: str = Field(..., min_length=1, alias="app_guid")
    authorization_header: str = Field(..., alias="auth_header")
    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class CallResource(SchedulerModel):
    """Call como devolvida pelo servidor."""

    id: str = Field(..., alias="guid")
    name: str
    url: str
    authorization_header: str | None = Field(default=None, alias="auth_header")
    application_id: str = Field(..., alias="app_guid")
    space_id: str = Field(..., alias="space_guid")
    created_at: str
    updated_at: str


class CreateCallResponse(CallResource):
    """Resposta de criação de call (mesmo formato de CallResource)."""


class DeleteCallRequest(SchedulerRequest):
    """Request de remoção de call; o id só compõe o path."""

    path_fields: ClassVar[frozenset[str]] = frozenset({"call_id"})

    call_id: str = Field(..., min_length=1)


class ListCallsRequest(SchedulerRequest):
    """Request de listagem de calls.

    Filtros mutuamente exclusivos: por aplicação (`app_guid`) ou por
    space (`space_guid`). Sem filtro, lista o que o token enxerga.
    """

    query_fields: ClassVar[frozenset[str]] = frozenset({"application_id", "space_id"})

    application_id: str | None = Field(default=None, min_length=1, alias="app_guid")
    space_id: str | None = Field(default=None, min_length=1, alias="space_guid")

    @model_validator(mode="after")
    def _single_filter(self) -> ListCallsRequest:
        if self.application_id is not None and self.space_id is not None:
            raise ValueError("application_id e space_id são mutuamente exclusivos")
        return self


class ListCallsResponse(SchedulerModel):
    """Página de calls."""

    pagination: Pagination
    resources: tuple[CallResource, ...] = ()


__all__ = [
    "CallResource",
    "CreateCallRequest",
    "CreateCallResponse",
    "DeleteCallRequest",
    "ListCallsRequest",
    "ListCallsResponse",
]
