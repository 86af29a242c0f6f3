"""Contratos do recurso jobs (Scheduler API v1)."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from .common import SchedulerModel, SchedulerRequest


class CreateJobRequest(SchedulerRequest):
    """Request de criação de job.

    `application_id` vai na query (`app_guid`); nome, comando e limites
    de disco/memória formam o corpo.
    """

    query_fields: ClassVar[frozenset[str]] = frozenset({"application_id"})

    application_id: str = Field(..., min_length=1, alias="app_guid")
    name: str = Field(..., min_length=1)
    command: str = Field(..., min_length=1)
    disk_in_mb: int | None = Field(default=None, gt=0)
    memory_in_mb: int | None = Field(default=None, gt=0)


class CreateJobResponse(SchedulerModel):
    """Job como devolvido pelo servidor."""

    id: str = Field(..., alias="guid")
    name: str
    command: str
    application_id: str = Field(..., alias="app_guid")
    space_id: str = Field(..., alias="space_guid")
    state: str | None = None
    disk_in_mb: int | None = None
    memory_in_mb: int | None = None
    created_at: str
    updated_at: str


__all__ = ["CreateJobRequest", "CreateJobResponse"]
