"""DTOs de request/response da Scheduler API v1."""

from .calls import (
    CallResource,
    CreateCallRequest,
    CreateCallResponse,
    DeleteCallRequest,
    ListCallsRequest,
    ListCallsResponse,
)
from .common import Link, Pagination, SchedulerModel, SchedulerRequest
from .jobs import CreateJobRequest, CreateJobResponse

__all__ = [
    "CallResource",
    "CreateCallRequest",
    "CreateCallResponse",
    "CreateJobRequest",
    "CreateJobResponse",
    "DeleteCallRequest",
    "Link",
    "ListCallsRequest",
    "ListCallsResponse",
    "Pagination",
    "SchedulerModel",
    "SchedulerRequest",
]
