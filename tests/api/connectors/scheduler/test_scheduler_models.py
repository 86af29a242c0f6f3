"""Testes dos DTOs: separação query/corpo e validação local."""

from __future__ import annotations

import pydantic
import pytest

from api.connectors.scheduler import SchedulerException, SchedulerResult
from api.connectors.scheduler.models import (
    CreateCallRequest,
    CreateJobRequest,
    DeleteCallRequest,
    ListCallsRequest,
    Pagination,
)


class TestCreateCallRequest:
    def test_application_id_goes_to_query(self) -> None:
        request = CreateCallRequest(
            application_id="app",
            authorization_header="Basic abc",
            name="n",
            url="https://target",
        )

        assert request.query_params() == {"app_guid": "app"}
        assert request.json_body() == {
            "auth_header": "Basic abc",
            "name": "n",
            "url": "https://target",
        }

    def test_accepts_wire_names(self) -> None:
        request = CreateCallRequest.model_validate(
            {"app_guid": "app", "auth_header": "h", "name": "n", "url": "u"}
        )
        assert request.application_id == "app"
        assert request.authorization_header == "h"

    def test_is_immutable(self) -> None:
        request = CreateCallRequest(
            application_id="app", authorization_header="h", name="n", url="u"
        )
        with pytest.raises(pydantic.ValidationError):
            request.name = "other"

    def test_empty_name_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            CreateCallRequest(application_id="app", authorization_header="h", name="", url="u")


class TestListCallsRequest:
    def test_filters_are_mutually_exclusive(self) -> None:
        with pytest.raises(pydantic.ValidationError, match="mutuamente exclusivos"):
            ListCallsRequest(application_id="app", space_id="space")

    def test_no_filter(self) -> None:
        request = ListCallsRequest()
        assert request.query_params() == {}
        assert request.json_body() is None


class TestDeleteCallRequest:
    def test_call_id_only_in_path(self) -> None:
        request = DeleteCallRequest(call_id="c")
        assert request.query_params() == {}
        assert request.json_body() is None


class TestCreateJobRequest:
    def test_limits_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            CreateJobRequest(application_id="app", name="n", command="c", memory_in_mb=0)


class TestPagination:
    def test_decodes_wire_fields(self) -> None:
        pagination = Pagination.model_validate(
            {
                "first": {"href": "f"},
                "last": {"href": "l"},
                "next": None,
                "total_pages": 3,
                "total_results": 25,
            }
        )
        assert pagination.first is not None and pagination.first.href == "f"
        assert pagination.next is None
        assert pagination.previous is None
        assert pagination.total_pages == 3
        assert pagination.total_results == 25


class TestSchedulerResult:
    def test_success(self) -> None:
        result = SchedulerResult.success("value")
        assert result.ok
        assert result.unwrap() == "value"

    def test_failure(self) -> None:
        error = SchedulerException(400, "bad", [])
        result: SchedulerResult[str] = SchedulerResult.failure(error)
        assert not result.ok
        assert result.value is None
        with pytest.raises(SchedulerException) as exc_info:
            result.unwrap()
        assert exc_info.value is error
