"""Testes do correlation_id nas operações do Scheduler."""

from __future__ import annotations

import asyncio
import json
import logging

import pytest

from api.connectors.scheduler import (
    SchedulerCalls,
    SchedulerHttpClient,
    SchedulerHttpClientConfig,
)
from api.connectors.scheduler.models import ListCallsRequest
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.logging import CorrelationIdFilter, create_json_formatter


class TestCorrelationContext:
    def test_set_generates_uuid_when_missing(self) -> None:
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_parallel_listings_keep_their_own_id(
        self, mock_http, root_url, make_response, load_fixture
    ) -> None:
        seen: dict[str, str] = {}
        body = load_fixture("scheduler/v1/calls/GET_response.json")

        async def _request(method, url, **kwargs):
            await asyncio.sleep(0)
            seen[kwargs["params"]["space_guid"]] = get_correlation_id()
            return make_response(200, body)

        mock_http.request.side_effect = _request
        calls = SchedulerCalls(
            SchedulerHttpClient(SchedulerHttpClientConfig(root_url=root_url), http_client=mock_http)
        )

        async def list_space(space_guid: str) -> None:
            token = set_correlation_id(f"calls-{space_guid}")
            try:
                (await calls.list(ListCallsRequest(space_id=space_guid))).unwrap()
            finally:
                reset_correlation_id(token)

        await asyncio.gather(list_space("s1"), list_space("s2"))

        assert seen == {"s1": "calls-s1", "s2": "calls-s2"}
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_error_event_carries_correlation_id(
        self, mock_http, root_url, make_response, load_fixture, caplog: pytest.LogCaptureFixture
    ) -> None:
        mock_http.request.return_value = make_response(
            400, load_fixture("scheduler/v1/error_response.json"), "POST"
        )
        http = SchedulerHttpClient(SchedulerHttpClientConfig(root_url=root_url), http_client=mock_http)
        calls = SchedulerCalls(http)

        token = set_correlation_id("job-sync-42")
        try:
            with caplog.at_level(logging.WARNING, logger="api.connectors.scheduler"):
                await calls.list(ListCallsRequest())
            record = next(
                r for r in caplog.records if r.getMessage() == "scheduler_error_response"
            )
            CorrelationIdFilter("cf_scheduler_client", get_correlation_id).filter(record)
        finally:
            reset_correlation_id(token)

        output = json.loads(create_json_formatter().format(record))

        assert output["correlation_id"] == "job-sync-42"
        assert output["service"] == "cf_scheduler_client"
        assert output["message"] == "scheduler_error_response"
        assert output["method"] == "GET"
        assert output["path"] == "/calls"
        assert output["error_kind"] == "domain"
        assert output["error_count"] == 1
