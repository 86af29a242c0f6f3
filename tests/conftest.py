"""Configuração do pytest para o cf-scheduler-client."""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ROOT_URL = "https://scheduler.test"


@pytest.fixture
def root_url() -> str:
    return ROOT_URL


@pytest.fixture
def load_fixture() -> Callable[[str], str]:
    """Lê um fixture (caminho relativo a tests/fixtures) como texto."""

    def _load(relative_path: str) -> str:
        return (FIXTURES_DIR / relative_path).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Constrói httpx.Response real com corpo em memória."""

    def _make(
        status_code: int,
        body: str = "",
        method: str = "GET",
        url: str = ROOT_URL,
    ) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"} if body else {},
            request=httpx.Request(method, url),
        )

    return _make


@pytest.fixture
def mock_http() -> Any:
    """AsyncClient fake: configure `mock_http.request.return_value`."""
    return AsyncMock(spec=httpx.AsyncClient)
