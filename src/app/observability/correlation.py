"""correlation_id das operações do Scheduler.

Cada evento do conector (`scheduler_request_success`,
`scheduler_error_response`) carrega o id do contexto asyncio corrente.
Tasks criadas por asyncio.gather copiam o contexto, então listagens
paralelas por space podem ser separadas nos logs:

    async def list_space(space_guid: str) -> ListCallsResponse:
        token = set_correlation_id(f"calls-{space_guid}")
        try:
            return (await scheduler.calls.list(
                ListCallsRequest(space_id=space_guid)
            )).unwrap()
        finally:
            reset_correlation_id(token)

    await asyncio.gather(*(list_space(guid) for guid in space_guids))
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual; gera UUID4 se None."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)
