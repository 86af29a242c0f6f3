"""Protocolo de fornecimento de token para a Scheduler API.

Evita dependência direta da camada api em como o token é obtido
(UAA, cache, variável de ambiente).
"""

from __future__ import annotations

from typing import Protocol


class TokenProviderProtocol(Protocol):
    """Contrato mínimo para obter o access token atual."""

    async def get_token(self) -> str: ...
