"""Protocolos (contratos) usados entre camadas."""

from .token_provider import TokenProviderProtocol

__all__ = ["TokenProviderProtocol"]
