"""Connectors — adapters de borda para APIs externas.

Estrutura:
- scheduler/: Cloud Foundry Scheduler API v1 (calls, jobs)
"""

__all__: list[str] = []
