"""Token providers concretos para o conector Scheduler."""

from __future__ import annotations


class StaticTokenProvider:
    """Serve um token fixo (ex: SCHEDULER_ACCESS_TOKEN).

    Aceita o token com ou sem o prefixo "bearer "; o prefixo é removido
    porque o header é montado pelo SchedulerHttpClient.
    """

    def __init__(self, token: str) -> None:
        value = token.strip()
        if value.lower().startswith("bearer "):
            value = value[len("bearer ") :].strip()
        self._token = value

    async def get_token(self) -> str:
        return self._token
