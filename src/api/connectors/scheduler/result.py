"""Resultado tagged das operações do Scheduler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .errors import SchedulerFailure

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SchedulerResult(Generic[T]):
    """Desfecho de uma única troca request/response.

    Exatamente um dos lados é significativo: `error` preenchido indica
    falha (SchedulerException ou UnknownSchedulerException); caso
    contrário `value` é o payload desserializado (None para respostas
    sem corpo, como o 204 do delete).
    """

    value: T | None = None
    error: SchedulerFailure | None = None

    @classmethod
    def success(cls, value: T | None = None) -> SchedulerResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: SchedulerFailure) -> SchedulerResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T | None:
        """Retorna o valor ou levanta o erro carregado."""
        if self.error is not None:
            raise self.error
        return self.value
