"""Contratos compartilhados da Scheduler API v1.

Todos os modelos são imutáveis. Nomes Python seguem snake_case; os nomes
de fio (guid, app_guid, auth_header, ...) ficam nos aliases.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class SchedulerModel(BaseModel):
    """Base dos DTOs: imutável, aceita nome Python ou alias de fio."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )


class SchedulerRequest(SchedulerModel):
    """Base dos requests.

    Subclasses declaram quais campos viajam fora do corpo JSON:
    - `query_fields`: codificados como query string (nome do alias)
    - `path_fields`: usados só para montar o path
    """

    query_fields: ClassVar[frozenset[str]] = frozenset()
    path_fields: ClassVar[frozenset[str]] = frozenset()

    def query_params(self) -> dict[str, str]:
        """Query string do request (campos None são omitidos)."""
        params: dict[str, str] = {}
        for name in sorted(self.query_fields):
            value = getattr(self, name)
            if value is None:
                continue
            field = type(self).model_fields[name]
            params[field.alias or name] = str(value)
        return params

    def json_body(self) -> dict[str, Any] | None:
        """Corpo JSON do request, ou None se não houver campos de corpo."""
        body = self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude=set(self.query_fields | self.path_fields),
        )
        return body or None


class Link(SchedulerModel):
    """Link de navegação."""

    href: str = Field(..., description="URL do link.")


class Pagination(SchedulerModel):
    """Links de paginação e totais de uma listagem."""

    first: Link | None = Field(default=None, description="Primeira página.")
    last: Link | None = Field(default=None, description="Última página.")
    next: Link | None = Field(default=None, description="Próxima página.")
    previous: Link | None = Field(default=None, description="Página anterior.")
    total_pages: int | None = Field(default=None, ge=0, description="Total de páginas.")
    total_results: int | None = Field(default=None, ge=0, description="Total de resultados.")


__all__ = ["Link", "Pagination", "SchedulerModel", "SchedulerRequest"]
