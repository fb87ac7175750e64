"""Domain contracts for decoded engine replies."""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

CommandArg: TypeAlias = str | int | float


class Document(BaseModel):
    """Represent one document returned by a search."""

    model_config = ConfigDict(frozen=True)

    id: str
    score: float | None = None
    payload: str | None = None
    fields: dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> Any:
        """Return the value of a returned field."""
        return self.fields[name]


class SearchResult(BaseModel):
    """Represent a decoded search reply.

    Args:
        total: Number of matching documents, which may exceed the page size.
        documents: Documents of the requested page, in reply order.
        has_content: False when the query asked for ids only.

    """

    model_config = ConfigDict(frozen=True)

    total: int
    documents: list[Document] = Field(default_factory=list)
    has_content: bool = True


class AggregationResult(BaseModel):
    """Represent one decoded batch of aggregation rows.

    Args:
        total: Total reported by the engine for the pipeline.
        rows: Result rows as field mappings.
        cursor_id: Cursor handle when cursor mode was requested, ``0`` once exhausted.

    """

    model_config = ConfigDict(frozen=True)

    total: int
    rows: list[dict[str, Any]] = Field(default_factory=list)
    cursor_id: int | None = None

    @property
    def has_more(self) -> bool:
        """Tell whether the cursor can still be read."""
        return bool(self.cursor_id)


class InfoResult(BaseModel):
    """Represent a snapshot of index metadata."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, Any] = Field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Return one metadata value, or ``default`` when absent."""
        return self.values.get(key, default)

    @property
    def index_name(self) -> str | None:
        """Return the reported index name."""
        return self.values.get("index_name")

    @property
    def num_docs(self) -> int:
        """Return the number of indexed documents."""
        return int(self.values.get("num_docs", 0))
