"""Selection request model."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.enums import SelectionMode
from .list_ref import ListRef
from .query_spec import QuerySpec


class ListItemRequest(BaseModel):
    """A request for list items.

    At most one of ``item_id``, ``unique_id`` and ``query`` may be set; with
    none of them the request selects all items.
    """

    list_ref: ListRef
    item_id: int | None = None
    unique_id: UUID | None = None
    query: str | None = None
    fields: list[str] | None = None
    page_size: int | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_single_selector(self) -> ListItemRequest:
        selectors = [
            name
            for name, value in (
                ("item_id", self.item_id),
                ("unique_id", self.unique_id),
                ("query", self.query),
            )
            if value is not None
        ]
        if len(selectors) > 1:
            raise ValueError(f"Selectors are mutually exclusive, got: {', '.join(selectors)}")
        if self.item_id is not None and self.item_id < 0:
            raise ValueError("item_id must be >= 0")
        return self

    @property
    def mode(self) -> SelectionMode:
        if self.item_id is not None:
            return SelectionMode.BY_ID
        if self.unique_id is not None:
            return SelectionMode.BY_UNIQUE_ID
        if self.query is not None:
            return SelectionMode.BY_QUERY
        return SelectionMode.ALL_ITEMS

    def to_query_spec(self) -> QuerySpec:
        """Semantic query for the paged modes."""
        return QuerySpec(view_xml=self.query, fields=self.fields, page_size=self.page_size)
