"""List item data model."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ListItem(BaseModel):
    """A single list item.

    ``id`` is the list's indexed key; every other column value returned by
    the store lives in ``field_values`` under its internal field name.
    """

    id: int = Field(..., ge=0)
    unique_id: UUID | None = None
    field_values: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, name: str) -> Any:
        return self.field_values[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.field_values.get(name, default)
