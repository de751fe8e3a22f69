"""List reference model."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.exceptions import ValidationError


class ListRef(BaseModel):
    """Identifies a list on a site by title or by id (GUID)."""

    title: str | None = None
    list_id: UUID | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @model_validator(mode="after")
    def validate_one_identifier(self) -> ListRef:
        """Exactly one of title or list_id must be set."""
        if (self.title is None) == (self.list_id is None):
            raise ValueError("ListRef requires exactly one of title or list_id")
        if self.title is not None and not self.title:
            raise ValueError("List title must be non-empty")
        return self

    @classmethod
    def from_value(cls, value: ListRef | UUID | str) -> ListRef:
        """Resolve a title, GUID string or UUID into a ListRef."""
        if isinstance(value, ListRef):
            return value
        if isinstance(value, UUID):
            return cls(list_id=value)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("List must be a non-empty title or a GUID")
        try:
            return cls(list_id=UUID(value.strip()))
        except ValueError:
            return cls(title=value)

    def api_path(self) -> str:
        """Relative REST path segment below ``_api/web/``."""
        if self.list_id is not None:
            return f"lists(guid'{self.list_id}')"
        escaped = self.title.replace("'", "''")
        return f"lists/GetByTitle('{escaped}')"

    def __str__(self) -> str:
        return self.title if self.title is not None else str(self.list_id)
