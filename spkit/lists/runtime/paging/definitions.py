"""Repartitioning policy definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models import ListItem

ID_FIELDS = ("ID", "Id")

# One below the default list view threshold of 5000.
DEFAULT_WINDOW_SPAN = 4999


@dataclass(frozen=True)
class RepartitionPolicy:
    """How the throttling fallback splits the key space.

    Attributes:
        key_field: Indexed, monotonically assigned field used for windows
        default_window_span: Window span when the caller gave no page size
        enabled: Whether the fallback may run at all
    """

    key_field: str = "ID"
    default_window_span: int = DEFAULT_WINDOW_SPAN
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.default_window_span <= 0:
            raise ValueError("default_window_span must be > 0")
        if not self.key_field:
            raise ValueError("key_field must be non-empty")

    def window_span(self, page_size: int | None) -> int:
        """Span to use for a request with the given page size."""
        if page_size is not None and page_size > 0:
            return page_size
        return self.default_window_span

    def key_of(self, item: ListItem) -> int:
        """Value of the key field on an item.

        Raises:
            KeyError: If the item does not carry the key field
            ValueError: If the value is not an integer
        """
        if self.key_field in ID_FIELDS:
            return item.id
        return int(item[self.key_field])
