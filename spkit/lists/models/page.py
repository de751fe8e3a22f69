"""Item page model."""

from pydantic import BaseModel, ConfigDict, Field

from .list_item import ListItem


class ItemPage(BaseModel):
    """One page of items returned by a single store call.

    Attributes:
        items: Items in store order
        next_cursor: Continuation for the next page, None when exhausted
        page_index: Zero-based index of this page within its pagination loop
        window_index: Key window the page belongs to (fallback path only)
    """

    items: list[ListItem] = Field(default_factory=list)
    next_cursor: str | None = None
    page_index: int = Field(default=0, ge=0)
    window_index: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_last(self) -> bool:
        return self.next_cursor is None

    def __len__(self) -> int:
        return len(self.items)
