"""Render view queries from the semantic QuerySpec model.

These helpers are the only place that knows which CAML directives a given
retrieval step needs. They always return a fresh ViewQuery; inputs are never
mutated.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING
from uuid import UUID

from .view import ViewQuery, comparison

if TYPE_CHECKING:
    from ..models import KeyRange, QuerySpec

DEFAULT_KEY_FIELD = "ID"


def build_view_query(spec: QuerySpec, *, key_field: str = DEFAULT_KEY_FIELD) -> ViewQuery:
    """Build the initial query for a paged retrieval.

    Starts from the caller's view XML (or the all-items view) and merges in
    the field projection, paged row limit and key range when present.

    Raises:
        MalformedQueryError: If spec.view_xml cannot be parsed
    """
    view = ViewQuery.parse(spec.view_xml) if spec.view_xml is not None else ViewQuery.all_items()

    if spec.fields is not None:
        view.set_view_fields(spec.fields)

    if spec.effective_page_size is not None:
        view.set_row_limit(spec.effective_page_size)

    if spec.key_range is not None:
        apply_key_range(view, spec.key_range, key_field=key_field)

    return view


def apply_key_range(view: ViewQuery, key_range: KeyRange, *, key_field: str) -> None:
    view.set_key_range(key_field, key_range.low, key_range.high)


def build_window_query(
    base: ViewQuery,
    *,
    low: int,
    high: int,
    page_size: int | None,
    key_field: str = DEFAULT_KEY_FIELD,
) -> ViewQuery:
    """Derive a bounded query for one key window from the base query.

    Any stale <Where> is replaced by the window predicate; projection and
    ordering carry over. The row limit follows page_size so the window can
    still page internally.
    """
    view = base.copy()
    view.set_key_range(key_field, low, high)
    if page_size is not None and page_size > 0:
        view.set_row_limit(page_size)
    else:
        view.clear_row_limit()
    return view


def build_max_key_query(key_field: str = DEFAULT_KEY_FIELD) -> ViewQuery:
    """Probe returning only the item with the highest key."""
    view = ViewQuery.all_items()
    view.set_order_by(key_field, ascending=False)
    view.set_view_fields([key_field])
    view.set_row_limit(1, paged=False)
    return view


def build_unique_id_query(unique_id: UUID, fields: Sequence[str] | None = None) -> ViewQuery:
    """Query selecting the single item whose GUID matches ``unique_id``."""
    view = ViewQuery.parse("<View><Query></Query></View>")
    view.set_filter(comparison("Eq", "GUID", unique_id, value_type="Guid"))
    if fields is not None:
        view.set_view_fields(fields)
    return view
