"""Structural editing of CAML view definitions.

A view definition is held as an ``xml.etree.ElementTree`` element tree
(tag, attributes, ordered children). Directives are spliced in with
find-or-create-child semantics so that an existing ``<ViewFields>``,
``<RowLimit>`` or ``<Where>`` is replaced rather than duplicated, and every
unrelated part of the caller's view is carried through untouched.

Example:
    >>> view = ViewQuery.all_items()
    >>> view.set_view_fields(["Title", "GUID"])
    >>> view.set_row_limit(1000)
    >>> view.to_xml()
    '<View Scope="RecursiveAll"><Query /><ViewFields>...</ViewFields><RowLimit Paged="TRUE">1000</RowLimit></View>'
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from collections.abc import Iterable

from ..core.exceptions import MalformedQueryError

VIEW = "View"
QUERY = "Query"
WHERE = "Where"
ORDER_BY = "OrderBy"
VIEW_FIELDS = "ViewFields"
ROW_LIMIT = "RowLimit"
FIELD_REF = "FieldRef"


class ViewQuery:
    """Mutable CAML ``<View>`` tree."""

    def __init__(self, root: ET.Element) -> None:
        if root.tag != VIEW:
            raise MalformedQueryError(f"Expected <{VIEW}> root element, got <{root.tag}>")
        self._root = root

    @classmethod
    def all_items(cls) -> ViewQuery:
        """View that returns every item, including those in folders."""
        root = ET.Element(VIEW, {"Scope": "RecursiveAll"})
        ET.SubElement(root, QUERY)
        return cls(root)

    @classmethod
    def parse(cls, text: str) -> ViewQuery:
        """Parse caller-supplied view XML.

        Raises:
            MalformedQueryError: If the text is not well-formed or not a <View>
        """
        if not text or not text.strip():
            raise MalformedQueryError("Query text is empty", query_text=text)
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            raise MalformedQueryError(f"Query is not well-formed XML: {e}", query_text=text) from e
        if root.tag != VIEW:
            raise MalformedQueryError(
                f"Expected <{VIEW}> root element, got <{root.tag}>", query_text=text
            )
        return cls(root)

    @property
    def root(self) -> ET.Element:
        return self._root

    def copy(self) -> ViewQuery:
        return ViewQuery(copy.deepcopy(self._root))

    def to_xml(self) -> str:
        return ET.tostring(self._root, encoding="unicode")

    def __str__(self) -> str:
        return self.to_xml()

    # Tree helpers

    def _find(self, tag: str) -> ET.Element | None:
        # Descendant search, first match wins.
        return self._root.find(f".//{tag}")

    def _find_or_create(self, parent: ET.Element, tag: str) -> ET.Element:
        child = parent.find(tag)
        if child is None:
            child = ET.SubElement(parent, tag)
        return child

    def _query_element(self) -> ET.Element:
        query = self._find(QUERY)
        if query is None:
            query = ET.Element(QUERY)
            self._root.insert(0, query)
        return query

    # Directives

    @property
    def has_filter(self) -> bool:
        """Whether the view carries a caller filter (a <Where> clause)."""
        return self._find(WHERE) is not None

    @property
    def has_order_by(self) -> bool:
        return self._find(ORDER_BY) is not None

    @property
    def order_by_field(self) -> str | None:
        """Name of the first <OrderBy> field, if any."""
        ref = self._find(f"{ORDER_BY}/{FIELD_REF}")
        return ref.get("Name") if ref is not None else None

    @property
    def row_limit(self) -> int | None:
        element = self._find(ROW_LIMIT)
        if element is None or element.text is None or not element.text.strip():
            return None
        try:
            return int(element.text.strip())
        except ValueError:
            return None

    @property
    def row_limit_paged(self) -> bool:
        element = self._find(ROW_LIMIT)
        return element is not None and element.get("Paged", "").upper() == "TRUE"

    @property
    def view_fields(self) -> list[str]:
        element = self._find(VIEW_FIELDS)
        if element is None:
            return []
        return [ref.get("Name", "") for ref in element.findall(FIELD_REF)]

    def set_view_fields(self, fields: Iterable[str]) -> None:
        """Replace the projected field list."""
        element = self._find(VIEW_FIELDS)
        if element is None:
            element = ET.SubElement(self._root, VIEW_FIELDS)
        else:
            element.clear()
        for name in fields:
            ET.SubElement(element, FIELD_REF, {"Name": name})

    def set_row_limit(self, limit: int, *, paged: bool = True) -> None:
        """Replace the row limit directive."""
        element = self._find(ROW_LIMIT)
        if element is None:
            element = ET.SubElement(self._root, ROW_LIMIT)
        else:
            element.clear()
        if paged:
            element.set("Paged", "TRUE")
        element.text = str(limit)

    def clear_row_limit(self) -> None:
        self._remove_all(ROW_LIMIT)

    def set_order_by(self, field: str, *, ascending: bool = True) -> None:
        query = self._query_element()
        order_by = self._find_or_create(query, ORDER_BY)
        order_by.clear()
        ET.SubElement(
            order_by, FIELD_REF, {"Name": field, "Ascending": "TRUE" if ascending else "FALSE"}
        )

    def clear_filter(self) -> None:
        self._remove_all(WHERE)

    def set_filter(self, condition: ET.Element) -> None:
        """Replace any <Where> clause with one wrapping ``condition``."""
        self.clear_filter()
        query = self._query_element()
        where = ET.Element(WHERE)
        where.append(condition)
        # CAML expects Where ahead of OrderBy.
        query.insert(0, where)

    def set_key_range(self, field: str, low: int, high: int) -> None:
        """Restrict the view to ``low < field <= high``."""
        condition = ET.Element("And")
        condition.append(comparison("Gt", field, low, value_type="Counter"))
        condition.append(comparison("Leq", field, high, value_type="Counter"))
        self.set_filter(condition)

    def _remove_all(self, tag: str) -> None:
        for parent in list(self._root.iter()):
            for child in list(parent):
                if child.tag == tag:
                    parent.remove(child)


def comparison(operator: str, field: str, value: object, *, value_type: str) -> ET.Element:
    """Build ``<Op><FieldRef Name=field/><Value Type=...>value</Value></Op>``."""
    element = ET.Element(operator)
    ET.SubElement(element, FIELD_REF, {"Name": field})
    value_element = ET.SubElement(element, "Value", {"Type": value_type})
    value_element.text = str(value)
    return element
