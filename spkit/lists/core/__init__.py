"""Core components."""

from .base import ListStore
from .enums import PageSignal, SelectionMode
from .exceptions import (
    BoundsComputationError,
    ListDataError,
    MalformedQueryError,
    RemoteFetchError,
    ThrottlingError,
    ValidationError,
)

__all__ = [
    "ListStore",
    "PageSignal",
    "SelectionMode",
    "ListDataError",
    "MalformedQueryError",
    "ValidationError",
    "BoundsComputationError",
    "RemoteFetchError",
    "ThrottlingError",
]
