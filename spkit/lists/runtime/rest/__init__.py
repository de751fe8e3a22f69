"""REST runtime abstractions."""

from .runner import ResponseAdapter, RestEndpointSpec, RestRunner

__all__ = [
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
