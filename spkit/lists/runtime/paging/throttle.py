"""Classification of store errors as query throttling."""

from __future__ import annotations

from dataclasses import dataclass

from ...core.exceptions import RemoteFetchError


@dataclass(frozen=True)
class ThrottleSignature:
    """Server error code and exception type that identify a throttled query."""

    error_code: int
    type_name: str


# SPQueryThrottledException: the list view threshold was exceeded.
SP_QUERY_THROTTLED = ThrottleSignature(
    error_code=-2147024860,
    type_name="Microsoft.SharePoint.SPQueryThrottledException",
)


def matches_signature(
    server_error_code: int | None,
    server_error_type_name: str | None,
    signature: ThrottleSignature = SP_QUERY_THROTTLED,
) -> bool:
    return (
        server_error_code == signature.error_code
        and server_error_type_name == signature.type_name
    )


def is_throttled(error: BaseException, signature: ThrottleSignature = SP_QUERY_THROTTLED) -> bool:
    """Return True only for the store's "query too expensive" rejection.

    Both the error code and the declared exception type must match; any
    other error, including generic server errors, is not throttling.
    """
    if not isinstance(error, RemoteFetchError):
        return False
    return matches_signature(error.server_error_code, error.server_error_type_name, signature)
