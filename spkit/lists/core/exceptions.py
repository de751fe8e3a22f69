"""Custom exception hierarchy."""

from __future__ import annotations


class ListDataError(Exception):
    """Base exception for all library errors."""

    pass


class MalformedQueryError(ListDataError):
    """Caller-supplied view XML could not be parsed for directive splicing.

    Raised immediately when the query text is not well-formed XML or its root
    is not a ``<View>`` element. Never retried.
    """

    def __init__(self, message: str, query_text: str | None = None) -> None:
        super().__init__(message)
        self.query_text = query_text


class ValidationError(ListDataError):
    """Request or query specification failed validation."""

    pass


class BoundsComputationError(ListDataError):
    """The max-key probe did not return exactly one item.

    Used internally by the range repartitioner for logging; the caller always
    receives the original ThrottlingError instead.
    """

    def __init__(self, message: str, result_count: int) -> None:
        super().__init__(message)
        self.result_count = result_count


class RemoteFetchError(ListDataError):
    """Error reported by the remote list store."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        server_error_code: int | None = None,
        server_error_type_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.server_error_code = server_error_code
        self.server_error_type_name = server_error_type_name


class ThrottlingError(RemoteFetchError):
    """The store refused to run the query because it was judged too expensive."""

    pass
