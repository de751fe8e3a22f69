"""Structured logging for paging operations.

This module provides telemetry hooks for the pagination and fallback loops,
emitting structured log records with an ``extra`` payload.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    list_name: str,
    page_index: int,
    items: int,
    has_more: bool,
    window_index: int | None = None,
    latency_ms: float | None = None,
) -> None:
    """Log a page returned by the store."""
    logger.debug(
        "paging_page_fetched",
        extra={
            "list": list_name,
            "page_index": page_index,
            "items": items,
            "has_more": has_more,
            "window_index": window_index,
            "latency_ms": latency_ms,
        },
    )


def log_throttled(*, list_name: str, error_code: int | None, fallback: bool) -> None:
    """Log a throttling rejection and whether the fallback will handle it."""
    logger.warning(
        "paging_throttled",
        extra={
            "list": list_name,
            "error_code": error_code,
            "fallback": fallback,
        },
    )


def log_window_plan(*, list_name: str, max_key: int, window_span: int, total_windows: int) -> None:
    """Log the window layout chosen by the fallback."""
    logger.info(
        "paging_window_plan",
        extra={
            "list": list_name,
            "max_key": max_key,
            "window_span": window_span,
            "total_windows": total_windows,
        },
    )


def log_window_completed(
    *,
    list_name: str,
    window_index: int,
    low: int,
    high: int,
    pages: int,
    items: int,
) -> None:
    """Log completion of one key window."""
    logger.info(
        "paging_window_completed",
        extra={
            "list": list_name,
            "window_index": window_index,
            "low": low,
            "high": high,
            "pages": pages,
            "items": items,
        },
    )


def log_bounds_failed(*, list_name: str, result_count: int) -> None:
    """Log a max-key probe that did not return exactly one item."""
    logger.warning(
        "paging_bounds_failed",
        extra={"list": list_name, "result_count": result_count},
    )


def log_paging_stopped(*, list_name: str, pages: int, items: int) -> None:
    """Log a retrieval stopped early by the caller."""
    logger.info(
        "paging_stopped",
        extra={"list": list_name, "pages": pages, "items": items},
    )


def log_paging_error(
    *,
    list_name: str,
    error_type: str,
    error_message: str,
    window_index: int | None = None,
) -> None:
    """Log an error that aborts a retrieval."""
    logger.error(
        "paging_error",
        extra={
            "list": list_name,
            "window_index": window_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
