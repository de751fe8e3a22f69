"""Utility helpers."""

from .http import HTTPClient, default_error_factory

__all__ = ["HTTPClient", "default_error_factory"]
