"""SharePoint connector."""

from .rest import SharePointRESTStore

__all__ = ["SharePointRESTStore"]
