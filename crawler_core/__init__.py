"""
Core shared types for the crawler projects.

This module centralizes the domain types (buckets, active view, search
items), the error taxonomy and the storage layout used by the record store.
"""

from .types import (
    Bucket,
    ActiveView,
    SearchItem,
)

from .errors import (
    CrawlerError,
    StorageIOError,
    UnsupportedFormatError,
    PathTraversalError,
    InvalidRecordNameError,
)

from .layout import StorageLayout, SEPARATOR

__all__ = [
    # Types
    "Bucket",
    "ActiveView",
    "SearchItem",

    # Errors
    "CrawlerError",
    "StorageIOError",
    "UnsupportedFormatError",
    "PathTraversalError",
    "InvalidRecordNameError",

    # Layout
    "StorageLayout",
    "SEPARATOR",
]
