"""Top-level application entry points.

Each subpackage provides a user-facing app with its own CLI helpers.
"""

__all__ = [
    "crawl",
]
