"""Crawl search results into the record store application package."""

from .config import CrawlConfig, QuerySpec, load_config

__all__ = [
    "CrawlConfig",
    "QuerySpec",
    "load_config",
]
