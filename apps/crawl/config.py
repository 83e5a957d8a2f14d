"""
Configuration helpers for the crawl application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


@dataclass
class QuerySpec:
    """One query to run against the search engine."""
    text: str
    name: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class CrawlConfig:
    """Typed configuration for a crawl."""

    storage_root: Path = Path("storage")

    # Search engine; the API key always comes from the environment
    cse_id: Optional[str] = None
    search_options: Dict[str, Any] = field(default_factory=dict)

    queries: List[QuerySpec] = field(default_factory=list)


def load_config(path: Path) -> CrawlConfig:
    """Load configuration from a YAML file."""
    payload = yaml.safe_load(path.read_text(encoding="utf-8")) if path.exists() else {}
    data: Dict[str, Any] = payload or {}

    cfg = CrawlConfig()
    if data.get("storage_root"):
        cfg.storage_root = Path(str(data["storage_root"]))

    search = data.get("search") or {}
    if search.get("cse_id"):
        cfg.cse_id = str(search["cse_id"])
    cfg.search_options = dict(search.get("options") or {})

    queries: List[QuerySpec] = []
    for item in data.get("queries") or []:
        if isinstance(item, str):
            item = {"text": item}
        text = str(item.get("text") or "").strip()
        if not text:
            continue
        name = str(item["name"]).strip() if item.get("name") else None
        queries.append(QuerySpec(text=text, name=name, options=dict(item.get("options") or {})))
    cfg.queries = queries

    return cfg
