"""
Shared domain types for the crawl and triage workflow.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Bucket(str, Enum):
    """The three triage groups a record can belong to"""
    RESULTS = "results"
    COLLECTED = "collected"
    TRASH = "trash"


class ActiveView(IntEnum):
    """Index of the bucket shown by the triage view (0 means none)"""
    NONE = 0
    RESULTS = 1
    COLLECTED = 2
    TRASH = 3

    @classmethod
    def for_bucket(cls, bucket: Bucket) -> "ActiveView":
        return cls[Bucket(bucket).name]


class SearchItem(BaseModel):
    """One result item returned by the search provider.

    Only the projected fields are declared; anything else the provider sends
    along (e.g. ``pagemap``) is kept so that nothing is lost on persist.
    """

    model_config = ConfigDict(extra="allow")

    title: str = ""
    link: str = ""
    displayLink: str = ""
    snippet: str = ""
    formattedUrl: str = ""

    def to_record(self) -> Dict[str, Any]:
        """Plain mapping suitable for RecordStore.write"""
        return self.model_dump()
