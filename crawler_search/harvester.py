"""
ResultsHarvester - run search queries and persist their items as records
"""

import hashlib
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from crawler_core.layout import SEPARATOR
from crawler_core.types import Bucket
from crawler_core.utils import slugify
from crawler_store.record_store import RecordStore
from .google_search import GoogleSearch

logger = logging.getLogger(__name__)


class ResultsHarvester:
    """Stores the items of each query as one record under the results path"""

    def __init__(self, search: GoogleSearch, store: RecordStore, results_path: str = Bucket.RESULTS.value):
        self.search = search
        self.store = store
        self.results_path = results_path.strip(SEPARATOR)

    def record_name(self, query: str, name: Optional[str] = None) -> str:
        """Logical record name for a query: ``results/<slug>``"""
        slug = slugify(name or query)
        if not slug:
            slug = "query_" + hashlib.md5(query.encode()).hexdigest()[:8]
        return f"{self.results_path}{SEPARATOR}{slug}"

    def harvest(self, query: str, name: Optional[str] = None,
                options: Optional[Dict[str, Any]] = None) -> str:
        """
        Run a query and write its result items to the store

        Args:
            query: Free text query
            name: Record name to use instead of one derived from the query
            options: Search options overriding the search defaults

        Returns:
            Logical name of the written record
        """
        items = self.search.query(query, options)
        record_name = self.record_name(query, name)

        record = {
            'query': query,
            'options': dict(options or {}),
            'retrieved_at': datetime.now().isoformat(),
            'items': items,
        }
        self.store.write(record_name, record)

        logger.info(f"Stored {len(items)} items for query '{query}' as {record_name}")
        return record_name

    def saved_queries(self) -> Dict[str, str]:
        """All stored query records, base name -> logical name"""
        return self.store.get_all(self.results_path)

    def load(self, name: str) -> Optional[Dict[str, Any]]:
        """Load a stored query record by base name or logical name"""
        if SEPARATOR not in name:
            name = f"{self.results_path}{SEPARATOR}{name}"
        return self.store.get(name)

    def load_items(self, name: str) -> List[Dict[str, Any]]:
        """Result items of a stored query record ([] if unknown)"""
        record = self.load(name)
        if not isinstance(record, dict):
            return []
        return list(record.get('items') or [])
