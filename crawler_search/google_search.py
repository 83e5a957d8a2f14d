"""
GoogleSearch - thin client for the Google Custom Search JSON API

1. Enable the Custom Search API in the Google developers console.
2. Set up a custom search engine and note its id (``cx``).
3. Put ``GOOGLE_API_KEY`` and ``GOOGLE_CSE_ID`` in the environment or a
   ``.env`` file.

How to issue a query and read its results:
https://developers.google.com/custom-search/v1/using_rest
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from decouple import config
from pydantic import BaseModel, Field

from crawler_core.types import SearchItem

logger = logging.getLogger(__name__)

API_URL = "https://www.googleapis.com/customsearch/v1"
DEFAULT_FIELDS = "queries,searchInformation,items(title,link,displayLink,snippet,formattedUrl)"


class GoogleSearchConfig(BaseModel):
    """Configuration for the Google search client."""

    cse_id: Optional[str] = None
    api_key: Optional[str] = None
    api_url: str = API_URL
    timeout: float = 30.0
    options: Dict[str, Any] = Field(default_factory=dict)  # Default search options


class GoogleSearch:
    """Issue queries against a custom search engine and trim the responses to result items"""

    def __init__(self, search_config: Optional[GoogleSearchConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Args:
            search_config: Search engine id, API key and default options. The
                id and key fall back to GOOGLE_CSE_ID and GOOGLE_API_KEY.
            session: HTTP session to use (a new one by default)
        """
        self.config = search_config or GoogleSearchConfig()

        cse_id = self.config.cse_id or config('GOOGLE_CSE_ID', default=None)
        api_key = self.config.api_key or config('GOOGLE_API_KEY', default=None)
        if not api_key:
            raise ValueError("GOOGLE_API_KEY environment variable is required.")
        if not cse_id:
            raise ValueError("A custom search engine id is required. Set cse_id or the GOOGLE_CSE_ID environment variable.")

        self.api_key = api_key
        self.options: Dict[str, Any] = {
            'cx': cse_id,
            'fields': DEFAULT_FIELDS,
            **self.config.options,
        }
        self.session = session or requests.Session()

    def merge_options(self, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Default options overridden by the caller's"""
        return {**self.options, **(options or {})}

    def query_raw(self, query: str, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Do a custom query and return the full response payload

        Includes the ``queries`` (pagination) and ``searchInformation``
        metadata. Provider errors are raised as they come from requests.
        """
        params = {'q': query, 'key': self.api_key, **self.merge_options(options)}

        logger.info(f"Querying custom search engine {params['cx']}: {query}")
        response = self.session.get(self.config.api_url, params=params, timeout=self.config.timeout)
        response.raise_for_status()
        return response.json()

    def query(self, query: str, options: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Do a custom query.

        Args:
            query: Free text query
            options: Search options overriding the defaults (e.g. ``start``,
                ``num``, ``fields``)

        Returns:
            Result items as plain mappings with at least ``title``, ``link``,
            ``displayLink``, ``snippet`` and ``formattedUrl``
        """
        payload = self.query_raw(query, options)
        items = [SearchItem.model_validate(item).to_record() for item in payload.get('items') or []]
        logger.info(f"Got {len(items)} result items for query: {query}")
        return items
