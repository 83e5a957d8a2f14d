"""
Crawler Search - search provider client and result harvesting
"""

from .google_search import GoogleSearch, GoogleSearchConfig, API_URL, DEFAULT_FIELDS
from .harvester import ResultsHarvester

__all__ = [
    "GoogleSearch",
    "GoogleSearchConfig",
    "API_URL",
    "DEFAULT_FIELDS",
    "ResultsHarvester",
]
