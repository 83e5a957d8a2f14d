"""
Utility functions for crawler_core
"""

import json
import re
from datetime import datetime, date


class DateTimeEncoder(json.JSONEncoder):
    """Custom JSON encoder that handles datetime and date objects"""

    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, date):
            return obj.isoformat()
        return super().default(obj)


def slugify(text: str, max_length: int = 50) -> str:
    """
    Turn free text (e.g. a search query) into a record name segment

    Args:
        text: Text to convert
        max_length: Maximum length of the returned slug

    Returns:
        Lowercase slug made of ``[a-z0-9_-]``, or ``""`` if nothing is left
    """
    slug = text.lower()
    slug = re.sub(r'[^\w\s-]', '', slug, flags=re.ASCII)
    slug = re.sub(r'[-\s]+', '_', slug)
    slug = slug.strip('_')

    if len(slug) > max_length:
        slug = slug[:max_length].rstrip('_')

    return slug
