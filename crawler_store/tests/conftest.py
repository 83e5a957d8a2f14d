import pytest

from crawler_store.record_store import RecordStore


@pytest.fixture
def storage_root(tmp_path):
    """Temporary storage root (not created yet)"""
    return tmp_path / "storage"


@pytest.fixture
def store(storage_root):
    """RecordStore on a temporary root"""
    return RecordStore(storage_root)


@pytest.fixture
def sample_record():
    """A result item as returned by the search provider"""
    return {
        "title": "Air quality in Delhi",
        "link": "https://example.com/delhi-air",
        "displayLink": "example.com",
        "snippet": "PM2.5 levels rose sharply in November...",
        "formattedUrl": "https://example.com/delhi-air",
        "tags": {"pollution": True},
        "rank": 3,
        "keywords": ["pm2.5", "delhi"],
    }
