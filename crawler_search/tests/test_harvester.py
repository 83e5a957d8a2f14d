"""
Tests for ResultsHarvester
"""

from unittest.mock import Mock

import pytest

from crawler_search.google_search import GoogleSearch
from crawler_search.harvester import ResultsHarvester
from crawler_store.record_store import RecordStore


@pytest.fixture
def items():
    return [
        {"title": "A", "link": "https://a.example", "displayLink": "a.example", "snippet": "a", "formattedUrl": "https://a.example"},
        {"title": "B", "link": "https://b.example", "displayLink": "b.example", "snippet": "b", "formattedUrl": "https://b.example"},
    ]


@pytest.fixture
def search(items):
    search = Mock(spec=GoogleSearch)
    search.query.return_value = items
    return search


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path / "storage")


@pytest.fixture
def harvester(search, store):
    return ResultsHarvester(search, store)


class TestResultsHarvester:
    """Query -> results records"""

    def test_harvest_writes_results_record(self, harvester, search, store, items, tmp_path):
        name = harvester.harvest("Air Quality, Delhi!", options={"num": 2})

        assert name == "results/air_quality_delhi"
        assert (tmp_path / "storage" / "results" / "air_quality_delhi.yml").exists()
        search.query.assert_called_once_with("Air Quality, Delhi!", {"num": 2})

        record = store.get(name)
        assert record["query"] == "Air Quality, Delhi!"
        assert record["options"] == {"num": 2}
        assert record["items"] == items
        assert "retrieved_at" in record

    def test_harvest_with_explicit_name(self, harvester):
        assert harvester.harvest("anything", name="My Query") == "results/my_query"

    def test_record_name_for_unsluggable_query(self, harvester):
        name = harvester.record_name("???")
        assert name.startswith("results/query_")
        assert name == harvester.record_name("???")

    def test_saved_queries_and_load(self, harvester, items):
        harvester.harvest("first query")
        harvester.harvest("second query")

        assert harvester.saved_queries() == {
            "first_query": "results/first_query",
            "second_query": "results/second_query",
        }
        assert harvester.load("first_query")["items"] == items
        assert harvester.load("results/second_query")["query"] == "second query"
        assert harvester.load_items("first_query") == items

    def test_load_unknown_query(self, harvester):
        assert harvester.load("unknown") is None
        assert harvester.load_items("unknown") == []

    def test_saved_queries_empty_store(self, harvester):
        assert harvester.saved_queries() == {}

    def test_custom_results_path(self, search, store):
        harvester = ResultsHarvester(search, store, results_path="/crawls/2024/")

        assert harvester.harvest("coal") == "crawls/2024/coal"
        assert harvester.saved_queries() == {"coal": "crawls/2024/coal"}
