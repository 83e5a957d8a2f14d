"""
Tests for the view switching policy
"""

import pytest

from crawler_core.types import ActiveView, Bucket
from crawler_triage.policy import SWITCH_PREFERENCES, switch_away, transition

R, C, T = Bucket.RESULTS, Bucket.COLLECTED, Bucket.TRASH


def sizes(results=0, collected=0, trash=0):
    return {R: results, C: collected, T: trash}


class TestSwitchAway:
    """Which bucket to show after one drains"""

    @pytest.mark.parametrize("emptied, bucket_sizes, expected", [
        # results drained: collected first, then trash
        (R, sizes(collected=3), ActiveView.COLLECTED),
        (R, sizes(collected=3, trash=2), ActiveView.COLLECTED),
        (R, sizes(trash=2), ActiveView.TRASH),
        (R, sizes(), ActiveView.NONE),
        # collected drained: results first, then trash
        (C, sizes(results=1), ActiveView.RESULTS),
        (C, sizes(results=1, trash=4), ActiveView.RESULTS),
        (C, sizes(trash=4), ActiveView.TRASH),
        (C, sizes(), ActiveView.NONE),
        # trash drained: collected first, then results
        (T, sizes(collected=1), ActiveView.COLLECTED),
        (T, sizes(results=2, collected=1), ActiveView.COLLECTED),
        (T, sizes(results=2), ActiveView.RESULTS),
        (T, sizes(), ActiveView.NONE),
    ])
    def test_switch_away(self, emptied, bucket_sizes, expected):
        assert switch_away(emptied, bucket_sizes) is expected

    def test_results_to_collected_is_index_2(self):
        assert int(switch_away(R, sizes(collected=3))) == 2

    def test_all_empty_is_index_0(self):
        assert int(switch_away(R, sizes())) == 0

    def test_never_switches_to_the_emptied_bucket(self):
        for emptied, (first, second) in SWITCH_PREFERENCES.items():
            assert emptied not in (first, second)
            # Even a stale non-zero size for the emptied bucket is never chosen
            assert switch_away(emptied, {emptied: 5, first: 0, second: 0}) is ActiveView.NONE

    def test_accepts_plain_bucket_names(self):
        assert switch_away("results", {C: 1}) is ActiveView.COLLECTED

    def test_missing_sizes_count_as_empty(self):
        assert switch_away(R, {T: 1}) is ActiveView.TRASH


class TestTransition:
    """Only a real change to empty triggers a switch"""

    def test_changed_to_empty_switches(self):
        assert transition(ActiveView.RESULTS, R, 0, True, sizes(collected=3)) is ActiveView.COLLECTED

    def test_unchanged_empty_keeps_view(self):
        assert transition(ActiveView.RESULTS, R, 0, False, sizes(collected=3)) is ActiveView.RESULTS

    def test_non_empty_change_keeps_view(self):
        assert transition(ActiveView.RESULTS, R, 2, True, sizes(results=2, collected=3)) is ActiveView.RESULTS

    def test_all_empty_switches_to_none(self):
        assert transition(ActiveView.RESULTS, R, 0, True, sizes()) is ActiveView.NONE

    def test_bucket_not_shown_can_still_trigger(self):
        # The operator may empty a bucket while another one is displayed
        assert transition(ActiveView.NONE, T, 0, True, sizes(results=1)) is ActiveView.RESULTS
