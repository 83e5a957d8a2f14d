"""
View switching policy for the triage buckets

When the bucket being worked on drains, show the next most actionable one
instead of an empty screen. Pure functions only; the controller feeds them.
"""

from typing import Dict, Mapping, Tuple

from crawler_core.types import ActiveView, Bucket

# Bucket that emptied -> (first choice, second choice)
SWITCH_PREFERENCES: Dict[Bucket, Tuple[Bucket, Bucket]] = {
    Bucket.RESULTS: (Bucket.COLLECTED, Bucket.TRASH),
    Bucket.COLLECTED: (Bucket.RESULTS, Bucket.TRASH),
    Bucket.TRASH: (Bucket.COLLECTED, Bucket.RESULTS),
}


def switch_away(emptied: Bucket, sizes: Mapping[Bucket, int]) -> ActiveView:
    """
    Pick the view to show after a bucket emptied

    Args:
        emptied: The bucket that just became empty
        sizes: Current size of every bucket

    Returns:
        View of the preferred non-empty alternative, or ActiveView.NONE if
        the selected alternative is empty as well
    """
    preferred, fallback = SWITCH_PREFERENCES[Bucket(emptied)]
    target = preferred if sizes.get(preferred, 0) else fallback

    if not sizes.get(target, 0):
        return ActiveView.NONE
    return ActiveView.for_bucket(target)


def changed_to_empty(new_size: int, changed: bool) -> bool:
    return new_size == 0 and changed


def transition(current: ActiveView, bucket: Bucket, new_size: int, changed: bool,
               sizes: Mapping[Bucket, int]) -> ActiveView:
    """
    Next active view after a bucket size notification

    Only a bucket that actually changed and is now empty triggers a switch;
    every other notification keeps the current view.
    """
    if not changed_to_empty(new_size, changed):
        return current
    return switch_away(bucket, sizes)
