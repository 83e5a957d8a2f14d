"""
Crawler Triage - results / collected / trash buckets and the active view policy
"""

from .policy import SWITCH_PREFERENCES, switch_away, transition
from .controller import TriageController
from .board import ObservableBucket, TriageBoard

__all__ = [
    # Policy
    "SWITCH_PREFERENCES",
    "switch_away",
    "transition",

    # State
    "TriageController",
    "ObservableBucket",
    "TriageBoard",
]
