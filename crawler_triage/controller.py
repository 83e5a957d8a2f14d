"""
TriageController - keeps the active triage view on a bucket worth looking at
"""

import logging
import threading
from typing import Callable, Dict, Mapping, Optional, Protocol

from crawler_core.types import ActiveView, Bucket
from .policy import changed_to_empty, transition

logger = logging.getLogger(__name__)

SizeListener = Callable[[Bucket, int, int], None]


class ObservableCollection(Protocol):
    """What the controller needs from a bucket: its name, size and change notifications"""

    name: Bucket

    def __len__(self) -> int: ...

    def subscribe(self, callback: SizeListener) -> None: ...


class TriageController:
    """
    Watches the size of the three buckets and switches the active view away
    from a bucket as soon as it drains.

    Each notification is handled to completion, including the call to
    ``switch_view``, before the next one is accepted.
    """

    def __init__(self, switch_view: Optional[Callable[[int], None]] = None,
                 sizes: Optional[Mapping[Bucket, int]] = None,
                 active: ActiveView = ActiveView.NONE):
        """
        Args:
            switch_view: Called with the new view index (0..3) whenever a
                switch decision is made
            sizes: Initial bucket sizes (all 0 by default)
            active: Initial active view
        """
        self.switch_view = switch_view
        self.active = ActiveView(active)
        self._sizes: Dict[Bucket, int] = {bucket: 0 for bucket in Bucket}
        for bucket, size in (sizes or {}).items():
            self._sizes[Bucket(bucket)] = size
        self._sources: Dict[Bucket, ObservableCollection] = {}
        self._lock = threading.RLock()

    def sizes(self) -> Dict[Bucket, int]:
        """Current bucket sizes; watched buckets are read live"""
        with self._lock:
            current = dict(self._sizes)
            for bucket, source in self._sources.items():
                current[bucket] = len(source)
            return current

    def watch(self, collection: ObservableCollection) -> None:
        """Subscribe to a bucket's change notifications"""
        bucket = Bucket(collection.name)
        with self._lock:
            self._sources[bucket] = collection
            self._sizes[bucket] = len(collection)
        collection.subscribe(lambda name, new_size, old_size: self.notify(name, new_size))

    def notify(self, bucket: Bucket, new_size: int) -> ActiveView:
        """
        Handle a size notification for a bucket

        Args:
            bucket: The bucket whose size was reported
            new_size: Its size after the change

        Returns:
            The active view after handling the notification
        """
        bucket = Bucket(bucket)
        with self._lock:
            changed = self._sizes[bucket] != new_size
            self._sizes[bucket] = new_size

            sizes = self.sizes()
            sizes[bucket] = new_size
            view = transition(self.active, bucket, new_size, changed, sizes)

            if changed_to_empty(new_size, changed):
                logger.debug(f"Bucket {bucket.value} drained, switching view {self.active.name} -> {view.name}")
                self.active = view
                if self.switch_view is not None:
                    self.switch_view(int(view))

            return self.active

    def select(self, view: ActiveView) -> None:
        """Record a view change made by the operator"""
        with self._lock:
            self.active = ActiveView(view)
