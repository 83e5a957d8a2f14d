"""
Triage board: the three observable buckets an operator moves result items between
"""

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from crawler_core.types import ActiveView, Bucket
from crawler_store.record_store import RecordStore
from .controller import TriageController

logger = logging.getLogger(__name__)


class ObservableBucket:
    """List-backed bucket that reports its size to subscribers after every mutation"""

    def __init__(self, name: Bucket, items: Optional[Iterable[Any]] = None):
        self.name = Bucket(name)
        self._items: List[Any] = list(items or [])
        self._listeners: List[Callable[[Bucket, int, int], None]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __contains__(self, item: Any) -> bool:
        return item in self._items

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"ObservableBucket({self.name.value!r}, size={len(self)})"

    def subscribe(self, callback: Callable[[Bucket, int, int], None]) -> None:
        self._listeners.append(callback)

    def _changed(self, old_size: int) -> None:
        new_size = len(self._items)
        for callback in list(self._listeners):
            callback(self.name, new_size, old_size)

    def append(self, item: Any) -> None:
        old_size = len(self._items)
        self._items.append(item)
        self._changed(old_size)

    def extend(self, items: Iterable[Any]) -> None:
        old_size = len(self._items)
        self._items.extend(items)
        self._changed(old_size)

    def remove(self, item: Any) -> None:
        old_size = len(self._items)
        self._items.remove(item)
        self._changed(old_size)

    def pop(self, index: int = -1) -> Any:
        old_size = len(self._items)
        item = self._items.pop(index)
        self._changed(old_size)
        return item

    def clear(self) -> None:
        old_size = len(self._items)
        self._items.clear()
        self._changed(old_size)

    def replace(self, items: Iterable[Any]) -> None:
        old_size = len(self._items)
        self._items = list(items)
        self._changed(old_size)

    def to_list(self) -> List[Any]:
        return list(self._items)


class TriageBoard:
    """
    Holds the results, collected and trash buckets and keeps the active view
    consistent while items are moved between them.
    """

    def __init__(self, switch_view: Optional[Callable[[int], None]] = None,
                 active: ActiveView = ActiveView.NONE):
        self.buckets: Dict[Bucket, ObservableBucket] = {bucket: ObservableBucket(bucket) for bucket in Bucket}
        self.controller = TriageController(switch_view=switch_view, active=active)
        for bucket in self.buckets.values():
            self.controller.watch(bucket)

    @property
    def active(self) -> ActiveView:
        return self.controller.active

    @property
    def results(self) -> ObservableBucket:
        return self.buckets[Bucket.RESULTS]

    @property
    def collected(self) -> ObservableBucket:
        return self.buckets[Bucket.COLLECTED]

    @property
    def trash(self) -> ObservableBucket:
        return self.buckets[Bucket.TRASH]

    def sizes(self) -> Dict[Bucket, int]:
        return {bucket: len(items) for bucket, items in self.buckets.items()}

    def show(self, bucket: Optional[Bucket]) -> None:
        """Operator selects a bucket (None for no bucket)"""
        view = ActiveView.NONE if bucket is None else ActiveView.for_bucket(bucket)
        self.controller.select(view)

    def load_results(self, items: Iterable[Any]) -> None:
        """Replace the pending results with freshly retrieved items and show them"""
        self.results.replace(items)
        if len(self.results):
            self.show(Bucket.RESULTS)

    def move(self, item: Any, source: Bucket, target: Bucket) -> None:
        """
        Move an item from one bucket to another

        The item is added to the target before it leaves the source, so a
        source that drains sees the target's new size.
        """
        source, target = Bucket(source), Bucket(target)
        if item not in self.buckets[source]:
            raise ValueError(f"Item not in {source.value}: {item!r}")
        if source is target:
            return
        self.buckets[target].append(item)
        self.buckets[source].remove(item)

    def collect(self, item: Any, source: Bucket = Bucket.RESULTS) -> None:
        self.move(item, source, Bucket.COLLECTED)

    def discard(self, item: Any, source: Bucket = Bucket.RESULTS) -> None:
        self.move(item, source, Bucket.TRASH)

    def restore(self, item: Any, source: Bucket = Bucket.TRASH) -> None:
        self.move(item, source, Bucket.RESULTS)

    def to_record(self) -> Dict[str, List[Any]]:
        return {bucket.value: items.to_list() for bucket, items in self.buckets.items()}

    def save(self, store: RecordStore, name: str):
        """Persist all three buckets as one record"""
        logger.info(f"Saving triage state to {name} ({', '.join(f'{b.value}={n}' for b, n in self.sizes().items())})")
        return store.write(name, self.to_record())

    @classmethod
    def load(cls, store: RecordStore, name: str,
             switch_view: Optional[Callable[[int], None]] = None) -> "TriageBoard":
        """
        Restore a board saved with ``save``

        A missing record gives an empty board. The first non-empty bucket in
        results, collected, trash order becomes the active view.
        """
        board = cls(switch_view=switch_view)
        record = store.get(name)
        if not isinstance(record, dict):
            if record is not None:
                logger.warning(f"Ignoring triage record {name}: not a mapping")
            return board

        for bucket in Bucket:
            board.buckets[bucket].replace(record.get(bucket.value) or [])

        for bucket in Bucket:
            if len(board.buckets[bucket]):
                board.show(bucket)
                break
        return board
