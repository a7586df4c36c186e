"""A max-heap of country records ordered by one chosen count."""

from __future__ import annotations

from typing import Iterable, Union

from .records import CountryRecord, SortKey

_ATTRIBUTES = {
    SortKey.CASES: "cases",
    SortKey.DEATHS: "deaths",
    SortKey.RECOVERED: "recovered",
}


def compare(a: CountryRecord, b: CountryRecord, key: Union[SortKey, int]) -> int:
    """Return -1, 0 or 1 comparing two records by key; unknown keys compare equal."""
    try:
        sort_key = SortKey(key)
    except ValueError:
        return 0
    attribute = _ATTRIBUTES[sort_key]
    x, y = getattr(a, attribute), getattr(b, attribute)
    return (x > y) - (x < y)


class RecordHeap:
    """Binary max-heap: the record with the largest chosen count is on top."""

    def __init__(self, key: Union[SortKey, int],
                 records: Iterable[CountryRecord] = ()) -> None:
        self.key = key
        self._items: list[CountryRecord] = []
        for record in records:
            self.push(record)

    def push(self, record: CountryRecord) -> None:
        """Add a record and restore heap order by sifting it up."""
        items = self._items
        items.append(record)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if compare(items[index], items[parent], self.key) <= 0:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def pop(self) -> CountryRecord:
        """Remove and return the top record; raise IndexError when empty."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return root

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and compare(items[left], items[largest], self.key) > 0:
                largest = left
            if right < size and compare(items[right], items[largest], self.key) > 0:
                largest = right
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


def top(records: Iterable[CountryRecord], key: Union[SortKey, int],
        count: int) -> list[CountryRecord]:
    """Return up to count records, largest first by the chosen key."""
    heap = RecordHeap(key, records)
    result: list[CountryRecord] = []
    while heap and len(result) < count:
        result.append(heap.pop())
    return result