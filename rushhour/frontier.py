import heapq
from typing import Any


class Frontier:
    """
    Min-priority queue of search nodes keyed by f = g + h.

    An insertion counter sits between the priority and the node, so equal-f
    entries come out in push order and nodes themselves are never compared.
    """

    def __init__(self):
        self._heap: list[tuple[int, int, Any]] = []
        self._count = 0

    def push(self, f: int, node: Any) -> None:
        heapq.heappush(self._heap, (f, self._count, node))
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the lowest-f node. Raises IndexError when empty."""
        return heapq.heappop(self._heap)[2]

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
