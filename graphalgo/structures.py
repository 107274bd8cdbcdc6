"""Bounded containers used by the graph algorithms."""

from __future__ import annotations

from collections import deque

from .errors import GraphError


class Queue:
    """A first-in first-out queue of fixed capacity."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Append ``value`` at the rear; raise when the queue is full."""
        if self.is_full():
            raise GraphError("Queue overflow")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the front element."""
        if self.is_empty():
            raise GraphError("Queue underflow")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front element without removing it."""
        if self.is_empty():
            raise GraphError("Queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """A last-in first-out stack of fixed capacity."""

    def __init__(self, capacity: int = 100) -> None:
        self._capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top; raise when the stack is full."""
        if self.is_full():
            raise GraphError("Stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top element."""
        if self.is_empty():
            raise GraphError("Stack underflow")
        return self._items.pop()

    def top(self) -> int:
        """Return the top element without removing it."""
        if self.is_empty():
            raise GraphError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


class PriorityQueue:
    """A bounded binary min-heap of values keyed by integer priority."""

    def __init__(self, capacity: int = 100) -> None:
        self._capacity = capacity
        # Each entry is [value, priority].
        self._heap: list[list[int]] = []

    def insert(self, value: int, priority: int) -> None:
        """Add ``value`` with ``priority``; raise when the heap is full."""
        if len(self._heap) == self._capacity:
            raise GraphError("overflow")
        self._heap.append([value, priority])
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> int:
        """Remove and return the value with the smallest priority."""
        if self.is_empty():
            raise GraphError("Queue is empty")
        result = self._heap[0][0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return result

    def decrease_key(self, value: int, new_priority: int) -> None:
        """Lower the priority of the first entry holding ``value``."""
        for index, entry in enumerate(self._heap):
            if entry[0] == value:
                if new_priority >= entry[1]:
                    raise GraphError(
                        "New priority is greater than current priority"
                    )
                entry[1] = new_priority
                self._sift_up(index)
                return
        raise GraphError("Value not found")

    def peek_min(self) -> int:
        """Return the value with the smallest priority without removing it."""
        if self.is_empty():
            raise GraphError("Queue is empty")
        return self._heap[0][0]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index][1] < heap[parent][1]:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        count = len(heap)
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < count and heap[child][1] < heap[smallest][1]:
                    smallest = child
            if smallest == index:
                break
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest


class UnionFind:
    """Disjoint sets over ``0 .. size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise GraphError("Size must be positive")
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise GraphError("Invalid element index")
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def __len__(self) -> int:
        return len(self._parent)