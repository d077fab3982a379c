from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from metric_bktree.core.errors import InvalidItemError, TraversalStateError
from metric_bktree.distance.base import DistanceFn

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(eq=False)
class _BKNode(Generic[T]):
    item: T
    children: dict[int, "_BKNode[T]"] = field(default_factory=dict)

    def ordered_children(self) -> list["_BKNode[T]"]:
        return [self.children[k] for k in sorted(self.children)]


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """A stored item found by a radius search, with its distance to the query."""

    distance: int
    item: T


class BKTree(Generic[T]):
    """Burkhard-Keller tree over items of a discrete metric space.

    Every child is keyed by its distance to the parent item. Items at distance 0
    from an item already stored are treated as duplicates and not inserted.

    The tree is not safe for concurrent use; callers must serialize access.
    """

    def __init__(self, dist: DistanceFn):
        if not callable(dist):
            raise TypeError(f"dist must be callable, got {dist!r}")
        self.dist = dist
        self.root: Optional[_BKNode[T]] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BKTree(dist={self.dist!r}, size={self._size})"

    def __iter__(self) -> "BKTreeIterator[T]":
        return self.iterator()

    def __contains__(self, candidate: object) -> bool:
        return self.contains(candidate)

    def add(self, item: T) -> bool:
        """Insert item. Returns False if an item at distance 0 is already stored."""
        if item is None:
            raise InvalidItemError("Cannot add None to a BKTree.")
        if self.root is None:
            self.root = _BKNode(item)
            self._size = 1
            return True
        node = self.root
        while True:
            d = self.dist(node.item, item)
            if d == 0:
                return False
            nxt = node.children.get(d)
            if nxt is None:
                node.children[d] = _BKNode(item)
                self._size += 1
                return True
            node = nxt

    def build(self, items: Iterable[T]) -> "BKTree[T]":
        self.update(items)
        return self

    def update(self, items: Iterable[T]) -> int:
        """Add every item; returns how many were new."""
        return sum(1 for it in items if self.add(it))

    def search(self, item: T, radius: int) -> tuple[SearchResult[T], ...]:
        """Return all stored items within `radius` of item, closest first."""
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        if item is None or self.root is None:
            return ()
        out: list[SearchResult[T]] = []
        queue = deque([self.root])
        visited = 0
        try:
            while queue:
                node = queue.popleft()
                visited += 1
                d = self.dist(node.item, item)
                if d <= radius:
                    out.append(SearchResult(distance=d, item=node.item))
                # triangle inequality: subtrees keyed outside [d - r, d + r] cannot match
                lo = max(0, d - radius)
                hi = d + radius
                for k, child in node.children.items():
                    if lo <= k <= hi:
                        queue.append(child)
        except TypeError:
            logger.debug("Query %r is not comparable with stored items", item)
            return ()
        out.sort(key=lambda r: r.distance)
        logger.debug("search(radius=%d) visited %d/%d nodes, %d hits", radius, visited, self._size, len(out))
        return tuple(out)

    def nearest(self, item: T, max_distance: int) -> Optional[SearchResult[T]]:
        results = self.search(item, max_distance)
        return results[0] if results else None

    def contains(self, candidate: object) -> bool:
        if candidate is None or self.root is None:
            return False
        return len(self.search(candidate, 0)) > 0

    def remove(self, candidate: object) -> bool:
        """Remove the item at distance 0 from candidate. Returns False if none is stored."""
        if candidate is None or self.root is None:
            return False
        try:
            loc = self._locate(candidate)
        except TypeError:
            logger.debug("Candidate %r is not comparable with stored items", candidate)
            return False
        if loc is None:
            return False
        self._detach(*loc)
        return True

    def discard(self, candidate: object) -> None:
        self.remove(candidate)

    def iterator(self) -> "BKTreeIterator[T]":
        return BKTreeIterator(self)

    def _locate(self, candidate: object) -> Optional[tuple[Optional[_BKNode[T]], int]]:
        """Find the stored match for candidate as (parent, key); parent is None for the root."""
        d = self.dist(self.root.item, candidate)
        if d == 0:
            return None, 0
        parent = self.root
        while True:
            child = parent.children.get(d)
            if child is None:
                return None
            cd = self.dist(child.item, candidate)
            if cd == 0:
                return parent, d
            parent, d = child, cd

    def _detach(self, parent: Optional[_BKNode[T]], key: int) -> Optional[_BKNode[T]]:
        # Precondition: (parent, key) came from _locate with no mutation since.
        # The key is reused as-is, which only holds for single-threaded use.
        self._size -= 1
        if parent is None:
            self.root = self._replace(self.root)
            return self.root
        replacement = self._replace(parent.children.pop(key))
        if replacement is not None:
            # key was measured against parent.item, which has not moved
            parent.children[key] = replacement
        return replacement

    def _replace(self, node: _BKNode[T]) -> Optional[_BKNode[T]]:
        """Rebuild a valid subtree from the children of a removed node."""
        children = node.ordered_children()
        if not children:
            return None
        # new_root keeps its subtree: those keys are relative to new_root.item.
        # Sibling subtrees are dissolved since their items only satisfy the
        # BK property relative to the removed node.
        new_root = children[0]
        pending = deque(children[1:])
        moved = 0
        while pending:
            orphan = pending.popleft()
            pending.extend(orphan.ordered_children())
            orphan.children = {}
            self._attach(new_root, orphan)
            moved += 1
        logger.debug("Replaced removed node with %r, reinserted %d node(s)", new_root.item, moved)
        return new_root

    def _attach(self, parent: _BKNode[T], node: _BKNode[T]) -> None:
        # node must be a leaf
        while True:
            d = self.dist(parent.item, node.item)
            nxt = parent.children.get(d)
            if nxt is None:
                parent.children[d] = node
                return
            parent = nxt


class BKTreeIterator(Iterator[T]):
    """One-shot breadth-first traversal that supports removing the current item."""

    def __init__(self, tree: BKTree[T]):
        self._tree = tree
        self._queue: deque[_BKNode[T]] = deque()
        if tree.root is not None:
            self._queue.append(tree.root)
        self._last: Optional[_BKNode[T]] = None
        self._enqueued = 0

    def __iter__(self) -> "BKTreeIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._queue:
            raise StopIteration
        node = self._queue.popleft()
        children = node.ordered_children()
        self._queue.extend(children)
        self._last = node
        self._enqueued = len(children)
        return node.item

    def remove(self) -> None:
        """Remove the item most recently returned by next() from the tree."""
        node = self._last
        if node is None:
            raise TraversalStateError("remove() needs a preceding next() and may be called once per item.")
        loc = self._tree._locate(node.item)
        if loc is None:
            raise TraversalStateError(f"{node.item!r} is no longer stored in the tree.")
        # node's children are the tail of the queue; they now live under the replacement
        for _ in range(self._enqueued):
            self._queue.pop()
        replacement = self._tree._detach(*loc)
        if replacement is not None:
            self._queue.appendleft(replacement)
        self._last = None
        self._enqueued = 0
