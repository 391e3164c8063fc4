"""
synapse module: neural/ids.py

Identifier allocation shared by nodes and neurons.

Ids are unique per allocator only: every IdAllocator counts from its own
start, so two allocators hand out overlapping ids. DEFAULT_ALLOCATOR is the
single process-wide sequence; units built without an explicit allocator
draw from it and never share an id.
"""

from __future__ import annotations
import logging
import threading

logger = logging.getLogger(__name__)


class IdAllocator:
    """
    Monotonic counter handing out unique ids: start, start + 1, ...

    Increment-and-return happens under a lock, so units built from several
    threads never share an id.
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def allocate(self) -> int:
        with self._lock:
            nid = self._next
            self._next += 1
        logger.debug("allocated id %d", nid)
        return nid

    def peek(self) -> int:
        """Id the next allocate() call would return."""
        with self._lock:
            return self._next


DEFAULT_ALLOCATOR = IdAllocator()


def get_new_id() -> int:
    return DEFAULT_ALLOCATOR.allocate()
