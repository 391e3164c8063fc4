"""
synapse module: neural/node.py

Plain identified value holder (e.g. an external input feeding neurons).
"""

from __future__ import annotations
from dataclasses import InitVar, dataclass, field
from typing import Optional

from neural.ids import IdAllocator, get_new_id


@dataclass
class Node:
    value: float = 0.0
    allocator: InitVar[Optional[IdAllocator]] = None
    _id: int = field(init=False, repr=False)

    def __post_init__(self, allocator: Optional[IdAllocator]) -> None:
        # assigned once here; no setter
        self._id = allocator.allocate() if allocator is not None else get_new_id()

    def __repr__(self) -> str:
        return f"Node(id={self._id}, value={self.value})"

    @property
    def id(self) -> int:
        return self._id

    @staticmethod
    def create(allocator: Optional[IdAllocator] = None) -> "Node":
        return Node(allocator=allocator)

    def update(self, x: float) -> None:
        self.value = x
