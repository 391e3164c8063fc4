"""
Tests for identifier allocation.

Run with: pytest tests/test_ids.py -v
"""

import threading

import pytest

from neural.ids import DEFAULT_ALLOCATOR, IdAllocator, get_new_id
from neural.neuron import Neuron
from neural.node import Node


def test_fresh_allocator_starts_at_zero(allocator):
    assert allocator.allocate() == 0
    assert allocator.allocate() == 1
    assert allocator.allocate() == 2


def test_peek_does_not_consume(allocator):
    assert allocator.peek() == 0
    assert allocator.peek() == 0
    assert allocator.allocate() == 0
    assert allocator.peek() == 1


def test_custom_start():
    alloc = IdAllocator(start=10)
    assert alloc.allocate() == 10


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        IdAllocator(start=-1)


def test_default_allocator_is_strictly_increasing():
    ids = [get_new_id() for _ in range(50)]
    assert ids == list(range(ids[0], ids[0] + 50))
    assert DEFAULT_ALLOCATOR.peek() == ids[-1] + 1


def test_nodes_and_neurons_share_the_default_sequence():
    a = Neuron()
    b = Node()
    c = Neuron()
    assert b.id == a.id + 1
    assert c.id == b.id + 1


def test_injected_allocator_is_isolated(allocator):
    before = DEFAULT_ALLOCATOR.peek()
    n = Neuron(allocator)
    node = Node.create(allocator)
    assert (n.id, node.id) == (0, 1)
    assert DEFAULT_ALLOCATOR.peek() == before


def test_concurrent_allocation_has_no_duplicates(allocator):
    per_thread = 2000
    results = []
    lock = threading.Lock()

    def worker():
        got = [allocator.allocate() for _ in range(per_thread)]
        with lock:
            results.extend(got)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8 * per_thread
    assert sorted(results) == list(range(8 * per_thread))


def test_separate_allocators_overlap():
    # uniqueness holds per allocator; only the default one spans the process
    assert IdAllocator().allocate() == IdAllocator().allocate()
