"""
Shared fixtures for the neuron test suite.

Run with: pytest tests -v
"""

import pytest

import config
from neural.ids import IdAllocator


@pytest.fixture
def allocator():
    """Fresh allocator so ids are predictable within a test."""
    return IdAllocator()


@pytest.fixture
def checked_ranges(monkeypatch):
    """Turn on debug-mode range checking for add_input."""
    monkeypatch.setattr(config, "CHECK_INPUT_RANGES", True)
