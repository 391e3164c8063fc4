"""
synapse module: neural/neuron.py

A neuron takes weighted input values and produces one output value:
tanh of the dot product of its input values and input weights.

Inputs are meant to lie in [-1, 1] and weights in [-4, 4]. These ranges are
advisory; they are only enforced when config.CHECK_INPUT_RANGES is on.

Typical use from a caller-driven tick loop:

    n = Neuron()
    n.add_input(src.value, 0.8, src.id)
    n.update()
    ...
    n.clear_inputs()   # start of the next tick
"""

from __future__ import annotations
import logging
import math
from typing import List, Optional, Tuple

import config
from neural.ids import IdAllocator, get_new_id
from neural.synapse import InputLine
from neural.vector import dot, format_scalar, format_values

logger = logging.getLogger(__name__)


class InputRangeError(ValueError):
    """An input value or weight fell outside its advisory range (checked mode only)."""


def _check_range(label: str, x: float, bounds: Tuple[float, float]) -> None:
    lo, hi = bounds
    if not lo <= x <= hi:
        raise InputRangeError(f"input {label} {x} outside [{lo}, {hi}]")


class Neuron:
    def __init__(self, allocator: Optional[IdAllocator] = None) -> None:
        self._id = allocator.allocate() if allocator is not None else get_new_id()
        self._value = 0.0
        self._in_vals: List[float] = []
        self._in_weights: List[float] = []
        self._in_ids: List[int] = []

    @staticmethod
    def create(allocator: Optional[IdAllocator] = None) -> "Neuron":
        return Neuron(allocator)

    def __repr__(self) -> str:
        return f"Neuron(id={self._id}, value={self._value}, inputs={len(self._in_vals)})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def value(self) -> float:
        """Last output computed by update() (0.0 before the first call)."""
        return self._value

    def add_input(self, value: float, weight: float, src_id: int) -> None:
        """
        Register one input line. Registering the same src_id twice adds two
        independent lines; nothing is de-duplicated.
        """
        if config.CHECK_INPUT_RANGES:
            _check_range("value", value, config.INPUT_VALUE_RANGE)
            _check_range("weight", weight, config.INPUT_WEIGHT_RANGE)

        self._in_ids.append(src_id)
        self._in_vals.append(value)
        self._in_weights.append(weight)
        logger.debug("neuron %d: input from %d (value=%s, weight=%s)", self._id, src_id, value, weight)

    def update(self) -> None:
        """Recompute value from the current inputs; the inputs are kept."""
        self._value = math.tanh(dot(self._in_vals, self._in_weights))
        logger.debug("neuron %d: updated to %s from %d inputs", self._id, self._value, len(self._in_vals))

    def clear_inputs(self) -> None:
        self._in_vals.clear()
        self._in_weights.clear()
        self._in_ids.clear()
        logger.debug("neuron %d: inputs cleared", self._id)

    # ---- read-only views ----

    def input_count(self) -> int:
        return len(self._in_vals)

    def input_values(self) -> List[float]:
        return list(self._in_vals)

    def input_weights(self) -> List[float]:
        return list(self._in_weights)

    def input_ids(self) -> List[int]:
        return list(self._in_ids)

    def inputs(self) -> List[InputLine]:
        return [
            InputLine(src=s, value=v, weight=w)
            for s, v, w in zip(self._in_ids, self._in_vals, self._in_weights)
        ]

    # ---- diagnostics ----

    def describe(self) -> str:
        # the weights field repeats the values list; kept for output compatibility
        vals = format_values(self._in_vals)
        return (
            f"Pinged neuron with id {self._id}, a value of {format_scalar(self._value)}, "
            f"input values of {vals}, and input weights of {vals}."
        )

    def ping(self) -> None:
        print(self.describe())
