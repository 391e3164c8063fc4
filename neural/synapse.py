"""
synapse module: neural/synapse.py

One registered input line on a neuron.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class InputLine:
    src: int       # id of the producing unit
    value: float
    weight: float
