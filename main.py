"""
Tick-loop demo: an oscillator-driven input node feeding a small recurrent
circuit of neurons, shown live in a pygame window (or run headless).
"""

from __future__ import annotations
import argparse
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pygame

import config
from neural.ids import IdAllocator
from neural.neuron import Neuron
from neural.node import Node
from render.renderer import draw_circuit, draw_hud
from render import colors

logger = logging.getLogger(__name__)


@dataclass
class DemoCircuit:
    source: Node
    neurons: List[Neuron] = field(default_factory=list)
    # (src unit id, dst neuron index, weight)
    wiring: List[Tuple[int, int, float]] = field(default_factory=list)
    ticks: int = 0

    def connect(self, src_id: int, dst_index: int, weight: float) -> None:
        self.wiring.append((src_id, dst_index, weight))

    def values_by_id(self) -> Dict[int, float]:
        out = {self.source.id: self.source.value}
        for n in self.neurons:
            out[n.id] = n.value
        return out

    def ping_all(self) -> None:
        for n in self.neurons:
            n.ping()


def build_demo_circuit(allocator: Optional[IdAllocator] = None) -> DemoCircuit:
    """
    Starter circuit:
      input -> n0, n1
      n0 <-> n1 (mutual inhibition), n1 -> n2, n2 -> n0 (feedback)
    """
    source = Node.create(allocator)
    circuit = DemoCircuit(source=source)
    for _ in range(3):
        circuit.neurons.append(Neuron.create(allocator))

    n0, n1, n2 = (n.id for n in circuit.neurons)
    circuit.connect(source.id, 0, 2.0)
    circuit.connect(source.id, 1, -1.5)
    circuit.connect(n1, 0, -1.2)
    circuit.connect(n0, 1, -1.2)
    circuit.connect(n1, 2, 3.0)
    circuit.connect(n2, 0, 0.6)
    return circuit


def tick(circuit: DemoCircuit, t: float) -> None:
    """
    One logical tick: snapshot last tick's values, drive the input node, then
    every neuron re-registers its inputs from the snapshot and updates.
    """
    prev = circuit.values_by_id()
    circuit.source.update(math.sin(2.0 * math.pi * config.OSC_FREQ * t))

    for n in circuit.neurons:
        n.clear_inputs()
    for src_id, dst, weight in circuit.wiring:
        circuit.neurons[dst].add_input(prev[src_id], weight, src_id)
    for n in circuit.neurons:
        n.update()

    circuit.ticks += 1


def run_headless(
    ticks: int = config.HEADLESS_TICKS,
    dt: float = config.TICK_DT,
    ping_every: int = config.PING_EVERY,
    allocator: Optional[IdAllocator] = None,
) -> DemoCircuit:
    circuit = build_demo_circuit(allocator)
    t = 0.0
    for _ in range(ticks):
        t += dt
        tick(circuit, t)
        if ping_every > 0 and circuit.ticks % ping_every == 0:
            circuit.ping_all()
    logger.info("ran %d ticks headless", circuit.ticks)
    return circuit


def run_window(circuit: DemoCircuit) -> None:
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("synapse (tick loop)")
    clock = pygame.time.Clock()

    sim_time = 0.0
    debug = False
    running = True

    while running:
        clock.tick(config.FPS)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_TAB:
                debug = not debug
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_SPACE:
                circuit.ping_all()

        sim_time += config.TICK_DT
        tick(circuit, sim_time)

        screen.fill(colors.BG)
        draw_circuit(screen, circuit, debug=debug)
        draw_hud(screen, {"ticks": circuit.ticks, "sim_time": sim_time, "input": circuit.source.value})
        pygame.display.flip()

    pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Neuron tick-loop demo")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--ticks", type=int, default=config.HEADLESS_TICKS, help="ticks to run headless")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    if args.headless:
        run_headless(ticks=args.ticks)
    else:
        run_window(build_demo_circuit())


if __name__ == "__main__":
    main()
