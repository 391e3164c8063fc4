"""
synapse module: render/renderer.py

Pygame rendering of the demo circuit.
"""

from __future__ import annotations
import math
from typing import Dict, Tuple, TYPE_CHECKING

import pygame

import config
from render import colors

if TYPE_CHECKING:
    from main import DemoCircuit

NODE_RADIUS = 22


def value_color(v: float) -> Tuple[int, int, int]:
    # blend from neutral toward green (+) or red (-) by |v|
    k = max(0.0, min(1.0, abs(v)))
    target = colors.POSITIVE if v >= 0 else colors.NEGATIVE
    return tuple(int(a + (b - a) * k) for a, b in zip(colors.NEUTRAL, target))


def layout(circuit: "DemoCircuit") -> Dict[int, Tuple[float, float]]:
    """Source on the left, neurons on a ring to its right."""
    cx = config.SCREEN_W * 0.6
    cy = config.SCREEN_H * 0.5
    ring = min(config.SCREEN_W, config.SCREEN_H) * 0.3

    pos = {circuit.source.id: (config.SCREEN_W * 0.15, cy)}
    count = max(1, len(circuit.neurons))
    for i, n in enumerate(circuit.neurons):
        a = math.pi + 2 * math.pi * i / count
        pos[n.id] = (cx + math.cos(a) * ring, cy + math.sin(a) * ring)
    return pos


def draw_circuit(screen: pygame.Surface, circuit: "DemoCircuit", debug: bool = False) -> None:
    debug_font = pygame.font.Font(None, 18) if debug else None
    pos = layout(circuit)

    # wiring first; line width by |weight|
    for src_id, dst, weight in circuit.wiring:
        a = pos[src_id]
        b = pos[circuit.neurons[dst].id]
        col = colors.POSITIVE if weight >= 0 else colors.NEGATIVE
        pygame.draw.line(screen, col, a, b, max(1, int(abs(weight))))

    sx, sy = pos[circuit.source.id]
    pygame.draw.circle(screen, colors.SOURCE, (int(sx), int(sy)), NODE_RADIUS)
    pygame.draw.circle(screen, value_color(circuit.source.value), (int(sx), int(sy)), NODE_RADIUS - 6)

    for n in circuit.neurons:
        x, y = pos[n.id]
        pygame.draw.circle(screen, value_color(n.value), (int(x), int(y)), NODE_RADIUS)
        pygame.draw.circle(screen, colors.EDGE, (int(x), int(y)), NODE_RADIUS, 2)

        if debug and debug_font is not None:
            txt = debug_font.render(f"{n.id}: {n.value:+.3f}", True, colors.TEXT)
            screen.blit(txt, (x + NODE_RADIUS + 4, y - 8))


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Tick: {stats.get('ticks', 0)}",
        f"Sim time: {stats.get('sim_time', 0.0):.1f}s",
        f"Input: {stats.get('input', 0.0):+.3f}",
        "TAB: labels  SPACE: ping",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.TEXT)
        screen.blit(txt, (12, y))
        y += 22
