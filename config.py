"""
Tuning knobs for the neuron primitives and the demo driver.
"""

# Advisory input ranges (caller's responsibility unless checks are on)
INPUT_VALUE_RANGE = (-1.0, 1.0)
INPUT_WEIGHT_RANGE = (-4.0, 4.0)
CHECK_INPUT_RANGES = False  # debug mode: reject out-of-range inputs

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Demo tick loop
TICK_DT = 1 / 30
OSC_FREQ = 0.5  # Hz, drives the input node
HEADLESS_TICKS = 60
PING_EVERY = 20  # headless: ping all neurons every N ticks (0 = never)

# Environment
SCREEN_W, SCREEN_H = 720, 480
FPS = 30
