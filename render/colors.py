"""
synapse module: render/colors.py

Central color palette.
"""

BG = (14, 14, 18)
EDGE = (110, 110, 120)
TEXT = (235, 235, 235)

SOURCE = (80, 120, 230)
POSITIVE = (80, 210, 140)
NEGATIVE = (220, 90, 90)
NEUTRAL = (60, 60, 70)
