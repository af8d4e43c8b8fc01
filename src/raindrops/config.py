"""
Configuration & Global Constants
================================
This module serves as the central registry for the animation's global
constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (timer period, padding, seed)
   scattered throughout the code.
2. Tuning: Window defaults and colours can be changed in one place.

Exports:
    TICK_INTERVAL_MS (int): Period of the animation timer.
    DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT (int): Size used until the
        window reports its real size.
    PADDING (int): Margin kept free at every window edge.
    RAINDROP_COUNT (int): Number of drops in a freshly initialized field.
    DEFAULT_SEED (int): Seed of the random generator threaded through the field.
"""

# =============================================================================
# ANIMATION
# =============================================================================

# Timer period in milliseconds (one stage per tick)
TICK_INTERVAL_MS: int = 120

# Number of raindrops placed on (re)initialization
RAINDROP_COUNT: int = 10

# Fixed seed, so every run with the same window size looks the same
DEFAULT_SEED: int = 42

# =============================================================================
# WINDOW
# =============================================================================

DEFAULT_WINDOW_WIDTH: int = 1280
DEFAULT_WINDOW_HEIGHT: int = 720

# Largest sprite is 80x80, plus 10 px margin
PADDING: int = 90

# =============================================================================
# DRAWING
# =============================================================================

BACKGROUND_COLOR: str = "#FFFFFF"
STROKE_COLOR: str = "#1F4E79"
STROKE_WIDTH: float = 1.0
