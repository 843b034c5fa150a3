"""
Tick Pong: fixed-step two-paddle ball game simulation
"""

import os

# Keep stdout clean for the headless runner's JSON output
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

__version__ = "0.1.0"
