"""dinoshell -- Loopback host for a keyboard-driven web game.

Serves the bundled game assets over a loopback HTTP server and translates
touch input into arrow key presses, so the game can be played from a
touchscreen without modification.
"""

__version__ = "0.1.0"
