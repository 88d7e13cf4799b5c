"""
Flappy Bird: a single-player side-scroller built on pygame.
"""

__version__ = "1.0.0"
