"""Frame-buffer games and simulations: Game of Life, a bouncing box and invaders."""

__version__ = "0.1.0"