"""Solutions to classic online-judge problems, one submodule per kind of problem."""

__version__ = "0.1.0"
__all__ = ["counting", "optimize", "graphs", "grids", "greedy", "queues", "puzzles"]