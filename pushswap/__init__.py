"""Two-stack integer sorting with a restricted operation set, and input checking."""

__version__ = "0.1.0"
__all__ = ["parsing", "stacks", "solver", "checker"]