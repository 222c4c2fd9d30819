"""Graph colouring, clique search and Lovász theta with greedy and semidefinite algorithms."""

__version__ = "0.1.0"
__all__ = ["__version__"]