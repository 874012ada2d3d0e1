"""Threaded dining philosophers simulation: argument parsing, the simulation and its command."""

__version__ = "0.1.0"
__all__ = ["__version__"]