"""Pack distribution solvers, Redis-backed pack size storage and a Flask HTTP API."""

__version__ = "0.1.0"
__all__ = ["__version__"]