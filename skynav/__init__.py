"""Console flight planner and route search over a small network of cities."""

__version__ = "0.1.0"
__all__ = ["__version__"]