"""Vector containers with traversal, fold and map operations, and a check suite."""

__version__ = "0.1.0"
__all__ = ["vector", "helpers", "checks", "suite"]