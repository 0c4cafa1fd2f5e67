"""Two-stack integer sorting with a restricted set of operations, and a checker for operation sequences."""

__version__ = "0.1.0"