"""Ethiopian Date Service Test Suite."""

__version__ = "0.1.0"
