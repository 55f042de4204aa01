"""Numeric analysis building blocks: checked integers, sparse difference graphs and their closure algorithms, weak topological orderings and widening thresholds."""

__version__ = "0.1.0"