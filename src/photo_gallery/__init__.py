"""Aggregate photo feeds into a static HTML gallery."""

__version__ = "0.1.0"
