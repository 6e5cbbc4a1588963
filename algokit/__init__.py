"""Classic algorithms and data structures: sorting, trees, graphs, max flow and integer helpers."""

__version__ = "0.1.0"