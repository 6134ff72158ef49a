"""Classic algorithms and data structures: sequences, sorting, trees, graphs, lists, stacks."""

__version__ = "0.1.0"