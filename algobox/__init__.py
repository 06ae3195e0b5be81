"""Classic algorithms and data structures: sequences, heaps, dynamic
programming, number theory, linked lists, trees, graphs and sorting."""

__version__ = "0.1.0"