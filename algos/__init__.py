"""Classic algorithms and data structures: sorting, searching, numbers, strings,
arrays, linked lists, a deque, trees, graphs, a bounded buffer and invoice records."""

__version__ = "0.1.0"