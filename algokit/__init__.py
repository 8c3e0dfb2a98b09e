"""Classic algorithms on arrays, strings, stacks, heaps, grids, graphs and binary trees."""

__version__ = "0.1.0"