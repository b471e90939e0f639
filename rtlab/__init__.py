"""A small sphere path tracer with PPM output, plus B-tree, red-black tree, string and tree algorithms."""

__version__ = "0.1.0"