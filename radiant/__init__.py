"""Vector and matrix math, 2D box physics, an event queue, a frame clock, and file and log helpers for small games."""

__version__ = "0.0.1"

__all__ = [
    "clock",
    "events",
    "fastmath",
    "linkedlist",
    "logger",
    "matrix",
    "physics",
    "strings",
    "textfile",
    "vector",
]