"""Models of four-lane SFMT, xoroshiro128++ and XORWOW generators and their stream transfers."""

__version__ = "0.1.0"

__all__ = [
    "algorithms",
    "graph",
    "host",
    "mm2s",
    "s2mm",
    "sfmt",
    "vec",
    "xoroshiro",
    "xorwow",
]