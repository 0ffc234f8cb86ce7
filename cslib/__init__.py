"""Grids, hash maps, lexicons, geometry types, colors, random numbers and console helpers."""

__version__ = "0.1.0"

__all__ = [
    "colors",
    "grid",
    "gtypes",
    "hashing",
    "hashmap",
    "lexicon",
    "point",
    "randomness",
    "simpio",
    "startup",
]