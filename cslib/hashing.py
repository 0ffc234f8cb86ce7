"""Deterministic, nonnegative hash codes for strings, numbers and collections."""

from __future__ import annotations

import struct
from collections.abc import Iterable
from typing import Any

HASH_SEED = 5381
HASH_MULTIPLIER = 33
HASH_MASK = 0x7FFFFFFF
_WORD = 0xFFFFFFFF


def _signed_byte(b: int) -> int:
    return b - 256 if b >= 128 else b


def _combine(values: Iterable[int]) -> int:
    """Fold values into a djb2-style code, wrapping at 32 bits."""
    code = HASH_SEED
    for value in values:
        code = (HASH_MULTIPLIER * code + value) & _WORD
    return code & HASH_MASK


def hash_code(key: Any) -> int:
    """Return a nonnegative hash code for a string, number or collection.

    Strings hash their UTF-8 bytes, integers keep their low 31 bits, floats
    hash the bytes of their IEEE representation, and collections combine the
    codes of their elements (sets in sorted order).
    """
    if isinstance(key, str):
        return _combine(_signed_byte(b) for b in key.encode("utf-8"))
    if isinstance(key, int):
        return key & HASH_MASK
    if isinstance(key, float):
        return _combine(_signed_byte(b) for b in struct.pack("<d", key))
    if isinstance(key, (set, frozenset)):
        return hash_collection(sorted(key))
    if isinstance(key, (list, tuple)):
        return hash_collection(key)
    raise TypeError(f"hash_code: unsupported type {type(key).__name__}")


def hash_collection(items: Iterable[Any]) -> int:
    """Combine the hash codes of the items, in the order they are given."""
    return _combine(hash_code(item) for item in items)