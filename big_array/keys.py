# ==================================================
# big_array/keys.py
# ==================================================
from __future__ import annotations
import operator, struct
from typing import Tuple

from .const import COORD_MAX, KEY_FMT, KEY_MAX, NIBBLES

_key = struct.Struct(KEY_FMT)


def check_key(key, limit: int = KEY_MAX, what: str = "Key") -> int:
    """Return `key` as a plain int, or raise for anything outside 0..limit."""
    if isinstance(key, bool):
        raise TypeError(f"{what} must be an integer, not bool")
    try:
        key = operator.index(key)
    except TypeError:
        raise TypeError(f"{what} must be an integer, not {type(key).__name__}") from None
    if not 0 <= key <= limit:
        raise ValueError(f"{what} out of range: {key}")
    return key


def key_bytes(key) -> Tuple[int, ...]:
    """Split a 64-bit key into its 8 bytes, most significant first.

    Keys that share their high bytes share a path through the trie, so
    neighbouring keys end up in the same leaf chunk.
    """
    return tuple(_key.pack(check_key(key)))


def xy_key(x, y) -> int:
    """Weave two 32-bit coordinates into one key, nibble by nibble.

    Byte i of the key holds nibble i of `x` in its low half and nibble i
    of `y` in its high half (nibble 0 being the most significant). Every
    16x16 tile of the plane therefore lands in a single leaf chunk.
    """
    x = check_key(x, COORD_MAX, "x")
    y = check_key(y, COORD_MAX, "y")
    key = 0
    for shift in range(4 * (NIBBLES - 1), -1, -4):
        key = (key << 8) | ((x >> shift) & 0xF) | (((y >> shift) & 0xF) << 4)
    return key
