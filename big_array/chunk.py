# ==================================================
# big_array/chunk.py
# ==================================================
from __future__ import annotations
from typing import Any, Callable, List

import numpy as np

from .const import CHUNK_SIZE


class _Unset:
    """Marker for a slot that was never written. There is only one."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSET"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()


class Chunk:
    """256 slots, each empty or occupied.

    Occupancy lives in a separate boolean mask, so whatever is stored in a
    slot (None included) is never mistaken for an empty one.
    """
    __slots__ = ("slots", "mask")

    def __init__(self):
        self.slots = np.empty(CHUNK_SIZE, dtype=object)
        self.mask  = np.zeros(CHUNK_SIZE, dtype=bool)

    # ------------------------------------------------------------------
    @staticmethod
    def _check(index: int) -> int:
        if not 0 <= index < CHUNK_SIZE:
            raise IndexError(f"slot {index} out of range")
        return index

    def read(self, index: int) -> Any:
        """Return the occupant of `index`, or UNSET."""
        if not self.mask[self._check(index)]:
            return UNSET
        return self.slots[index]

    def write(self, index: int, occupant: Any) -> None:
        self.slots[self._check(index)] = occupant
        self.mask[index] = True

    def is_empty(self, index: int) -> bool:
        return not self.mask[self._check(index)]

    def occupied(self) -> int:
        return int(np.count_nonzero(self.mask))


class BranchChunk(Chunk):
    """Depths 0-6: every occupied slot owns a child chunk."""
    __slots__ = ()

    def get_or_create(self, index: int, factory: Callable[[], Chunk]) -> Chunk:
        child = self.read(index)
        if child is UNSET:
            child = factory()
            self.write(index, child)
        return child


class LeafChunk(Chunk):
    """Depth 7: occupied slots hold the stored values."""
    __slots__ = ()

    def read_many(self, start: int, n: int, default: Any = UNSET) -> List[Any]:
        self._check(start)
        if n and start + n > CHUNK_SIZE:
            raise IndexError(f"slots {start}..{start + n - 1} out of range")
        values = list(self.slots[start:start + n])
        present = self.mask[start:start + n].tolist()
        return [v if p else default for v, p in zip(values, present)]
