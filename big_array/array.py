# ==================================================
# big_array/array.py
# ==================================================
from __future__ import annotations
import logging, operator
from typing import Any, List, Optional, Tuple

from .const  import BRANCH_LEVELS, CHUNK_SIZE, DEPTH, KEY_MAX
from .chunk  import UNSET, BranchChunk, Chunk, LeafChunk
from .keys   import check_key, key_bytes, xy_key

logger = logging.getLogger(__name__)


class BigArray:
    """Sparse array indexed by unsigned 64-bit integers.

    A byte-radix trie: the key's 8 bytes (most significant first) pick a
    slot at each of 7 branch levels and then a slot in a leaf chunk.
    Chunks are only allocated when a write first passes through them.

        arr = BigArray()
        arr.set(1234, "foo")
        arr.get(1234)          # "foo"
        arr.get(9999)          # UNSET
    """
    depth = DEPTH

    def __init__(self, allocate_on_read: bool = False):
        self.allocate_on_read = allocate_on_read
        self._counts = [0] * DEPTH
        self.root = self._new_chunk(0)

    # ------------------------------------------------------------------
    def _new_chunk(self, depth: int, prefix: Tuple[int, ...] = ()) -> Chunk:
        chunk = LeafChunk() if depth == BRANCH_LEVELS else BranchChunk()
        self._counts[depth] += 1
        logger.debug("allocated %s at depth %d for prefix %r",
                     type(chunk).__name__, depth, bytes(prefix).hex())
        return chunk

    def _index_chunk(self, key, create: bool) -> Tuple[Optional[LeafChunk], int]:
        """Return the leaf chunk holding `key` and the key's slot in it.

        Without `create`, a missing branch yields (None, slot) and nothing
        is allocated.
        """
        path = key_bytes(key)
        cur = self.root
        for depth, b in enumerate(path[:BRANCH_LEVELS], 1):
            if create:
                cur = cur.get_or_create(b, lambda: self._new_chunk(depth, path[:depth]))
            else:
                cur = cur.read(b)
                if cur is UNSET:
                    return None, path[-1]
        return cur, path[-1]

    # ------------------------------------------------------------------
    def get(self, key, default: Any = UNSET) -> Any:
        """Return the value stored at `key`, or `default` (UNSET) if none."""
        leaf, off = self._index_chunk(key, self.allocate_on_read)
        if leaf is None:
            return default
        return default if leaf.is_empty(off) else leaf.read(off)

    def set(self, key, value: Any) -> Any:
        """Store `value` at `key`, replacing any previous value."""
        if value is UNSET:
            raise ValueError("UNSET marks an empty slot and cannot be stored")
        leaf, off = self._index_chunk(key, True)
        leaf.write(off, value)
        return value

    def __getitem__(self, key):
        leaf, off = self._index_chunk(key, False)
        if leaf is None or leaf.is_empty(off):
            raise KeyError(key)
        return leaf.read(off)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __contains__(self, key) -> bool:
        leaf, off = self._index_chunk(key, False)
        return leaf is not None and not leaf.is_empty(off)

    # ------------------------------------------------------------------
    def get_xy(self, x, y, default: Any = UNSET) -> Any:
        return self.get(xy_key(x, y), default)

    def set_xy(self, x, y, value: Any) -> Any:
        return self.set(xy_key(x, y), value)

    # ------------------------------------------------------------------
    def read_range(self, start, count, default: Any = UNSET) -> List[Any]:
        """Return the values of keys start .. start+count-1 as a list.

        Unset keys come back as `default`. One traversal per leaf chunk
        touched; ranges over unallocated space allocate nothing.
        """
        start = check_key(start)
        count = operator.index(count)
        if count < 0:
            raise ValueError(f"count must be non-negative: {count}")
        end = start + count
        if end - 1 > KEY_MAX:
            raise ValueError(f"range {start}+{count} runs past {KEY_MAX}")

        out: List[Any] = []
        key = start
        while key < end:
            leaf, off = self._index_chunk(key, False)
            n = min(CHUNK_SIZE - off, end - key)
            if leaf is None:
                out.extend([default] * n)
            else:
                out.extend(leaf.read_many(off, n, default))
            key += n
        return out

    # ------------------------------------------------------------------
    def chunk_count(self) -> Tuple[int, ...]:
        """Chunks allocated so far at each depth, root first."""
        return tuple(self._counts)

    def __repr__(self):
        return f"BigArray(chunks={sum(self._counts)}, allocate_on_read={self.allocate_on_read})"
