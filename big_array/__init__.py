from .array import BigArray
from .chunk import UNSET, BranchChunk, LeafChunk
from .keys import key_bytes, xy_key
__all__ = ["BigArray", "UNSET", "BranchChunk", "LeafChunk", "key_bytes", "xy_key"]
