# ==================================================
# big_array/const.py
# ==================================================
CHUNK_SIZE = 256          # slots per chunk, one per key byte value
KEY_SIZE = 8              # bytes in a key
DEPTH = KEY_SIZE          # levels: 7 branch + 1 leaf
BRANCH_LEVELS = DEPTH - 1
KEY_FMT = ">Q"            # big-endian u64: b0 is the most significant byte
KEY_MAX = 2**64 - 1
COORD_MAX = 2**32 - 1     # x / y range for 2D keys
NIBBLES = 8               # nibbles per 32-bit coordinate
