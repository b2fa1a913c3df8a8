# ==================================================
# examples/fill_array.py
# ==================================================
import argparse, logging
from big_array import BigArray

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("count", type=int, help="number of keys to set")
    p.add_argument("--start", type=int, default=0)
    p.add_argument("--stride", type=int, default=1)
    p.add_argument("-v", "--verbose", action="store_true", help="log chunk allocation")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    arr = BigArray()
    for i in range(args.count):
        k = args.start + i * args.stride
        arr.set(k, f"value_{k}")
    counts = arr.chunk_count()
    for depth, n in enumerate(counts):
        print(f"depth {depth}: {n} chunks")
    print(f"total: {sum(counts)} chunks")
    return arr

if __name__ == "__main__":
    main()
