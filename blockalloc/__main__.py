import argparse
import os
import sys

from filelock import FileLock

from .errors import AllocatorError
from .mem_allocator import Allocator
from .report import LayoutStats, format_layout, log
from .strategy import Strategy
from .workload import generate_trace, replay

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
            prog="blockalloc",
            description="Replay a random alloc/release workload and dump the resulting layout",
            )
    parser.add_argument('-c', '--capacity', type=int, default=os.getenv("BLOCKALLOC_CAPACITY", "1024"),
                        help='number of cells in the address space')
    parser.add_argument('-s', '--strategy', type=Strategy.parse, default=os.getenv("BLOCKALLOC_STRATEGY", "first"),
                        help='placement strategy: first or best')
    parser.add_argument('-n', '--ops', type=int, default=100, help='number of alloc/release operations')
    parser.add_argument('--max-size', type=int, default=64, help='largest single request')
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--release-prob', type=float, default=0.4, help='chance an op releases a live allocation')
    parser.add_argument('--check', action="store_true", help='verify block list invariants after every op')
    parser.add_argument('--report', help='append layout and stats to this file')
    parser.add_argument('-v','--verbose', action="store_true", help='log every operation')
    args = parser.parse_args(argv)
    if args.ops < 0:
        parser.error(f"--ops must not be negative, got {args.ops}")
    if args.max_size <= 0:
        parser.error(f"--max-size must be positive, got {args.max_size}")
    if not 0.0 <= args.release_prob <= 1.0:
        parser.error(f"--release-prob must be in [0, 1], got {args.release_prob}")
    return args

def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        os.environ["BLOCKALLOC_LOG"] = "1"

    try:
        allocator = Allocator(args.capacity, args.strategy)
        # requests larger than the whole space would be misuse, not a failed fit
        max_size = min(args.max_size, allocator.capacity)
        trace = generate_trace(args.ops, max_size, seed=args.seed, release_prob=args.release_prob)
        result = replay(allocator, trace, check=args.check)
    except AllocatorError as e:
        print(f"blockalloc: {e}", file=sys.stderr)
        return 1

    log(result)
    layout_text = format_layout(allocator.layout())
    print(f"=============== {allocator.strategy} capacity={allocator.capacity} seed={args.seed}")
    print(layout_text)
    summary = LayoutStats.from_layout(allocator.layout()).show()
    print(f"allocs {result.allocs}  failed {result.failed}  releases {result.releases}")

    if args.report:
        # several runs may append to the same report concurrently
        with FileLock(args.report + ".lock"):
            with open(args.report, "a") as f:
                f.write(f"# {allocator.strategy} capacity={allocator.capacity} ops={args.ops} seed={args.seed}\n")
                f.write(layout_text + "\n")
                f.write(summary + "\n")
                f.write(f"allocs {result.allocs}  failed {result.failed}  releases {result.releases}\n\n")
    return 0

if __name__ == "__main__":
    sys.exit(main())
