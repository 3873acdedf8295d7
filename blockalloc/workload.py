import numpy as np

from .errors import AllocationFailed
from .report import log

def generate_trace(n_ops, max_size, seed=0, release_prob=0.4):
    '''
    Random alloc/release sequence.

    Each op is either ("alloc", size, slot) or ("release", slot), where slot
    numbers the allocation requests in order; a release only names a slot
    that was requested earlier and not yet released by the trace.
    '''
    assert max_size > 0
    assert 0.0 <= release_prob <= 1.0
    rng = np.random.default_rng(seed)
    trace = []
    live = []
    next_slot = 0
    for _ in range(n_ops):
        if live and rng.random() < release_prob:
            slot = live.pop(int(rng.integers(len(live))))
            trace.append(("release", slot))
        else:
            size = int(rng.integers(1, max_size + 1))
            trace.append(("alloc", size, next_slot))
            live.append(next_slot)
            next_slot += 1
    return trace

class WorkloadResult:
    def __init__(self):
        self.allocs = 0
        self.failed = 0
        self.releases = 0
        self.handles = {}

    @property
    def failure_rate(self):
        requested = self.allocs + self.failed
        return self.failed / requested if requested else 0.0

    def __repr__(self):
        return f"WorkloadResult(allocs={self.allocs}, failed={self.failed}, releases={self.releases})"

def replay(allocator, trace, check=False):
    result = WorkloadResult()
    for op in trace:
        if op[0] == "alloc":
            _, size, slot = op
            try:
                result.handles[slot] = allocator.alloc(size)
                result.allocs += 1
                log(f"alloc({size}) -> {result.handles[slot].address}")
            except AllocationFailed as e:
                result.failed += 1
                log(e)
        elif op[0] == "release":
            handle = result.handles.pop(op[1], None)
            if handle is None:
                # the matching alloc failed
                continue
            allocator.release(handle)
            result.releases += 1
            log(f"release({handle.address})")
        else:
            raise ValueError(f"unknown op {op!r}")
        if check:
            allocator.blocks.check()
    return result
