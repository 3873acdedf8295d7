import os

import numpy as np

from .blocks import BlockState

def log(*args, **kwargs):
    BLOCKALLOC_LOG = int(os.getenv("BLOCKALLOC_LOG", "0"))
    if BLOCKALLOC_LOG:
        color_id = 3
        color0 = f"\033[0;{30+(color_id % 8)}m"
        color1 = f"\033[0m"
        print(color0, f"[{BLOCKALLOC_LOG=}] ", *args, color1, **kwargs)

def format_layout(layout):
    '''
    Render a layout snapshot the way the simulator prints it:

        Memory layout:
        --------------
        0-29 | Allocated
        30-99 | Free
        --------------
    '''
    lines = ["Memory layout:", "--------------"]
    for start, end, state in layout:
        lines.append(f"{start}-{end} | {state}")
    lines.append("--------------")
    return "\n".join(lines)

class LayoutStats:
    def __init__(self, capacity, used, free, free_blocks, largest_free, mean_free):
        self.capacity = capacity
        self.used = used
        self.free = free
        self.free_blocks = free_blocks
        self.largest_free = largest_free
        self.mean_free = mean_free

    @property
    def external_fragmentation(self):
        # share of free cells not reachable by the largest single request
        if self.free == 0:
            return 0.0
        return 1.0 - self.largest_free / self.free

    @classmethod
    def from_layout(cls, layout):
        if len(layout) == 0:
            raise ValueError("empty layout")
        lengths = np.array([end - start + 1 for start, end, _ in layout], dtype=np.int64)
        is_free = np.array([state is BlockState.FREE for _, _, state in layout], dtype=bool)
        free_lengths = lengths[is_free]
        capacity = int(lengths.sum())
        free = int(free_lengths.sum())
        return cls(
            capacity=capacity,
            used=capacity - free,
            free=free,
            free_blocks=int(free_lengths.size),
            largest_free=int(free_lengths.max()) if free_lengths.size else 0,
            mean_free=float(free_lengths.mean()) if free_lengths.size else 0.0,
        )

    def show(self):
        msg = f"used {self.used}/{self.capacity} cells  free {self.free} in {self.free_blocks} blocks"
        if self.free_blocks:
            msg += f"  largest {self.largest_free}  mean {self.mean_free:.1f}"
            msg += f"  fragmentation {self.external_fragmentation*100:.1f}%"
        print(msg)
        return msg
