import bisect
from enum import Enum
from typing import List, Optional, Tuple

from .errors import BlockNotFree, InvalidAddress, InvalidSize, NotAllocated

class BlockState(Enum):
    FREE = "Free"
    ALLOCATED = "Allocated"

    def __str__(self):
        return self.value

class Block:
    __slots__ = ("start", "length", "state")

    def __init__(self, start:int, length:int, state:BlockState = BlockState.FREE):
        assert length > 0, f"block at {start} has length {length}"
        self.start = start
        self.length = length
        self.state = state

    @property
    def end(self):
        # inclusive
        return self.start + self.length - 1

    @property
    def is_free(self):
        return self.state is BlockState.FREE

    def __repr__(self):
        return f"Block({self.start}, {self.length}, {self.state})"

LayoutEntry = Tuple[int, int, BlockState]

class BlockList:
    '''
    Ordered partition of [0, capacity) into contiguous blocks.

    Blocks are kept sorted by start address with no gaps and no overlaps,
    and no two neighbouring blocks are both free once a release returns.
    '''
    def __init__(self, capacity:int):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise InvalidSize(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self.blocks: List[Block] = [Block(0, capacity)]

    def __len__(self):
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    def __getitem__(self, index):
        return self.blocks[index]

    def find_free(self, size:int, policy) -> Optional[int]:
        return policy.select(self.blocks, size)

    def index_of(self, start:int) -> int:
        if not isinstance(start, int) or isinstance(start, bool):
            raise InvalidAddress(f"address {start!r} is not an integer")
        if start < 0 or start >= self.capacity:
            raise InvalidAddress(f"address {start} is outside [0, {self.capacity})")
        i = bisect.bisect_right(self.blocks, start, key=lambda b: b.start) - 1
        block = self.blocks[i]
        if block.start != start:
            raise InvalidAddress(f"address {start} falls inside {block}")
        return i

    def split(self, index:int, size:int):
        block = self.blocks[index]
        if not block.is_free:
            raise BlockNotFree(f"cannot split {block}")
        if size <= 0 or size > block.length:
            raise InvalidSize(f"cannot take {size} cells from {block}")
        if block.length > size:
            # cut extra free space into a separate block
            remainder = Block(block.start + size, block.length - size)
            self.blocks.insert(index + 1, remainder)
            block.length = size
        block.state = BlockState.ALLOCATED

    def mark_free(self, start:int) -> Block:
        i = self.index_of(start)
        block = self.blocks[i]
        if block.is_free:
            raise NotAllocated(f"{block} is not allocated")
        block.state = BlockState.FREE

        # only the two neighbours can be free, the rest is already coalesced
        if i + 1 < len(self.blocks) and self.blocks[i + 1].is_free:
            block.length += self.blocks[i + 1].length
            del self.blocks[i + 1]
        if i > 0 and self.blocks[i - 1].is_free:
            left = self.blocks[i - 1]
            left.length += block.length
            del self.blocks[i]
            block = left
        return block

    def layout(self) -> List[LayoutEntry]:
        return [(b.start, b.end, b.state) for b in self.blocks]

    def check(self):
        assert self.blocks, "empty block list"
        assert self.blocks[0].start == 0, f"first block starts at {self.blocks[0].start}"
        total = 0
        prev = None
        for b in self.blocks:
            assert b.length > 0, f"{b} is empty"
            if prev is not None:
                assert prev.start + prev.length == b.start, f"gap or overlap between {prev} and {b}"
                assert not (prev.is_free and b.is_free), f"{prev} and {b} are both free"
            total += b.length
            prev = b
        assert total == self.capacity, f"blocks cover {total} cells, capacity is {self.capacity}"
