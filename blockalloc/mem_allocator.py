from .blocks import BlockList
from .errors import AllocationFailed, InvalidAddress, InvalidHandle, InvalidSize, NotAllocated
from .strategy import Strategy

class Handle:
    '''
    Capability to release one allocation.

    Holds the start address and the allocator that produced it; the cells
    themselves are owned by the allocator's block list.
    '''
    __slots__ = ("address", "owner", "released")

    def __init__(self, address, owner):
        self.address = address
        self.owner = owner
        self.released = False

    @property
    def valid(self):
        return not self.released

    def __repr__(self):
        state = "released" if self.released else "live"
        return f"Handle({self.address}, {state})"

class Allocator:
    def __init__(self, capacity=1024, strategy=Strategy.FIRST_FIT):
        self.blocks = BlockList(capacity)
        self.strategy = Strategy.parse(strategy)
        self.used_size = 0
        self.addr_bound = 0

    @property
    def capacity(self):
        return self.blocks.capacity

    @property
    def free_size(self):
        return self.capacity - self.used_size

    def upper_bound(self):
        return self.addr_bound

    def alloc(self, size) -> Handle:
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0 or size > self.capacity:
            raise InvalidSize(f"allocation size must be in [1, {self.capacity}], got {size!r}")

        index = self.blocks.find_free(size, self.strategy)
        if index is None:
            raise AllocationFailed(size, self.free_size)

        self.blocks.split(index, size)
        start = self.blocks[index].start
        self.used_size += size
        self.addr_bound = max(self.addr_bound, start + size)
        return Handle(start, self)

    def release(self, handle:Handle):
        if not isinstance(handle, Handle) or handle.owner is not self:
            raise InvalidHandle(f"{handle!r} was not allocated here")
        if handle.released:
            raise InvalidHandle(f"{handle!r} is already released")
        try:
            length = self.blocks[self.blocks.index_of(handle.address)].length
            self.blocks.mark_free(handle.address)
        except (InvalidAddress, NotAllocated) as e:
            raise InvalidHandle(f"{handle!r} does not name an allocated block") from e
        handle.released = True
        self.used_size -= length

    def layout(self):
        return self.blocks.layout()
