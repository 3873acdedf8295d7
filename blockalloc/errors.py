class AllocatorError(Exception):
    pass

class InvalidSize(AllocatorError, ValueError):
    pass

class AllocationFailed(AllocatorError):
    def __init__(self, size, free):
        super().__init__(f'Failed to find big enough block to hold {size} cells (total free {free} cells)')
        self.size = size
        self.free = free

class InvalidHandle(AllocatorError):
    pass

# raised by BlockList, the allocator turns the first two into InvalidHandle
class BlockListError(AllocatorError):
    pass

class InvalidAddress(BlockListError):
    pass

class NotAllocated(BlockListError):
    pass

class BlockNotFree(BlockListError):
    pass
