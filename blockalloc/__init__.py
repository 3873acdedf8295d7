"""blockalloc: block-partition memory allocator simulator"""

from .blocks import Block, BlockList, BlockState
from .errors import (AllocatorError, InvalidSize, AllocationFailed, InvalidHandle,
                     BlockListError, InvalidAddress, NotAllocated, BlockNotFree)
from .mem_allocator import Allocator, Handle
from .strategy import Strategy, first_fit, best_fit
from .report import LayoutStats, format_layout

__all__ = [
    'Allocator', 'Handle', 'Strategy', 'first_fit', 'best_fit',
    'Block', 'BlockList', 'BlockState', 'LayoutStats', 'format_layout',
    'AllocatorError', 'InvalidSize', 'AllocationFailed', 'InvalidHandle',
    'BlockListError', 'InvalidAddress', 'NotAllocated', 'BlockNotFree',
]
