from enum import Enum
from typing import Optional, Sequence

from .blocks import Block

def first_fit(blocks:Sequence[Block], size:int) -> Optional[int]:
    for i, block in enumerate(blocks):
        if block.is_free and block.length >= size:
            return i
    return None

def best_fit(blocks:Sequence[Block], size:int) -> Optional[int]:
    best = None
    best_length = 0
    for i, block in enumerate(blocks):
        if not block.is_free or block.length < size:
            continue
        if block.length == size:
            # exact match cannot be improved on
            return i
        if best is None or block.length < best_length:
            best = i
            best_length = block.length
    return best

class Strategy(Enum):
    FIRST_FIT = "first-fit"
    BEST_FIT = "best-fit"

    def select(self, blocks:Sequence[Block], size:int) -> Optional[int]:
        if self is Strategy.FIRST_FIT:
            return first_fit(blocks, size)
        return best_fit(blocks, size)

    @classmethod
    def parse(cls, name):
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("_", "-")
        if not key.endswith("-fit"):
            key += "-fit"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"unknown placement strategy {name!r}, expect one of {[m.value for m in cls]}")

    def __str__(self):
        return self.value
