from .base import Base, MemoryId
from .stable_entry import StableEntry
from .stable_cell import StableCell

__all__ = [
     "Base",
     "MemoryId",
     "StableEntry",
     "StableCell",
]
