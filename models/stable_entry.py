# models/stable_entry.py
"""
StableEntry model - one encoded record inside a virtual ordered map.

All entity tables share this physical table; memory_id tells them apart.
Keys are u64 values shifted into the signed BIGINT range (see
services.stable_storage.to_signed) so that SQL ordering matches u64 ordering.
"""
from sqlalchemy import Column, BigInteger, Integer, LargeBinary

from .base import Base


class StableEntry(Base):
     """Row of a StableBTreeMap: (memory_id, key) -> encoded record bytes."""

     memory_id = Column(Integer, primary_key=True, autoincrement=False)
     key = Column(BigInteger, primary_key=True, autoincrement=False)
     value = Column(LargeBinary, nullable=False)

     def __repr__(self):
          return f"<StableEntry(memory_id={self.memory_id}, key={self.key}, size={len(self.value or b'')})>"
