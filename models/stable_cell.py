# models/stable_cell.py
"""
StableCell model - a single persisted u64 scalar per memory_id.
Used for the shared id counter.
"""
from sqlalchemy import Column, BigInteger, Integer

from .base import Base


class StableCell(Base):
     """Persistent scalar cell. value is stored shifted into signed BIGINT range."""

     memory_id = Column(Integer, primary_key=True, autoincrement=False)
     value = Column(BigInteger, nullable=False)

     def __repr__(self):
          return f"<StableCell(memory_id={self.memory_id}, value={self.value})>"
