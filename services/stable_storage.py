# services/stable_storage.py
"""
Stable storage primitives built on the stable_entries / stable_cells tables.

- StableBTreeMap: ordered u64 -> record map backed by StableEntry rows
- IdAllocator: process-wide id counter backed by a StableCell

u64 values are stored in signed BIGINT columns shifted down by 2**63.
The shift is monotonic, so ORDER BY key gives ascending u64 order.
"""
import logging
from typing import Generic, Iterator, List, Optional, Tuple, Type, TypeVar

from sqlalchemy.orm import Session

from errors import StorageError
from models import MemoryId, StableCell, StableEntry
from schemas.storable import Storable, U64_MAX

logger = logging.getLogger(__name__)

_SHIFT = 2**63

R = TypeVar("R", bound=Storable)


def to_signed(value: int) -> int:
     """Map a u64 into the signed 64-bit range, preserving order."""
     if value < 0 or value > U64_MAX:
          raise ValueError(f"{value} is outside the u64 range")
     return value - _SHIFT


def from_signed(value: int) -> int:
     """Inverse of to_signed()."""
     return value + _SHIFT


class StableBTreeMap(Generic[R]):
     """
     Ordered map of u64 keys to records, stored in one memory_id partition.

     Records are encoded with record_type.to_bytes() on insert and decoded
     with record_type.from_bytes() on read. Writes are flushed immediately;
     committing is left to the session owner.
     """

     def __init__(self, db: Session, memory_id: int, record_type: Type[R]):
          self.db = db
          self.memory_id = int(memory_id)
          self.record_type = record_type

     def _row(self, key: int) -> Optional[StableEntry]:
          return self.db.get(StableEntry, (self.memory_id, to_signed(key)))

     def _query(self):
          return self.db.query(StableEntry).filter(StableEntry.memory_id == self.memory_id)

     def get(self, key: int) -> Optional[R]:
          row = self._row(key)
          if row is None:
               return None
          return self.record_type.from_bytes(row.value)

     def contains_key(self, key: int) -> bool:
          return self._row(key) is not None

     def insert(self, key: int, record: R) -> Optional[R]:
          """
          Store record under key, overwriting any existing record.

          Returns:
               The record previously stored under key, or None

          Raises:
               RecordEncodingError: If the record exceeds its size ceiling
          """
          data = record.to_bytes()
          row = self._row(key)
          previous = None
          if row is None:
               self.db.add(StableEntry(memory_id=self.memory_id, key=to_signed(key), value=data))
          else:
               previous = self.record_type.from_bytes(row.value)
               row.value = data
          self.db.flush()
          return previous

     def remove(self, key: int) -> Optional[R]:
          """Delete key. Returns the removed record, or None if key was absent."""
          row = self._row(key)
          if row is None:
               return None
          record = self.record_type.from_bytes(row.value)
          self.db.delete(row)
          self.db.flush()
          return record

     def iter(self) -> Iterator[Tuple[int, R]]:
          """Yield (key, record) pairs in ascending key order."""
          for row in self._query().order_by(StableEntry.key).all():
               yield from_signed(row.key), self.record_type.from_bytes(row.value)

     def values(self) -> List[R]:
          return [record for _, record in self.iter()]

     def __len__(self) -> int:
          return self._query().count()

     def is_empty(self) -> bool:
          return self._query().first() is None


class IdAllocator:
     """
     Shared id counter. Ids are unique across all entity tables.

     The cell starts at 0; next_id() hands out the stored value and stores
     value + 1. There is no give-back: an id whose insert later fails is
     simply never used.
     """

     def __init__(self, db: Session, memory_id: int = MemoryId.ID_COUNTER):
          self.db = db
          self.memory_id = int(memory_id)

     def _cell(self) -> StableCell:
          cell = self.db.get(StableCell, self.memory_id)
          if cell is None:
               cell = StableCell(memory_id=self.memory_id, value=to_signed(0))
               self.db.add(cell)
               self.db.flush()
          return cell

     def peek(self) -> int:
          """The id the next call to next_id() will return."""
          cell = self.db.get(StableCell, self.memory_id)
          return 0 if cell is None else from_signed(cell.value)

     def next_id(self) -> int:
          cell = self._cell()
          current = from_signed(cell.value)
          if current >= U64_MAX:
               logger.error("Id counter exhausted at %s", current)
               raise StorageError("Failed to increment ID counter")
          cell.value = to_signed(current + 1)
          self.db.flush()
          return current
