import enum
import re

from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: StableEntry -> stable_entries
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'


class MemoryId(enum.IntEnum):
     """Partitions of stable storage. Each id is one virtual map or cell."""
     ID_COUNTER = 0
     PROPERTIES = 1
     LEASE_AGREEMENTS = 2
     MAINTENANCE_REQUESTS = 3
