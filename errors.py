# errors.py
"""
Error types for the record backend.

Two families:
- RecordError: the tagged errors an operation hands back to its caller
  (NotFound, ValidationError, Unauthorized). The set is closed; the API
  layer maps every variant to an HTTP response.
- StorageError: faults of the storage substrate (record too large to encode,
  undecodable bytes, exhausted id space). These mean the stored state is
  unusable and are never returned as a tagged error.
"""
from typing import Dict


class RecordError(Exception):
     """Base class for errors returned by record operations."""

     status_code: int = 400

     def __init__(self, msg: str):
          self.msg = msg
          super().__init__(msg)

     @property
     def variant(self) -> str:
          return type(self).__name__

     def to_dict(self) -> Dict[str, Dict[str, str]]:
          """Tagged form, e.g. {"NotFound": {"msg": "Property not found"}}."""
          return {self.variant: {"msg": self.msg}}


class NotFound(RecordError):
     """The requested id, or a referenced property, does not exist."""

     status_code = 404


class ValidationError(RecordError):
     """The payload breaks a business rule."""

     status_code = 422


class Unauthorized(RecordError):
     """Reserved. No operation performs caller checks yet."""

     status_code = 403


class StorageError(Exception):
     """Unrecoverable fault in the storage substrate."""


class RecordEncodingError(StorageError):
     """A record could not be encoded within its size ceiling."""


class RecordDecodingError(StorageError):
     """Stored bytes could not be decoded back into a record."""
