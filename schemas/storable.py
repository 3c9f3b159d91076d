# schemas/storable.py
"""
Bounded byte encoding for records kept in stable storage.

A record is written as compact UTF-8 JSON. Every record type declares a
MAX_SIZE ceiling; encoding a record past that ceiling fails instead of
truncating, and decoding must give back exactly the record that was encoded.
"""
from typing import Annotated, ClassVar, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from errors import RecordDecodingError, RecordEncodingError

U64_MAX = 2**64 - 1

U64 = Annotated[int, Field(ge=0, le=U64_MAX)]

S = TypeVar("S", bound="Storable")


class Storable(BaseModel):
     """Base for records that can be put in a StableBTreeMap."""

     MAX_SIZE: ClassVar[int] = 1024

     # NaN/Infinity are written as JSON constants so they survive a round trip
     model_config = ConfigDict(ser_json_inf_nan="constants")

     def to_bytes(self) -> bytes:
          """
          Encode the record.

          Raises:
               RecordEncodingError: If the encoded form is larger than MAX_SIZE
          """
          data = self.model_dump_json().encode("utf-8")
          if len(data) > self.MAX_SIZE:
               raise RecordEncodingError(
                    f"{type(self).__name__} encodes to {len(data)} bytes, "
                    f"exceeding the {self.MAX_SIZE} byte limit"
               )
          return data

     @classmethod
     def from_bytes(cls: Type[S], data: bytes) -> S:
          """
          Decode a record previously produced by to_bytes().

          Raises:
               RecordDecodingError: If the bytes are not a valid encoded record
          """
          try:
               return cls.model_validate_json(data)
          except PydanticValidationError as exc:
               raise RecordDecodingError(f"Cannot decode {cls.__name__}: {exc}") from exc
