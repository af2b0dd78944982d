# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# stream.py

"""
The two ordered byte streams that cross the host/guest boundary.

Every value is serialized as one canonical CBOR item (RFC 8949 §4.2), so
identical values always produce identical bytes:

- `ZkStdin` is written by the host and read, item by item, by the guest.
- `PublicValues` is appended to by the guest and read back, in commit
  order, by any verifier. Each committed item is framed as

      length (4 bytes, big-endian) || canonical CBOR item
"""

from typing import Any

import cbor2

from zktls.errors import SchemaError, SerializationError
from zktls.hashing import sha256

FRAME_HEADER_SIZE = 4


def encode_item(value: Any) -> bytes:
    try:
        return cbor2.dumps(value, canonical=True)
    except (cbor2.CBOREncodeError, TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode {type(value).__name__}: {e}") from e


def decode_item(item: bytes) -> Any:
    """
    Raises:
        SchemaError: If `item` is not valid CBOR.
    """
    try:
        return cbor2.loads(item)
    except cbor2.CBORDecodeError as e:
        raise SchemaError(f"malformed stream value: {e}") from e


def frame(item: bytes) -> bytes:
    return len(item).to_bytes(FRAME_HEADER_SIZE, "big") + item


def unframe(data: bytes, offset: int) -> tuple[bytes, int]:
    """
    Cut the framed item starting at `offset` out of `data`.

    Returns:
        The item bytes and the offset just past it.

    Raises:
        SchemaError: If no item is left or the frame is truncated.
    """
    if offset >= len(data):
        raise SchemaError("stream exhausted: no value left to read")
    start = offset + FRAME_HEADER_SIZE
    if start > len(data):
        raise SchemaError(f"truncated frame header at offset {offset}")
    end = start + int.from_bytes(data[offset:start], "big")
    if end > len(data):
        raise SchemaError(f"truncated value at offset {offset}")
    return data[start:end], end


class ZkStdin:
    """Ordered input values for one guest run."""

    def __init__(self) -> None:
        self.buffer: list[bytes] = []

    def write(self, value: Any) -> None:
        self.buffer.append(encode_item(value))

    def __len__(self) -> int:
        return len(self.buffer)


class PublicValues:
    """Values committed by the guest, in commit order."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytes(data)
        self._cursor = 0

    def __eq__(self, other):
        if not isinstance(other, PublicValues):
            return NotImplemented
        return self._data == other._data

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PublicValues({self.raw()})"

    def as_bytes(self) -> bytes:
        return self._data

    def raw(self) -> str:
        return "0x" + self._data.hex()

    def hash(self) -> bytes:
        return sha256(self._data)

    def read(self) -> Any:
        item, self._cursor = unframe(self._data, self._cursor)
        return decode_item(item)

    def exhausted(self) -> bool:
        return self._cursor >= len(self._data)

    def rewind(self) -> None:
        self._cursor = 0
