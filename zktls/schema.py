# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# schema.py

"""
The single declaration of what crosses the host/guest boundary.

Inputs (host writes, guest reads, in this order):
  0: verifying_key      str   PEM attestor key, passed byte-for-byte
  1: verification_data  map   VerificationDataSet

Public outputs (guest commits, verifiers decode, in this order):
  0: verifying_key      str   the same key, unchanged
  1: records            list  VerificationDataSet.get_records()
  2: verified           bool  outcome of the attestation check

Both the guest program and every host entry point go through the
functions below, so order and types cannot drift apart.
"""

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from zktls.attestation import AttestationRecord, VerificationDataSet
from zktls.errors import SchemaError
from zktls.runtime import GuestIO
from zktls.stream import PublicValues, ZkStdin


def _exactly(kind: type) -> Callable[[Any], Any]:
    def check(value: Any) -> Any:
        # bool is an int subclass; keep the two apart
        if type(value) is not kind:
            raise SchemaError(
                f"expected {kind.__name__}, got {type(value).__name__}"
            )
        return value

    return check


def _encode_dataset(value: Any) -> dict[str, Any]:
    if not isinstance(value, VerificationDataSet):
        raise SchemaError(
            f"expected VerificationDataSet, got {type(value).__name__}"
        )
    return value.to_dict()


def _encode_records(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, (list, tuple)) or not all(
        isinstance(r, AttestationRecord) for r in value
    ):
        raise SchemaError("records must be a sequence of AttestationRecord")
    return [r.to_dict() for r in value]


def _decode_records(value: Any) -> list[AttestationRecord]:
    if not isinstance(value, list):
        raise SchemaError(f"records must be a list, got {type(value).__name__}")
    return [AttestationRecord.from_dict(r) for r in value]


@dataclass(frozen=True)
class Field:
    name: str
    encode: Callable[[Any], Any]
    decode: Callable[[Any], Any]


INPUT_SCHEMA = (
    Field("verifying_key", _exactly(str), _exactly(str)),
    Field("verification_data", _encode_dataset, VerificationDataSet.from_dict),
)

OUTPUT_SCHEMA = (
    Field("verifying_key", _exactly(str), _exactly(str)),
    Field("records", _encode_records, _decode_records),
    Field("verified", _exactly(bool), _exactly(bool)),
)


@dataclass(frozen=True)
class GuestInputs:
    verifying_key: str
    verification_data: VerificationDataSet


@dataclass(frozen=True)
class PublicOutputs:
    verifying_key: str
    records: list[AttestationRecord]
    verified: bool


def _encode_all(schema: Sequence[Field], values: Sequence[Any]) -> list[Any]:
    if len(values) != len(schema):
        raise SchemaError(f"expected {len(schema)} values, got {len(values)}")
    encoded = []
    for field, value in zip(schema, values):
        try:
            encoded.append(field.encode(value))
        except SchemaError as e:
            raise SchemaError(f"{field.name}: {e}") from e
    return encoded


def _decode_one(field: Field, raw: Any) -> Any:
    try:
        return field.decode(raw)
    except SchemaError as e:
        raise SchemaError(f"{field.name}: {e}") from e


def write_inputs(
    stdin: ZkStdin, verifying_key: str, verification_data: VerificationDataSet
) -> None:
    for value in _encode_all(INPUT_SCHEMA, (verifying_key, verification_data)):
        stdin.write(value)


def read_inputs(guest_io: GuestIO) -> GuestInputs:
    values = [_decode_one(field, guest_io.read()) for field in INPUT_SCHEMA]
    return GuestInputs(*values)


def commit_outputs(
    guest_io: GuestIO,
    verifying_key: str,
    records: list[AttestationRecord],
    verified: bool,
) -> None:
    for value in _encode_all(OUTPUT_SCHEMA, (verifying_key, records, verified)):
        guest_io.commit(value)


def decode_public_values(public_values: PublicValues) -> PublicOutputs:
    """
    Decode committed public values in schema order.

    Raises:
        SchemaError: If a field is missing, has the wrong type, or values
            remain after the last field.
    """
    public_values.rewind()
    values = [_decode_one(field, public_values.read()) for field in OUTPUT_SCHEMA]
    if not public_values.exhausted():
        raise SchemaError("public values have trailing data after the last field")
    public_values.rewind()
    return PublicOutputs(*values)
