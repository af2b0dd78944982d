# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# attestation.py

"""
Attestation records and the check the guest program runs over them.

A verification dataset is an ordered list of attestation records together
with one ECDSA/secp256k1 signature per record, made by the attestor whose
PEM-encoded public key is the verifying key:

    {
      "records": [{index, request, response_digest, timestamp}, ...],
      "signatures": ["<DER signature hex>", ...]
    }

Each signature covers the canonical CBOR encoding of its record, so the
signed message is byte-identical in every process that rebuilds it.
"""

from dataclasses import dataclass
from typing import Any

import cbor2
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from zktls.errors import AttestationError, SchemaError

RECORD_FIELDS = ("index", "request", "response_digest", "timestamp")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_hex(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        bytes.fromhex(value)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class AttestationRecord:
    index: int
    request: str
    response_digest: str
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "request": self.request,
            "response_digest": self.response_digest,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "AttestationRecord":
        """
        Build a record from its plain-dict form.

        Raises:
            SchemaError: If `data` is not a dict with exactly the record
                fields, or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise SchemaError(f"record must be a map, got {type(data).__name__}")
        if set(data) != set(RECORD_FIELDS):
            raise SchemaError(
                f"record fields must be {list(RECORD_FIELDS)}, got {sorted(data)}"
            )
        if not _is_int(data["index"]) or not _is_int(data["timestamp"]):
            raise SchemaError("record index and timestamp must be integers")
        if not isinstance(data["request"], str):
            raise SchemaError("record request must be a string")
        if not _is_hex(data["response_digest"]):
            raise SchemaError("record response_digest must be a hex string")
        return cls(
            index=data["index"],
            request=data["request"],
            response_digest=data["response_digest"],
            timestamp=data["timestamp"],
        )

    def message(self) -> bytes:
        """The exact bytes the attestor signs for this record."""
        return cbor2.dumps(self.to_dict(), canonical=True)


@dataclass(frozen=True)
class VerificationDataSet:
    records: tuple[AttestationRecord, ...]
    signatures: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "records": [r.to_dict() for r in self.records],
            "signatures": list(self.signatures),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "VerificationDataSet":
        if not isinstance(data, dict):
            raise SchemaError(f"dataset must be a map, got {type(data).__name__}")
        records = data.get("records")
        signatures = data.get("signatures")
        if not isinstance(records, list):
            raise SchemaError("dataset 'records' must be a list")
        if not isinstance(signatures, list) or not all(
            isinstance(s, str) for s in signatures
        ):
            raise SchemaError("dataset 'signatures' must be a list of strings")
        return cls(
            records=tuple(AttestationRecord.from_dict(r) for r in records),
            signatures=tuple(signatures),
        )

    def get_records(self) -> list[AttestationRecord]:
        return list(self.records)

    def verify(self, verifying_key: str) -> None:
        """
        Check every record signature against the attestor's verifying key.

        Pure and deterministic given its inputs; it is run inside the guest.

        Args:
            verifying_key: PEM-encoded secp256k1 public key.

        Raises:
            AttestationError: If the key is unusable, the dataset is empty,
                the signature count does not match the record count, or any
                signature fails to verify.
        """
        try:
            public_key = serialization.load_pem_public_key(
                verifying_key.encode("utf-8")
            )
        except (ValueError, UnsupportedAlgorithm) as e:
            raise AttestationError(f"invalid verifying key: {e}") from e

        if not isinstance(public_key, ec.EllipticCurvePublicKey) or not isinstance(
            public_key.curve, ec.SECP256K1
        ):
            raise AttestationError("verifying key is not a secp256k1 public key")

        if not self.records:
            raise AttestationError("dataset has no records")
        if len(self.signatures) != len(self.records):
            raise AttestationError(
                f"signature count mismatch: {len(self.signatures)} signatures "
                f"for {len(self.records)} records"
            )

        for record, signature in zip(self.records, self.signatures):
            try:
                public_key.verify(
                    bytes.fromhex(signature),
                    record.message(),
                    ec.ECDSA(hashes.SHA256()),
                )
            except (InvalidSignature, ValueError) as e:
                raise AttestationError(
                    f"record {record.index}: invalid signature"
                ) from e
