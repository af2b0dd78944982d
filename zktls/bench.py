# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# bench.py

"""
Generate the benchmark fixtures the loader reads.

A fresh secp256k1 attestor key signs every record, and one dataset is
written per supported size so proving cost can be compared as the record
count grows. Record contents are deterministic; signatures are not.
"""

from pathlib import Path
from typing import Iterable

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec

from zktls.attestation import AttestationRecord, VerificationDataSet
from zktls.constants import SUPPORTED_LENGTHS, VERIFYING_KEY_FILE
from zktls.files import save_json, save_string
from zktls.hashing import sha256_hex
from zktls.loader import resolve

BASE_TIMESTAMP = 1_700_000_000


def generate_signing_key() -> ec.EllipticCurvePrivateKey:
    return ec.generate_private_key(ec.SECP256K1())


def public_key_pem(private_key: ec.EllipticCurvePrivateKey) -> str:
    return (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("utf-8")
    )


def make_record(index: int) -> AttestationRecord:
    return AttestationRecord(
        index=index,
        request=f"https://api.example.com/v1/quotes/{index}",
        response_digest=sha256_hex(f"response-{index}".encode("utf-8")),
        timestamp=BASE_TIMESTAMP + index,
    )


def sign_record(private_key: ec.EllipticCurvePrivateKey, record: AttestationRecord) -> str:
    return private_key.sign(record.message(), ec.ECDSA(hashes.SHA256())).hex()


def make_dataset(
    private_key: ec.EllipticCurvePrivateKey, length: int
) -> VerificationDataSet:
    records = tuple(make_record(i) for i in range(length))
    return VerificationDataSet(
        records=records,
        signatures=tuple(sign_record(private_key, r) for r in records),
    )


def generate_fixtures(
    out_dir: str | Path,
    lengths: Iterable[int] = SUPPORTED_LENGTHS,
    private_key: ec.EllipticCurvePrivateKey | None = None,
) -> str:
    """
    Write the shared verifying key and one bench dataset per length.

    Args:
        out_dir: Fixtures directory; existing files are overwritten.
        lengths: Dataset sizes to write, each a supported size.
        private_key: Attestor key; a fresh one is generated if omitted.

    Returns:
        The PEM verifying key that was written.

    Raises:
        ConfigurationError: If a length is not a supported size.
    """
    out_dir = Path(out_dir)
    if private_key is None:
        private_key = generate_signing_key()

    lengths = list(lengths)
    sources = [resolve(length) for length in lengths]

    verifying_key = public_key_pem(private_key)
    save_string(out_dir / VERIFYING_KEY_FILE, verifying_key)

    for length, source in zip(lengths, sources):
        dataset = make_dataset(private_key, length)
        save_json(out_dir / source.data, dataset.to_dict())
    return verifying_key
