# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/test_attestation.py

from dataclasses import replace

import pytest

from zktls.attestation import AttestationRecord, VerificationDataSet
from zktls.bench import generate_signing_key, make_dataset, make_record, public_key_pem
from zktls.errors import AttestationError, SchemaError


@pytest.fixture()
def dataset(signing_key) -> VerificationDataSet:
    return make_dataset(signing_key, 4)


@pytest.fixture()
def verifying_key(signing_key) -> str:
    return public_key_pem(signing_key)


class TestRecord:
    def test_dict_roundtrip(self):
        record = make_record(3)
        assert AttestationRecord.from_dict(record.to_dict()) == record

    def test_message_is_deterministic(self):
        assert make_record(1).message() == make_record(1).message()
        assert make_record(1).message() != make_record(2).message()

    def test_rejects_non_map(self):
        with pytest.raises(SchemaError, match="must be a map"):
            AttestationRecord.from_dict([1, 2])

    def test_rejects_missing_field(self):
        data = make_record(0).to_dict()
        del data["timestamp"]
        with pytest.raises(SchemaError, match="record fields"):
            AttestationRecord.from_dict(data)

    def test_rejects_bool_index(self):
        data = {**make_record(0).to_dict(), "index": True}
        with pytest.raises(SchemaError, match="integers"):
            AttestationRecord.from_dict(data)

    def test_rejects_non_hex_digest(self):
        data = {**make_record(0).to_dict(), "response_digest": "xyz"}
        with pytest.raises(SchemaError, match="hex"):
            AttestationRecord.from_dict(data)


class TestDataSet:
    def test_dict_roundtrip(self, dataset):
        assert VerificationDataSet.from_dict(dataset.to_dict()) == dataset

    def test_get_records_preserves_order(self, dataset):
        assert [r.index for r in dataset.get_records()] == [0, 1, 2, 3]

    def test_rejects_missing_signatures(self, dataset):
        data = dataset.to_dict()
        del data["signatures"]
        with pytest.raises(SchemaError, match="signatures"):
            VerificationDataSet.from_dict(data)


class TestVerify:
    def test_valid_dataset(self, dataset, verifying_key):
        dataset.verify(verifying_key)

    def test_wrong_key(self, dataset):
        other = public_key_pem(generate_signing_key())
        with pytest.raises(AttestationError, match="invalid signature"):
            dataset.verify(other)

    def test_garbage_key(self, dataset):
        with pytest.raises(AttestationError, match="invalid verifying key"):
            dataset.verify("not a key")

    def test_tampered_record(self, dataset, verifying_key):
        records = list(dataset.records)
        records[2] = replace(records[2], request="https://evil.example.com")
        tampered = replace(dataset, records=tuple(records))
        with pytest.raises(AttestationError, match="record 2"):
            tampered.verify(verifying_key)

    def test_signature_count_mismatch(self, dataset, verifying_key):
        short = replace(dataset, signatures=dataset.signatures[:-1])
        with pytest.raises(AttestationError, match="signature count mismatch"):
            short.verify(verifying_key)

    def test_malformed_signature_hex(self, dataset, verifying_key):
        bad = replace(dataset, signatures=("zz",) + dataset.signatures[1:])
        with pytest.raises(AttestationError, match="record 0"):
            bad.verify(verifying_key)

    def test_empty_dataset(self, verifying_key):
        with pytest.raises(AttestationError, match="no records"):
            VerificationDataSet(records=(), signatures=()).verify(verifying_key)


if __name__ == "__main__":
    pytest.main()
