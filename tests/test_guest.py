# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/test_guest.py

from dataclasses import replace

import pytest

from zktls.bench import generate_signing_key, make_dataset, public_key_pem
from zktls.guest import PROGRAM
from zktls.runtime import execute
from zktls.schema import decode_public_values, write_inputs
from zktls.stream import ZkStdin


def stdin_for(key: str, dataset) -> ZkStdin:
    stdin = ZkStdin()
    write_inputs(stdin, key, dataset)
    return stdin


@pytest.fixture()
def key(signing_key) -> str:
    return public_key_pem(signing_key)


@pytest.fixture()
def dataset(signing_key):
    return make_dataset(signing_key, 8)


def test_valid_attestation_commits_key_records_and_outcome(key, dataset):
    public_values, report = execute(PROGRAM, stdin_for(key, dataset))
    outputs = decode_public_values(public_values)

    assert outputs.verifying_key == key
    assert outputs.records == dataset.get_records()
    assert outputs.verified is True
    assert report.instruction_count > 0


def test_rejected_attestation_is_distinguishable(key, dataset):
    other_key = public_key_pem(generate_signing_key())

    accepted = decode_public_values(execute(PROGRAM, stdin_for(key, dataset))[0])
    rejected = decode_public_values(
        execute(PROGRAM, stdin_for(other_key, dataset))[0]
    )

    assert accepted.verified is True
    assert rejected.verified is False
    assert rejected.verifying_key == other_key
    assert rejected.records == accepted.records


def test_tampered_dataset_still_commits_records(key, dataset):
    tampered = replace(dataset, signatures=tuple(reversed(dataset.signatures)))
    outputs = decode_public_values(execute(PROGRAM, stdin_for(key, tampered))[0])
    assert outputs.verified is False
    assert outputs.records == dataset.get_records()


def test_public_values_are_deterministic(key, dataset):
    first, _ = execute(PROGRAM, stdin_for(key, dataset))
    second, _ = execute(PROGRAM, stdin_for(key, dataset))
    assert first.as_bytes() == second.as_bytes()


def test_program_digest_is_stable():
    assert len(PROGRAM.digest) == 56
    assert PROGRAM.name == "zktls-program"


if __name__ == "__main__":
    pytest.main()
