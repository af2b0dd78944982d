# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/test_bench.py

import pytest

from zktls.bench import generate_fixtures, make_record
from zktls.errors import ConfigurationError
from zktls.loader import load


def test_generated_fixtures_verify(tmp_path):
    key = generate_fixtures(tmp_path, [16, 256])

    for length in (16, 256):
        loaded_key, dataset = load(length, tmp_path)
        assert loaded_key == key
        dataset.verify(loaded_key)


def test_records_are_deterministic():
    assert make_record(7) == make_record(7)
    assert make_record(7).timestamp == make_record(0).timestamp + 7


def test_rejects_unsupported_length(tmp_path):
    with pytest.raises(ConfigurationError):
        generate_fixtures(tmp_path, [15])
    assert not any(tmp_path.iterdir())


if __name__ == "__main__":
    pytest.main()
