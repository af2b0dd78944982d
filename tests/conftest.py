# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import pytest

from zktls.bench import generate_fixtures, generate_signing_key
from zktls.constants import (
    CONTRACT_FIXTURES_DIR_ENV,
    FIXTURES_DIR_ENV,
    KEYS_DIR_ENV,
    LOG_ENV,
    PROVER_ENV,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (PROVER_ENV, FIXTURES_DIR_ENV, CONTRACT_FIXTURES_DIR_ENV, LOG_ENV):
        monkeypatch.delenv(name, raising=False)
    # proving keys written by the CLIs stay inside the test's temp dir
    monkeypatch.setenv(KEYS_DIR_ENV, str(tmp_path / "keys"))


@pytest.fixture(scope="session")
def signing_key():
    return generate_signing_key()


@pytest.fixture(scope="session")
def fixtures_dir(tmp_path_factory, signing_key):
    out = tmp_path_factory.mktemp("fixtures")
    generate_fixtures(out, private_key=signing_key)
    return out
