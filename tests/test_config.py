# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/test_config.py

from pathlib import Path

import pytest

from zktls.config import Settings
from zktls.errors import ConfigurationError
from zktls.log import setup_logger


def test_defaults():
    settings = Settings.from_env({})
    assert settings.prover == "cpu"
    assert settings.fixtures_dir == Path("fixtures/zktls")
    assert settings.contract_fixtures_dir == Path("contracts/src/fixtures")
    assert settings.keys_dir == Path("keys")
    assert settings.log_level == "info"


def test_from_environment():
    settings = Settings.from_env(
        {
            "ZKTLS_PROVER": " MOCK ",
            "ZKTLS_FIXTURES_DIR": "/tmp/in",
            "ZKTLS_CONTRACT_FIXTURES_DIR": "/tmp/out",
            "ZKTLS_KEYS_DIR": "/tmp/keys",
            "ZKTLS_LOG": "debug",
        }
    )
    assert settings.prover == "mock"
    assert settings.fixtures_dir == Path("/tmp/in")
    assert settings.contract_fixtures_dir == Path("/tmp/out")
    assert settings.keys_dir == Path("/tmp/keys")
    assert settings.log_level == "debug"


def test_unknown_prover():
    with pytest.raises(ConfigurationError, match="cpu, mock"):
        Settings.from_env({"ZKTLS_PROVER": "network"})


def test_setup_logger_tolerates_unknown_level():
    setup_logger("chatty")
    setup_logger("debug")


if __name__ == "__main__":
    pytest.main()
