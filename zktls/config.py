# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from zktls.constants import (
    CONTRACT_FIXTURES_DIR_ENV,
    DEFAULT_CONTRACT_FIXTURES_DIR,
    DEFAULT_FIXTURES_DIR,
    DEFAULT_KEYS_DIR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROVER,
    FIXTURES_DIR_ENV,
    KEYS_DIR_ENV,
    LOG_ENV,
    PROVER_ENV,
    PROVER_MODES,
)
from zktls.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """
    Process-wide settings, read once from the environment.

    Environment:
        ZKTLS_PROVER: Prover backend, `cpu` (default) or `mock`.
        ZKTLS_FIXTURES_DIR: Directory holding the verifying key and datasets.
        ZKTLS_CONTRACT_FIXTURES_DIR: Directory the proof fixtures are written to.
        ZKTLS_KEYS_DIR: Directory holding the private proving keys.
        ZKTLS_LOG: Log level name (default `info`).
    """

    prover: str = DEFAULT_PROVER
    fixtures_dir: Path = Path(DEFAULT_FIXTURES_DIR)
    contract_fixtures_dir: Path = Path(DEFAULT_CONTRACT_FIXTURES_DIR)
    keys_dir: Path = Path(DEFAULT_KEYS_DIR)
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.prover not in PROVER_MODES:
            raise ConfigurationError(
                f"{PROVER_ENV} must be one of {', '.join(PROVER_MODES)}, got {self.prover!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            prover=env.get(PROVER_ENV, DEFAULT_PROVER).strip().lower(),
            fixtures_dir=Path(env.get(FIXTURES_DIR_ENV, DEFAULT_FIXTURES_DIR)),
            contract_fixtures_dir=Path(
                env.get(CONTRACT_FIXTURES_DIR_ENV, DEFAULT_CONTRACT_FIXTURES_DIR)
            ),
            keys_dir=Path(env.get(KEYS_DIR_ENV, DEFAULT_KEYS_DIR)),
            log_level=env.get(LOG_ENV, DEFAULT_LOG_LEVEL),
        )
