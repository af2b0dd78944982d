# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# domain tags
PROOF_DOMAIN_TAG = "ZKTLS|PROOF|v1|".encode("utf-8").hex()
PROGRAM_DOMAIN_TAG = "ZKTLS|PROGRAM|v1|".encode("utf-8").hex()
VKEY_DOMAIN_TAG = "ZKTLS|VKEY|v1|".encode("utf-8").hex()

# guest program
PROGRAM_NAME = "zktls-program"

# dataset sizes with a shipped bench fixture
SUPPORTED_LENGTHS = (16, 256, 1024, 2048)
DEFAULT_LENGTH = 16

# fixture layout, relative to the fixtures directory
VERIFYING_KEY_FILE = "verifying_k256.key"
DATA_DIR = "data"

# default locations, relative to the working directory
DEFAULT_FIXTURES_DIR = "fixtures/zktls"
DEFAULT_CONTRACT_FIXTURES_DIR = "contracts/src/fixtures"
DEFAULT_KEYS_DIR = "keys"

# proving key file, relative to the keys directory
PROVING_KEY_SUFFIX = ".pk.json"

# environment
PROVER_ENV = "ZKTLS_PROVER"
FIXTURES_DIR_ENV = "ZKTLS_FIXTURES_DIR"
CONTRACT_FIXTURES_DIR_ENV = "ZKTLS_CONTRACT_FIXTURES_DIR"
LOG_ENV = "ZKTLS_LOG"
KEYS_DIR_ENV = "ZKTLS_KEYS_DIR"

PROVER_MODES = ("cpu", "mock")
DEFAULT_PROVER = "cpu"
DEFAULT_LOG_LEVEL = "info"

# proof encoding sizes in bytes
SCALAR_SIZE = 32
G1_COMPRESSED_SIZE = 48
DIGEST_SIZE = 32
SELECTOR_SIZE = 4

# fixed diagnostics
MODE_ERROR = "You must specify either --execute or --prove"
