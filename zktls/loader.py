# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# loader.py

"""
Resolve a dataset-size selector to the verifying key and bench dataset.

All sizes share one verifying key; each size has its own dataset file
whose record count equals the size:

    <fixtures_dir>/verifying_k256.key
    <fixtures_dir>/data/bench<L>.json
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from zktls.attestation import VerificationDataSet
from zktls.constants import DATA_DIR, SUPPORTED_LENGTHS, VERIFYING_KEY_FILE
from zktls.errors import ConfigurationError, FixtureIOError, SchemaError
from zktls.files import load_json, load_string
from zktls.schema import write_inputs
from zktls.stream import ZkStdin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureSource:
    key: str
    data: str


FIXTURE_SOURCES = {
    length: FixtureSource(
        key=VERIFYING_KEY_FILE, data=f"{DATA_DIR}/bench{length}.json"
    )
    for length in SUPPORTED_LENGTHS
}


def resolve(length: int) -> FixtureSource:
    """
    Look up the fixture sources for a dataset size.

    Raises:
        ConfigurationError: If `length` is not a supported size.
    """
    try:
        return FIXTURE_SOURCES[length]
    except KeyError:
        raise ConfigurationError(f"Unsupported length: {length}") from None


def load(length: int, fixtures_dir: str | Path) -> tuple[str, VerificationDataSet]:
    """
    Load the verifying key and verification dataset for `length`.

    Args:
        length: Dataset size selector, one of `SUPPORTED_LENGTHS`.
        fixtures_dir: Directory holding the key and the `data/` datasets.

    Returns:
        The PEM verifying key, unchanged, and the parsed dataset.

    Raises:
        ConfigurationError: If `length` is not supported.
        FixtureIOError: If either source is missing, unreadable or malformed,
            or the dataset does not hold exactly `length` records.
    """
    source = resolve(length)
    fixtures_dir = Path(fixtures_dir)
    key_path = fixtures_dir / source.key
    data_path = fixtures_dir / source.data

    try:
        verifying_key = load_string(key_path)
    except (OSError, UnicodeDecodeError) as e:
        raise FixtureIOError(f"cannot read verifying key {key_path}: {e}") from e
    if not verifying_key.strip():
        raise FixtureIOError(f"verifying key {key_path} is empty")

    try:
        verification_data = VerificationDataSet.from_dict(load_json(data_path))
    except OSError as e:
        raise FixtureIOError(f"cannot read dataset {data_path}: {e}") from e
    except (ValueError, SchemaError) as e:
        raise FixtureIOError(f"malformed dataset {data_path}: {e}") from e
    if len(verification_data.records) != length:
        raise FixtureIOError(
            f"dataset {data_path} holds {len(verification_data.records)} "
            f"records, expected {length}"
        )

    logger.info(
        "loaded %d records from %s", len(verification_data.records), data_path
    )
    return verifying_key, verification_data


def write_stdin(length: int, fixtures_dir: str | Path, stdin: ZkStdin) -> None:
    verifying_key, verification_data = load(length, fixtures_dir)
    write_inputs(stdin, verifying_key, verification_data)
