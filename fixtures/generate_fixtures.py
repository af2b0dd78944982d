#!/usr/bin/env python3

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

"""
Generate the verifying key and bench datasets under fixtures/zktls.

Run from the repository root:
    python fixtures/generate_fixtures.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from zktls.bench import generate_fixtures
from zktls.constants import SUPPORTED_LENGTHS

out_dir = Path(__file__).resolve().parent / "zktls"
generate_fixtures(out_dir, SUPPORTED_LENGTHS)
print(f"Wrote verifying key and {len(SUPPORTED_LENGTHS)} datasets to {out_dir}")
