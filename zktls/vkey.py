# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# vkey.py

"""Print the 32-byte verifying key of the guest program."""

import sys

from zktls.config import Settings
from zktls.errors import ZktlsError
from zktls.guest import PROGRAM
from zktls.log import setup_logger
from zktls.prover import ProverClient


def main() -> None:
    try:
        settings = Settings.from_env()
        setup_logger(settings.log_level)
        client = ProverClient.from_env(settings)
        _, vk = client.setup(PROGRAM)
    except ZktlsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(vk.bytes32())


if __name__ == "__main__":
    main()
