# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# run.py

"""
Execute the guest program or generate and verify a core proof.

    zktls-run --execute [--zktls-length 16]
    zktls-run --prove [--zktls-length 16]
"""

import argparse
import sys

from zktls.config import Settings
from zktls.constants import DEFAULT_LENGTH
from zktls.errors import ZktlsError
from zktls.host import RunMode, execute_program, prove_program, select_mode
from zktls.log import setup_logger
from zktls.prover import ProverClient


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zktls-run",
        description="Execute or prove the zkTLS attestation verification program.",
    )
    parser.add_argument("--execute", action="store_true")
    parser.add_argument("--prove", action="store_true")
    parser.add_argument("--zktls-length", type=int, default=DEFAULT_LENGTH)
    parser.add_argument("--fixtures-dir", default=None)
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    mode = select_mode(args.execute, args.prove)

    settings = Settings.from_env()
    setup_logger(settings.log_level)
    fixtures_dir = args.fixtures_dir or settings.fixtures_dir

    client = ProverClient.from_env(settings)

    print(f"zktls verification length: {args.zktls_length}")

    if mode is RunMode.EXECUTE:
        result = execute_program(client, args.zktls_length, fixtures_dir)
        print("Program executed successfully.")
        print(f"Attestation verified: {result.outputs.verified}")
        print(f"Committed records: {len(result.outputs.records)}")

        # Record the number of cycles executed.
        print(f"Number of cycles: {result.instruction_count}")
    else:
        prove_program(client, args.zktls_length, fixtures_dir)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        run(args)
    except ZktlsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
