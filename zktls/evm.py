# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# evm.py

"""
Generate an on-chain verifiable proof and write it as a contract fixture.

    zktls-evm --system groth16
    zktls-evm --system plonk --zktls-length 256
"""

import argparse
import sys

from zktls.config import Settings
from zktls.constants import DEFAULT_LENGTH
from zktls.errors import ZktlsError
from zktls.host import generate_fixture
from zktls.log import setup_logger
from zktls.prover import ProofSystem, ProverClient

SYSTEMS = [ProofSystem.GROTH16.value, ProofSystem.PLONK.value]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zktls-evm",
        description="Generate a groth16 or plonk proof fixture for the verifier contract.",
    )
    parser.add_argument("--system", choices=SYSTEMS, default=ProofSystem.GROTH16.value)
    parser.add_argument("--zktls-length", type=int, default=DEFAULT_LENGTH)
    parser.add_argument("--fixtures-dir", default=None)
    parser.add_argument("--out-dir", default=None)
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    settings = Settings.from_env()
    setup_logger(settings.log_level)
    fixtures_dir = args.fixtures_dir or settings.fixtures_dir
    out_dir = args.out_dir or settings.contract_fixtures_dir
    system = ProofSystem(args.system)

    client = ProverClient.from_env(settings)

    print(f"zktls verification length: {args.zktls_length}")
    print(f"Proof System: {system.value}")

    path = generate_fixture(client, args.zktls_length, fixtures_dir, system, out_dir)
    print(f"Fixture written to {path}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        run(args)
    except ZktlsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
