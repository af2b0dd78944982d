# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# host.py

"""
Host-side pipelines shared by the command line entry points.

Each pipeline is one synchronous pass with a fixed order: load inputs and
set up keys, run or prove, verify, and only then write anything. Every
failure surfaces as a `ZktlsError`; nothing is retried.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from zktls.constants import MODE_ERROR
from zktls.errors import ConfigurationError
from zktls.fixture import create_proof_fixture
from zktls.guest import PROGRAM
from zktls.loader import write_stdin
from zktls.prover import ProgramVerifyingKey, ProofArtifact, ProofSystem, ProverClient
from zktls.runtime import Program
from zktls.schema import PublicOutputs, decode_public_values
from zktls.stream import PublicValues, ZkStdin

logger = logging.getLogger(__name__)


class RunMode(Enum):
    EXECUTE = "execute"
    PROVE = "prove"


def select_mode(execute: bool, prove: bool) -> RunMode:
    """
    Raises:
        ConfigurationError: Unless exactly one of the two flags is set.
    """
    if execute == prove:
        raise ConfigurationError(MODE_ERROR)
    return RunMode.EXECUTE if execute else RunMode.PROVE


@dataclass(frozen=True)
class ExecutionResult:
    length: int
    public_values: PublicValues
    outputs: PublicOutputs
    instruction_count: int


@dataclass(frozen=True)
class ProofResult:
    length: int
    artifact: ProofArtifact
    vk: ProgramVerifyingKey
    outputs: PublicOutputs


def build_stdin(length: int, fixtures_dir: str | Path) -> ZkStdin:
    stdin = ZkStdin()
    write_stdin(length, fixtures_dir, stdin)
    return stdin


def execute_program(
    client: ProverClient,
    length: int,
    fixtures_dir: str | Path,
    program: Program = PROGRAM,
) -> ExecutionResult:
    stdin = build_stdin(length, fixtures_dir)
    public_values, report = client.execute(program, stdin)
    return ExecutionResult(
        length=length,
        public_values=public_values,
        outputs=decode_public_values(public_values),
        instruction_count=report.total_instruction_count(),
    )


def prove_program(
    client: ProverClient,
    length: int,
    fixtures_dir: str | Path,
    system: ProofSystem = ProofSystem.CORE,
    program: Program = PROGRAM,
) -> ProofResult:
    """
    Prove one guest run and verify the proof before returning it.

    Raises:
        ConfigurationError: If `length` is not supported.
        FixtureIOError: If the inputs cannot be loaded.
        VerificationError: If the fresh proof does not verify.
    """
    stdin = build_stdin(length, fixtures_dir)
    pk, vk = client.setup(program)

    artifact = client.prove(pk, stdin, system)
    print("Successfully generated proof!")

    client.verify(artifact, vk)
    print("Successfully verified proof!")

    return ProofResult(
        length=length,
        artifact=artifact,
        vk=vk,
        outputs=decode_public_values(artifact.public_values),
    )


def generate_fixture(
    client: ProverClient,
    length: int,
    fixtures_dir: str | Path,
    system: ProofSystem,
    out_dir: str | Path,
    program: Program = PROGRAM,
) -> Path:
    if not system.onchain:
        raise ConfigurationError(
            f"fixtures need an on-chain proof system, got {system.value}"
        )
    result = prove_program(client, length, fixtures_dir, system, program)
    path = create_proof_fixture(result.artifact, result.vk, out_dir)
    logger.info("wrote %s fixture to %s", system.value, path)
    return path
