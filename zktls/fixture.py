# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# fixture.py

"""
Write verified proofs as fixtures for the on-chain verifier tests.

One file per proof system, overwritten on every run:

    <out_dir>/groth16-fixture.json
    <out_dir>/plonk-fixture.json

each holding

    {"proof": "0x<selector || proof>", "vkey": "0x<32-byte program vkey>"}
"""

from dataclasses import dataclass
from pathlib import Path

from zktls.errors import FixtureIOError, SerializationError
from zktls.files import save_json
from zktls.prover import ProgramVerifyingKey, ProofArtifact, ProofSystem


@dataclass(frozen=True)
class ProofFixture:
    vkey: str
    proof: str

    def to_dict(self) -> dict[str, str]:
        return {"vkey": self.vkey, "proof": self.proof}


def fixture_path(out_dir: str | Path, system: ProofSystem) -> Path:
    return Path(out_dir) / f"{system.value}-fixture.json"


def create_proof_fixture(
    artifact: ProofArtifact, vk: ProgramVerifyingKey, out_dir: str | Path
) -> Path:
    """
    Project a verified proof onto `{vkey, proof}` and write it to disk.

    The caller must have verified `artifact` against `vk` already; this
    function does not re-check it.

    Args:
        artifact: A groth16 or plonk proof.
        vk: The program verifying key the proof was checked against.
        out_dir: Fixture directory, created if missing.

    Returns:
        The path of the written fixture.

    Raises:
        SerializationError: If the proof has no on-chain encoding.
        FixtureIOError: If the fixture file cannot be written.
    """
    fixture = ProofFixture(
        vkey=vk.bytes32(),
        proof="0x" + artifact.to_bytes().hex(),
    )

    # The verification key pins the program, independent of its inputs.
    print(f"Verification Key: {fixture.vkey}")

    # The proof shows the program ran on inputs that led to the public values.
    print(f"Proof Bytes: {fixture.proof}")

    path = fixture_path(out_dir, artifact.system)
    try:
        save_json(path, fixture.to_dict())
    except TypeError as e:
        raise SerializationError(f"cannot encode fixture: {e}") from e
    except OSError as e:
        raise FixtureIOError(f"cannot write fixture {path}: {e}") from e
    return path
