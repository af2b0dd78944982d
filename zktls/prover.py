# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# prover.py

"""
Key setup, proof generation and local verification for the guest program.

`ProverClient` runs the guest, then hands the committed public values to a
backend that produces the proof for the selected `ProofSystem`.

Backends:

- `cpu`: a Fiat-Shamir Schnorr argument over BLS12-381 G1. Setup samples
  a private program key once and keeps it in the keys directory:

      x  <- random scalar, stored in <keys_dir>/<program>.pk.json
      U  = [x]G

  The verifying key carries only the program digest and U, so holding it
  does not let anyone prove. Proving samples r, sets R = [r]G and

      c  = H(PROOF_DOMAIN_TAG || vkey || system || R || sha256(public values))
      z  = r + c*x mod q

  and the verifier checks [z]G == R + [c]U. The proof binds program,
  backend and public values; it does not attest to the execution trace.

- `mock`: no cryptography; proofs are empty and always verify.

Proof layouts (before the on-chain selector):

    core, compressed, groth16:  z (32) || R (48)
    plonk:                      z (32) || R (48) || sha256(public values) (32)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from zktls.bls12381 import (
    combine,
    curve_order,
    g1_point,
    rng,
    scalar_from_bytes,
    scalar_to_bytes,
    scale,
    to_int,
    uncompress,
)
from zktls.config import Settings
from zktls.constants import (
    DIGEST_SIZE,
    G1_COMPRESSED_SIZE,
    PROOF_DOMAIN_TAG,
    PROVING_KEY_SUFFIX,
    SCALAR_SIZE,
    VKEY_DOMAIN_TAG,
)
from zktls.errors import (
    ConfigurationError,
    FixtureIOError,
    SerializationError,
    VerificationError,
)
from zktls.files import load_json, save_json
from zktls.hashing import generate, sha256, sha256_hex
from zktls.runtime import ExecutionReport, Program, execute
from zktls.stream import PublicValues, ZkStdin

logger = logging.getLogger(__name__)


class ProofSystem(Enum):
    CORE = "core"
    COMPRESSED = "compressed"
    GROTH16 = "groth16"
    PLONK = "plonk"

    @property
    def onchain(self) -> bool:
        return self in (ProofSystem.GROTH16, ProofSystem.PLONK)


# 4-byte prefix the on-chain gateway uses to route a proof to its verifier
VERIFIER_SELECTORS = {
    system: sha256(f"zktls-{system.value}-verifier-v1".encode("utf-8"))[:4]
    for system in ProofSystem
    if system.onchain
}


@dataclass(frozen=True)
class ProgramVerifyingKey:
    program_digest: str
    point: str

    def bytes32(self) -> str:
        """The fixed-size commitment an on-chain verifier pins the program to."""
        return "0x" + sha256_hex(
            bytes.fromhex(VKEY_DOMAIN_TAG + self.program_digest + self.point)
        )


@dataclass(frozen=True)
class ProvingKey:
    program: Program
    secret: int
    vk: ProgramVerifyingKey


@dataclass(frozen=True)
class ProofArtifact:
    system: ProofSystem
    proof: bytes
    public_values: PublicValues

    def to_bytes(self) -> bytes:
        """
        Encode the proof for the on-chain verifier of its proof system.

        Raises:
            SerializationError: For core and compressed proofs, which have
                no on-chain verifier.
        """
        if not self.system.onchain:
            raise SerializationError(
                f"{self.system.value} proofs cannot be encoded for on-chain "
                "verification; use groth16 or plonk"
            )
        return VERIFIER_SELECTORS[self.system] + self.proof


def keys_from_secret(
    program: Program, secret: int
) -> tuple[ProvingKey, ProgramVerifyingKey]:
    if not 0 < secret < curve_order:
        raise ConfigurationError(f"program {program.name}: proving key out of range")
    vk = ProgramVerifyingKey(program_digest=program.digest, point=g1_point(secret))
    return ProvingKey(program=program, secret=secret, vk=vk), vk


def proving_key_path(keys_dir: str | Path, program: Program) -> Path:
    return Path(keys_dir) / f"{program.name}{PROVING_KEY_SUFFIX}"


def load_secret(path: Path, program: Program) -> int | None:
    """
    Read the stored proving key for `program`.

    Returns:
        The secret scalar, or None if there is no key for this program
        build yet.

    Raises:
        FixtureIOError: If the key file exists but cannot be used.
    """
    if not path.exists():
        return None
    try:
        data = load_json(path)
        digest = data["program_digest"]
        secret = int(data["secret"], 16)
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise FixtureIOError(f"cannot read proving key {path}: {e}") from e

    if digest != program.digest:
        logger.info("proving key %s belongs to another program build", path)
        return None
    if not 0 < secret < curve_order:
        raise FixtureIOError(f"proving key {path} is out of range")
    return secret


def save_secret(path: Path, program: Program, secret: int) -> None:
    try:
        save_json(
            path,
            {
                "program": program.name,
                "program_digest": program.digest,
                "secret": scalar_to_bytes(secret).hex(),
            },
        )
    except OSError as e:
        raise FixtureIOError(f"cannot write proving key {path}: {e}") from e
    logger.info("wrote new proving key to %s", path)


def fiat_shamir_heuristic(
    vk: ProgramVerifyingKey,
    system: ProofSystem,
    commitment: str,
    public_values: PublicValues,
) -> int:
    return to_int(
        generate(
            PROOF_DOMAIN_TAG
            + vk.bytes32()[2:]
            + system.value.encode("utf-8").hex()
            + commitment
            + public_values.hash().hex()
        )
    )


def proof_size(system: ProofSystem) -> int:
    size = SCALAR_SIZE + G1_COMPRESSED_SIZE
    if system is ProofSystem.PLONK:
        size += DIGEST_SIZE
    return size


class CpuProver:
    name = "cpu"

    def prove(
        self, pk: ProvingKey, public_values: PublicValues, system: ProofSystem
    ) -> bytes:
        r = rng()
        commitment = g1_point(r)
        c = fiat_shamir_heuristic(pk.vk, system, commitment, public_values)
        z = (r + c * pk.secret) % curve_order

        proof = scalar_to_bytes(z) + bytes.fromhex(commitment)
        if system is ProofSystem.PLONK:
            proof += public_values.hash()
        return proof

    def verify(self, artifact: ProofArtifact, vk: ProgramVerifyingKey) -> None:
        proof = artifact.proof
        expected = proof_size(artifact.system)
        if len(proof) != expected:
            raise VerificationError(
                f"{artifact.system.value} proof must be {expected} bytes, got {len(proof)}"
            )

        try:
            z = scalar_from_bytes(proof[:SCALAR_SIZE])
            commitment = proof[SCALAR_SIZE : SCALAR_SIZE + G1_COMPRESSED_SIZE].hex()
            uncompress(commitment)
        except ValueError as e:
            raise VerificationError(f"malformed proof: {e}") from e

        if artifact.system is ProofSystem.PLONK:
            if proof[SCALAR_SIZE + G1_COMPRESSED_SIZE :] != artifact.public_values.hash():
                raise VerificationError("public values digest mismatch")

        c = fiat_shamir_heuristic(vk, artifact.system, commitment, artifact.public_values)
        if g1_point(z) != combine(commitment, scale(vk.point, c)):
            raise VerificationError("proof does not verify against the verifying key")


class MockProver:
    name = "mock"

    def prove(
        self, pk: ProvingKey, public_values: PublicValues, system: ProofSystem
    ) -> bytes:
        return b""

    def verify(self, artifact: ProofArtifact, vk: ProgramVerifyingKey) -> None:
        if artifact.proof:
            raise VerificationError("mock prover only accepts empty proofs")


BACKENDS = {
    CpuProver.name: CpuProver,
    MockProver.name: MockProver,
}


class ProverClient:
    """
    Args:
        backend: The proof backend.
        keys_dir: Where proving keys persist between runs. Without one,
            keys live only as long as the client.
    """

    def __init__(
        self, backend: CpuProver | MockProver, keys_dir: str | Path | None = None
    ) -> None:
        self.backend = backend
        self.keys_dir = Path(keys_dir) if keys_dir is not None else None
        self._secrets: dict[str, int] = {}

    @classmethod
    def from_env(cls, settings: Settings | None = None) -> "ProverClient":
        settings = settings if settings is not None else Settings.from_env()
        try:
            backend = BACKENDS[settings.prover]()
        except KeyError:
            raise ConfigurationError(f"unknown prover: {settings.prover}") from None
        logger.info("using %s prover", backend.name)
        return cls(backend, settings.keys_dir)

    def setup(self, program: Program) -> tuple[ProvingKey, ProgramVerifyingKey]:
        """
        Load or create the key pair for `program`.

        Raises:
            FixtureIOError: If a stored proving key cannot be read or a new
                one cannot be written.
        """
        secret = self._secrets.get(program.digest)
        if secret is None:
            secret = self._load_or_create_secret(program)
            self._secrets[program.digest] = secret
        pk, vk = keys_from_secret(program, secret)
        logger.info("setup %s: vkey %s", program.name, vk.bytes32())
        return pk, vk

    def _load_or_create_secret(self, program: Program) -> int:
        if self.keys_dir is None:
            return rng()
        path = proving_key_path(self.keys_dir, program)
        secret = load_secret(path, program)
        if secret is None:
            secret = rng()
            save_secret(path, program, secret)
        return secret

    def execute(
        self, program: Program, stdin: ZkStdin
    ) -> tuple[PublicValues, ExecutionReport]:
        return execute(program, stdin)

    def prove(
        self, pk: ProvingKey, stdin: ZkStdin, system: ProofSystem = ProofSystem.CORE
    ) -> ProofArtifact:
        public_values, _ = execute(pk.program, stdin)
        logger.info("generating %s proof", system.value)
        proof = self.backend.prove(pk, public_values, system)
        return ProofArtifact(system=system, proof=proof, public_values=public_values)

    def verify(self, artifact: ProofArtifact, vk: ProgramVerifyingKey) -> None:
        """
        Check `artifact` against `vk`.

        Raises:
            VerificationError: If the proof is malformed or does not verify.
        """
        self.backend.verify(artifact, vk)
        logger.info("verified %s proof", artifact.system.value)
