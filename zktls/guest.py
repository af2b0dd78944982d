# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# guest.py

"""
The guest program: runs once per proof inside the proving machine.

It must stay deterministic and touch nothing but its two streams; the
prover re-executes it and any divergence breaks the proof.
"""

from zktls import attestation, schema
from zktls.constants import PROGRAM_NAME
from zktls.errors import AttestationError
from zktls.runtime import GuestIO, Program


def main(io: GuestIO) -> None:
    inputs = schema.read_inputs(io)

    try:
        inputs.verification_data.verify(inputs.verifying_key)
        verified = True
    except AttestationError:
        verified = False

    schema.commit_outputs(
        io,
        inputs.verifying_key,
        inputs.verification_data.get_records(),
        verified,
    )


PROGRAM = Program.from_entrypoint(PROGRAM_NAME, main, attestation, schema)
