# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only


class ZktlsError(Exception):
    """Base class for every failure of the proving pipeline."""


class ConfigurationError(ZktlsError):
    """Bad run mode, unsupported dataset size or invalid environment."""


class FixtureIOError(ZktlsError):
    """A fixture source is missing or cannot be parsed."""


class VerificationError(ZktlsError):
    """A proof did not verify against the given verifying key."""


class AttestationError(VerificationError):
    """An attestation record was rejected by the verification library."""


class SerializationError(ZktlsError):
    """A value could not be encoded for a fixture or the on-chain verifier."""


class SchemaError(SerializationError):
    """A stream value does not match the shared I/O schema."""
