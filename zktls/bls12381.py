# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import secrets
from typing import cast
from eth_typing import BLSPubkey
from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1
from py_ecc.optimized_bls12_381 import (
    G1,
    Z1,
    add,
    curve_order,
    multiply,
)
from zktls.constants import G1_COMPRESSED_SIZE, SCALAR_SIZE


def rng() -> int:
    """
    Sample a uniformly random non-zero scalar using the secrets module.

    Returns:
        int: A random number below the curve order.
    """
    return secrets.randbelow(curve_order - 1) + 1


def g1_point(scalar: int) -> str:
    """
    Generates a BLS12-381 point from the G1 generator using scalar multiplication
    and returns it in compressed format.

    Args:
        scalar (int): The scalar value for multiplication.

    Returns:
        str: The resulting BLS12-381 G1 point in compressed hex format.
    """
    return G1_to_pubkey(multiply(G1, scalar)).hex()


def uncompress(element: str) -> tuple:
    """
    Uncompresses a hexadecimal string to a BLS12-381 G1 point.

    Raises:
        ValueError: If the string is not a valid compressed G1 point.
    """
    raw = bytes.fromhex(element)
    if len(raw) != G1_COMPRESSED_SIZE:
        raise ValueError(
            f"G1 compressed must be {G1_COMPRESSED_SIZE} bytes, got {len(raw)}"
        )
    return pubkey_to_G1(cast(BLSPubkey, raw))


def compress(element: tuple) -> str:
    """Compresses a BLS12-381 G1 point to a hexadecimal string."""
    return G1_to_pubkey(element).hex()


def scale(element: str, scalar: int) -> str:
    """
    Scales a BLS12-381 point by a given scalar using scalar multiplication.

    Args:
        element (str): The compressed point to be scaled.
        scalar (int): The scalar value for multiplication.

    Returns:
        str: The resulting scaled point.
    """
    return compress(multiply(uncompress(element), scalar))


def combine(left_element: str, right_element: str) -> str:
    """
    Combines two BLS12-381 points using addition.

    Args:
        left_element (str): A compressed point.
        right_element (str): A compressed point.

    Returns:
        str: The resulting combined point.
    """
    return compress(add(uncompress(left_element), uncompress(right_element)))


def to_int(hash_digest: str) -> int:
    """
    Interpret a hex digest as a scalar reduced modulo the curve order.

        c = int(hash_digest, 16) mod curve_order

    Args:
        hash_digest: Hex-encoded digest string (no '0x' prefix expected).

    Returns:
        An integer scalar in the range [0, curve_order - 1].
    """
    return int(hash_digest, 16) % curve_order


def scalar_to_bytes(integer: int) -> bytes:
    """
    Encode a scalar as a fixed-width 32-byte big-endian string.

    Proof encodings need a fixed layout, so unlike a minimal encoding the
    result is always `SCALAR_SIZE` bytes long.
    """
    return (integer % curve_order).to_bytes(SCALAR_SIZE, "big")


def scalar_from_bytes(raw: bytes) -> int:
    if len(raw) != SCALAR_SIZE:
        raise ValueError(f"scalar must be {SCALAR_SIZE} bytes, got {len(raw)}")
    value = int.from_bytes(raw, "big")
    if value >= curve_order:
        raise ValueError("scalar is not reduced modulo the curve order")
    return value


# identity element
g1_identity = compress(Z1)

# curve order
curve_order = curve_order
