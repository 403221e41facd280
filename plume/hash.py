"""
Fiat-Shamir challenge derivation for PLUME.

The challenge is  c = SHA-256(transcript) mod q, where the transcript is
a plain concatenation of 33-byte compressed points:

    V1:  g ‖ pk ‖ h ‖ nul ‖ g^r ‖ z
    V2:  nul ‖ g^r ‖ z

No tags, separators or length prefixes.  Every point has a fixed-length
encoding, so the concatenation is unambiguous, and any extra framing
would break interoperability with other PLUME implementations.
"""

from __future__ import annotations

import hashlib
from enum import Enum
from typing import Sequence

from .curve import Scalar, Point


class PlumeVersion(Enum):
    """Transcript layout used for the challenge.  Not interchangeable."""

    V1 = 1
    V2 = 2


def hash_to_scalar(data: bytes) -> Scalar:
    """SHA-256, read big-endian and reduced modulo *q*."""
    return Scalar.from_bytes_reduce(hashlib.sha256(data).digest())


def encode_points(points: Sequence[Point]) -> bytes:
    return b"".join(p.to_bytes_compressed() for p in points)


def transcript(
    version: PlumeVersion,
    g_point: Point,
    pk: Point,
    hashed_to_curve: Point,
    nullifier: Point,
    r_point: Point,
    hashed_to_curve_r: Point,
) -> bytes:
    """Challenge preimage for *version*."""
    if version is PlumeVersion.V1:
        return encode_points((
            g_point, pk, hashed_to_curve, nullifier, r_point,
            hashed_to_curve_r,
        ))
    if version is PlumeVersion.V2:
        return encode_points((nullifier, r_point, hashed_to_curve_r))
    raise ValueError(f"unknown PLUME version: {version!r}")


def compute_c(
    version: PlumeVersion,
    g_point: Point,
    pk: Point,
    hashed_to_curve: Point,
    nullifier: Point,
    r_point: Point,
    hashed_to_curve_r: Point,
) -> Scalar:
    r"""
    Challenge scalar  c = H(transcript) mod q.

    V2 ignores *g_point*, *pk* and *hashed_to_curve*; they are accepted
    so both versions share one call signature.
    """
    return hash_to_scalar(transcript(
        version, g_point, pk, hashed_to_curve, nullifier, r_point,
        hashed_to_curve_r,
    ))
