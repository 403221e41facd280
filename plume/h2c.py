"""
Try-and-increment hash-to-curve on secp256k1.

    for ctr in 0 … 255:
        x = SHA-256( DST ‖ m ‖ pk ‖ ctr )
        if x < p and x³ + 7 is a square mod p:
            return (x, even y)

Each attempt succeeds with probability ≈ 1/2, so exhausting all 256
counters happens with probability 2⁻²⁵⁶.  The public key enters in its
33-byte compressed encoding, which binds the output point (and so the
nullifier) to the signer.

The output has no known discrete log with respect to *G*, which the
nullifier's unlinkability depends on.
"""

from __future__ import annotations

import hashlib
import logging

from .curve import Point, FIELD_PRIME
from .errors import HashToCurveError

logger = logging.getLogger(__name__)

HASH_TO_CURVE_DST = b"PLUME/secp256k1/try-and-increment/v1"
MAX_TRY_AND_INCREMENT = 256


def hash_to_curve(message: bytes, public_key: Point) -> Point:
    """
    Map ``(message, public_key)`` to a secp256k1 point.

    Raises
    ------
    HashToCurveError
        If *message* is not bytes-like, *public_key* is not a finite
        ``Point``, or no counter yields a valid x-coordinate.
    """
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise HashToCurveError(
            f"message must be bytes, got {type(message).__name__}"
        )
    if not isinstance(public_key, Point):
        raise HashToCurveError(
            f"public key must be a Point, got {type(public_key).__name__}"
        )
    if public_key.is_inf():
        raise HashToCurveError("public key is the point at infinity")

    prefix = HASH_TO_CURVE_DST + bytes(message) + public_key.to_bytes_compressed()
    for counter in range(MAX_TRY_AND_INCREMENT):
        digest = hashlib.sha256(prefix + counter.to_bytes(1, "big")).digest()
        x = int.from_bytes(digest, "big")
        if x >= FIELD_PRIME:
            continue
        point = Point.lift_x(x)
        if point is not None:
            logger.debug("hash_to_curve succeeded at counter %d", counter)
            return point

    raise HashToCurveError(
        f"no curve point found after {MAX_TRY_AND_INCREMENT} attempts"
    )
