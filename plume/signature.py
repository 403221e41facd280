"""
PLUME nullifier signatures: key generation, signing and verification.

A PLUME signature proves knowledge of  sk  with  pk = sk·g  and, in the
same Fiat-Shamir proof, that the nullifier  nul = sk·h  uses that same
sk, where  h = HashToCurve(m, pk).

**Sign** (message *m*, key pair (pk, sk), nonce r ←$ Z_q):

    h   = HashToCurve(m, pk)
    nul = sk · h               (deterministic in (sk, m))
    g^r = r · g,   z = r · h
    c   = H(transcript_v(g, pk, h, nul, g^r, z))
    s   = r + sk · c

**Verify** (non-zero-knowledge: *pk* is public):

    s·g − c·pk   == g^r
    s·h − c·nul  == z
    H(transcript_v(…)) == c

The signature is  (z, g^r, s, c, nul).  Only  r  is random, so the
nullifier is identical across repeated signings of the same message.

References
----------
- Gupta, Gurkan (2022). "PLUME: An ECDSA Nullifier Scheme for Unique
  Pseudonymity within Zero Knowledge Proofs."  ePrint 2022/1255.
- Chaum & Pedersen (1992). "Wallet Databases with Observers."
  CRYPTO 1992.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .curve import Scalar, Point, G, SCALAR_BYTES, COMPRESSED_BYTES
from .hash import PlumeVersion, compute_c
from .h2c import hash_to_curve

logger = logging.getLogger(__name__)

PublicKey = Point
SecretKeyMaterial = Scalar
KeyPair = Tuple[PublicKey, SecretKeyMaterial]

SIGNATURE_BYTES = 3 * COMPRESSED_BYTES + 2 * SCALAR_BYTES


# ── data structures ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Parameters:
    """Public parameters: the group generator *g*."""

    g_point: Point = G

    def to_bytes(self) -> bytes:
        return self.g_point.to_bytes_compressed()

    @classmethod
    def from_bytes(cls, data: bytes) -> Parameters:
        if len(data) != COMPRESSED_BYTES:
            raise ValueError(
                f"expected {COMPRESSED_BYTES} bytes, got {len(data)}"
            )
        g_point = Point.from_bytes(data)
        if g_point.is_inf():
            raise ValueError("generator cannot be the point at infinity")
        return cls(g_point=g_point)


@dataclass(frozen=True)
class PlumeSignature:
    """
    A PLUME signature  (z, g^r, s, c, nul).

    Field order is the wire order used by ``to_bytes``.
    """

    hashed_to_curve_r: Point    # z   = r · h
    r_point: Point              # g^r = r · g
    s: Scalar                   # s   = r + sk · c
    c: Scalar                   # Fiat-Shamir challenge
    nullifier: Point            # nul = sk · h

    def to_bytes(self) -> bytes:
        """Serialise to 163 bytes: z ‖ g^r ‖ s ‖ c ‖ nul."""
        return (
            self.hashed_to_curve_r.to_bytes_compressed()
            + self.r_point.to_bytes_compressed()
            + self.s.to_bytes()
            + self.c.to_bytes()
            + self.nullifier.to_bytes_compressed()
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> PlumeSignature:
        if len(data) != SIGNATURE_BYTES:
            raise ValueError(
                f"expected {SIGNATURE_BYTES} bytes, got {len(data)}"
            )
        p = COMPRESSED_BYTES
        k = SCALAR_BYTES
        return cls(
            hashed_to_curve_r=Point.from_bytes(data[:p]),
            r_point=Point.from_bytes(data[p:2 * p]),
            s=Scalar.from_bytes(data[2 * p:2 * p + k]),
            c=Scalar.from_bytes(data[2 * p + k:2 * p + 2 * k]),
            nullifier=Point.from_bytes(data[2 * p + 2 * k:]),
        )

    def verify_non_zk(
        self,
        pp: Parameters,
        pk: PublicKey,
        message: bytes,
        version: PlumeVersion,
    ) -> bool:
        """Method form of :func:`verify`."""
        return verify(self, pp, pk, message, version)


# ── key generation ──────────────────────────────────────────────────────

def keygen(
    pp: Parameters,
    rng: Optional[Any] = None,
) -> Tuple[PublicKey, SecretKeyMaterial]:
    """Sample  sk ←$ Z_q  and return  (pk = sk·g, sk)."""
    secret_key = Scalar.random(rng)
    public_key = secret_key * pp.g_point
    return public_key, secret_key


def compute_h(pk: PublicKey, message: bytes) -> Point:
    """
    h = HashToCurve(m, pk).

    ``HashToCurveError`` propagates to the caller.
    """
    return hash_to_curve(message, pk)


# ── signing ─────────────────────────────────────────────────────────────

def sign_with_r(
    pp: Parameters,
    keypair: KeyPair,
    message: bytes,
    r_scalar: Scalar,
    version: PlumeVersion,
) -> PlumeSignature:
    """
    Sign *message* with caller-chosen nonce *r_scalar*.

    Reusing *r_scalar* for two different challenges reveals *sk*; use
    :func:`sign` unless reproducing known-answer vectors.
    """
    pk, sk = keypair
    g_point = pp.g_point
    r_point = r_scalar * g_point

    hashed_to_curve = compute_h(pk, message)
    hashed_to_curve_r = r_scalar * hashed_to_curve
    nullifier = sk * hashed_to_curve

    c = compute_c(
        version, g_point, pk, hashed_to_curve, nullifier, r_point,
        hashed_to_curve_r,
    )
    # stays in Z_q throughout
    s = r_scalar + sk * c

    logger.debug(
        "signed %d-byte message (%s), nullifier %s",
        len(message), version.name, nullifier.to_bytes().hex()[:16],
    )
    return PlumeSignature(
        hashed_to_curve_r=hashed_to_curve_r,
        r_point=r_point,
        s=s,
        c=c,
        nullifier=nullifier,
    )


def sign(
    pp: Parameters,
    rng: Optional[Any],
    keypair: KeyPair,
    message: bytes,
    version: PlumeVersion,
) -> PlumeSignature:
    """Sign *message* with a fresh nonce  r ←$ Z_q  drawn from *rng*."""
    r_scalar = Scalar.random(rng)
    return sign_with_r(pp, keypair, message, r_scalar, version)


# ── verification ────────────────────────────────────────────────────────

def verify(
    signature: PlumeSignature,
    pp: Parameters,
    pk: PublicKey,
    message: bytes,
    version: PlumeVersion,
) -> bool:
    """
    Verify *signature* on *message* under *pk*.

    Returns ``False`` for an invalid signature.  Raises
    ``HashToCurveError`` only when ``(message, pk)`` cannot be hashed,
    i.e. when verification could not be carried out at all.
    """
    hashed_to_curve = compute_h(pk, message)

    c_prime = compute_c(
        version, pp.g_point, pk, hashed_to_curve, signature.nullifier,
        signature.r_point, signature.hashed_to_curve_r,
    )

    # g^s · pk^{-c}  ==  g^r
    if signature.s * pp.g_point - signature.c * pk != signature.r_point:
        logger.debug("rejected: g^s · pk^-c != g^r")
        return False

    # h^s · nul^{-c}  ==  z
    lhs = (
        signature.s * hashed_to_curve
        - signature.c * signature.nullifier
    )
    if lhs != signature.hashed_to_curve_r:
        logger.debug("rejected: h^s · nul^-c != z")
        return False

    if c_prime != signature.c:
        logger.debug("rejected: challenge mismatch (%s)", version.name)
        return False

    return True
