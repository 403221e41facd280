"""
PLUME: Pseudonymously Linked Unique Message Entity.

A deterministic nullifier signature on secp256k1.  Alongside an
ordinary proof of knowledge of the secret key, every signature carries
a *nullifier*  nul = sk · HashToCurve(m, pk)  that is:

- **deterministic** — the same key signing the same message always
  yields the same nullifier, although the signature itself is
  randomised;
- **unlinkable** — without *sk* the nullifier cannot be tied to *pk*.

This makes one-time-use tokens possible: prove you hold a credential,
and let the nullifier stop the same credential being used twice.

Two transcript layouts exist (``PlumeVersion.V1``, ``PlumeVersion.V2``).
Signer and verifier must agree on one; they do not verify each other.

Quick start
-----------
::

    from plume import Parameters, PlumeVersion, keygen, sign, verify

    pp = Parameters()
    pk, sk = keygen(pp)

    sig = sign(pp, None, (pk, sk), b"vote:42", PlumeVersion.V2)
    assert verify(sig, pp, pk, b"vote:42", PlumeVersion.V2)

    print(sig.nullifier.to_bytes().hex())
"""

__version__ = "0.1.0"

# ── core types ──────────────────────────────────────────────────────────
from .curve import Scalar, Point, G, ORDER

# ── errors ──────────────────────────────────────────────────────────────
from .errors import PlumeError, HashToCurveError

# ── hashing ─────────────────────────────────────────────────────────────
from .hash import PlumeVersion, compute_c, transcript, hash_to_scalar
from .h2c import hash_to_curve

# ── signatures ──────────────────────────────────────────────────────────
from .signature import (
    Parameters,
    PlumeSignature,
    PublicKey,
    SecretKeyMaterial,
    keygen,
    compute_h,
    sign_with_r,
    sign,
    verify,
)

__all__ = [
    # version
    "__version__",
    # core
    "Scalar", "Point", "G", "ORDER",
    # errors
    "PlumeError", "HashToCurveError",
    # hashing
    "PlumeVersion", "compute_c", "transcript", "hash_to_scalar",
    "hash_to_curve",
    # signatures
    "Parameters", "PlumeSignature", "PublicKey", "SecretKeyMaterial",
    "keygen", "compute_h", "sign_with_r", "sign", "verify",
]
