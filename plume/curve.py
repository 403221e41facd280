"""
secp256k1 group and scalar-field elements for PLUME.

Point arithmetic (scalar multiplication, addition) runs in libsecp256k1
through ``coincurve``; scalar-field arithmetic is plain modular Python,
reduced on every operation so no intermediate ever leaves Z_q.

Points serialise to the 33-byte SEC 1 compressed form.  That encoding is
what goes into the Fiat-Shamir transcript, so it must stay byte-exact.

Install
-------
    pip install coincurve>=18.0.0

References
----------
- SEC 1 v2 §2.3.3    Elliptic-Curve-Point-to-Octet-String conversion
- SEC 2 v2 §2.4.1    secp256k1 domain parameters
"""

from __future__ import annotations

import secrets
from typing import Any, Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
FIELD_PRIME = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
CURVE_B = 7
SCALAR_BYTES = 32
COMPRESSED_BYTES = 33


# ── Scalar  (Z_q arithmetic) ────────────────────────────────────────────
class Scalar:
    """Element of the scalar field  Z_q  where *q* = ``ORDER``."""

    __slots__ = ("_v",)

    def __init__(self, value: int) -> None:
        self._v = value % ORDER

    @classmethod
    def random(cls, rng: Optional[Any] = None) -> Scalar:
        """
        Uniform in [1, q-1] via rejection sampling.

        *rng* is any object with ``getrandbits(k)`` (``random.Random``,
        ``secrets.SystemRandom``).  ``None`` draws from the OS CSPRNG.
        Callers sharing one *rng* across threads must synchronise it.
        """
        while True:
            if rng is None:
                c = int.from_bytes(secrets.token_bytes(SCALAR_BYTES), "big")
            else:
                c = rng.getrandbits(8 * SCALAR_BYTES)
            if 0 < c < ORDER:
                return cls(c)

    @classmethod
    def from_bytes(cls, data: bytes) -> Scalar:
        """Strict 32-byte big-endian decoding; rejects values >= q."""
        if len(data) != SCALAR_BYTES:
            raise ValueError(f"need {SCALAR_BYTES} bytes, got {len(data)}")
        v = int.from_bytes(data, "big")
        if v >= ORDER:
            raise ValueError("scalar out of range")
        return cls(v)

    @classmethod
    def from_bytes_reduce(cls, data: bytes) -> Scalar:
        """Hash-output safe: big-endian, any length, reduced modulo *q*."""
        return cls(int.from_bytes(data, "big"))

    def to_bytes(self) -> bytes:
        return self._v.to_bytes(SCALAR_BYTES, "big")

    @property
    def value(self) -> int:
        return self._v

    def is_zero(self) -> bool:
        return self._v == 0

    # arithmetic -------------------------------------------------------------
    def __add__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar((self._v + o._v) % ORDER)

    def __sub__(self, o: Scalar) -> Scalar:
        if not isinstance(o, Scalar):
            return NotImplemented
        return Scalar((self._v - o._v) % ORDER)

    def __mul__(self, o):
        if isinstance(o, Scalar):
            return Scalar((self._v * o._v) % ORDER)
        if isinstance(o, Point):
            return o.mul(self)
        return NotImplemented

    def __neg__(self) -> Scalar:
        return Scalar((-self._v) % ORDER)

    def __eq__(self, o: object) -> bool:
        if isinstance(o, Scalar):
            return self._v == o._v
        if isinstance(o, int):
            return self._v == o % ORDER
        return False

    def __hash__(self) -> int:
        return hash(self._v)

    def __repr__(self) -> str:
        h = hex(self._v)
        return f"Scalar(0x{h[2:10]}…)" if len(h) > 14 else f"Scalar({h})"


# ── Point  (secp256k1 group element via libsecp256k1) ───────────────────
class Point:
    """
    Point on secp256k1.

    The identity is a flag rather than a ``coincurve.PublicKey`` because
    libsecp256k1 cannot represent it.  It encodes as 33 zero bytes, which
    never collides with a valid compressed point.
    """

    __slots__ = ("_pk", "_inf")

    def __init__(self, *, pk: Optional[_PK] = None, infinity: bool = False):
        self._pk: Optional[_PK] = pk
        self._inf: bool = infinity

    # constructors -----------------------------------------------------------
    @classmethod
    def generator(cls) -> Point:
        """Standard base point *G*."""
        return cls(pk=_SK(b"\x00" * 31 + b"\x01").public_key)

    @classmethod
    def identity(cls) -> Point:
        return cls(infinity=True)

    @classmethod
    def lift_x(cls, x: int) -> Optional[Point]:
        """
        Point with x-coordinate *x* and even *y*, or ``None`` if
        x³ + 7 is not a square mod p.
        """
        if not 0 <= x < FIELD_PRIME:
            return None
        y_sq = (pow(x, 3, FIELD_PRIME) + CURVE_B) % FIELD_PRIME
        # p ≡ 3 (mod 4), so a square root is y_sq^{(p+1)/4}
        y = pow(y_sq, (FIELD_PRIME + 1) // 4, FIELD_PRIME)
        if (y * y) % FIELD_PRIME != y_sq:
            return None
        return cls(pk=_PK(b"\x02" + x.to_bytes(32, "big")))

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """
        Deserialise SEC 1 compressed (33 B) or uncompressed (65 B).

        Raises ``ValueError`` for anything that is not a curve point.
        """
        if len(data) not in (COMPRESSED_BYTES, 65):
            raise ValueError(f"bad point length {len(data)}")
        if all(b == 0 for b in data):
            return cls.identity()
        return cls(pk=_PK(bytes(data)))

    # serialisation ----------------------------------------------------------
    def to_bytes_compressed(self) -> bytes:
        if self._inf:
            return b"\x00" * COMPRESSED_BYTES
        return self._pk.format(compressed=True)  # type: ignore[union-attr]

    def to_bytes(self) -> bytes:
        return self.to_bytes_compressed()

    @property
    def x(self) -> int:
        if self._inf:
            return 0
        return int.from_bytes(self.to_bytes_compressed()[1:], "big")

    def is_inf(self) -> bool:
        return self._inf

    # group operations -------------------------------------------------------
    def mul(self, s: Scalar) -> Point:
        """Scalar multiplication  s · self  (C speed)."""
        if self._inf or s.is_zero():
            return Point.identity()
        copy = _PK(self._pk.format())  # type: ignore[union-attr]
        return Point(pk=copy.multiply(s.to_bytes()))

    def __neg__(self) -> Point:
        if self._inf:
            return self
        raw = bytearray(self._pk.format(compressed=True))  # type: ignore
        raw[0] ^= 0x01            # 0x02 ↔ 0x03 flips y parity
        return Point(pk=_PK(bytes(raw)))

    def __add__(self, o: Point) -> Point:
        if not isinstance(o, Point):
            return NotImplemented
        if self._inf:
            return o
        if o._inf:
            return self
        # libsecp256k1 refuses to return the identity from P + (-P)
        if self == -o:
            return Point.identity()
        return Point(pk=_PK.combine_keys(
            [self._pk, o._pk]))  # type: ignore[list-item]

    def __sub__(self, o: Point) -> Point:
        return self + (-o)

    def __rmul__(self, s) -> Point:
        if isinstance(s, Scalar):
            return self.mul(s)
        if isinstance(s, int):
            return self.mul(Scalar(s))
        return NotImplemented

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf or o._inf:
            return self._inf and o._inf
        return self.to_bytes_compressed() == o.to_bytes_compressed()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point(0x{self.x:064x})"[:42] + "…)"


# ── module-level generator ──────────────────────────────────────────────
G = Point.generator()
