"""
Exceptions raised by PLUME.

A signature that fails verification is *not* an error: ``verify``
returns ``False`` for it.  Exceptions are reserved for inputs the
protocol cannot process at all.
"""


class PlumeError(Exception):
    """Base class for all PLUME exceptions."""


class HashToCurveError(PlumeError, ValueError):
    """
    The ``(message, public_key)`` pair cannot be hashed to the curve.

    Raised for malformed input encodings.  Not retryable: the same input
    fails the same way every time.
    """
