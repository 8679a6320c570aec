"""Error hierarchy for cbchmac."""

from __future__ import annotations


class CbcHmacError(Exception):
    """Base exception for all cbchmac errors."""

    pass


class InvalidKeyLengthError(CbcHmacError, ValueError):
    """Combined key does not match the algorithm's MAC + ENC key length.

    Attributes:
        expected: The required key length in octets.
        actual: The length of the key that was supplied.
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Key must be {expected} octets long, got {actual}")


# Name used by the key splitter
KeyLengthMismatchError = InvalidKeyLengthError


class InvalidIVLengthError(CbcHmacError, ValueError):
    """Initialization vector is not exactly 16 octets."""

    pass


class AADTooLongError(CbcHmacError, ValueError):
    """Associated data bit length does not fit in the 32-bit AL field."""

    pass


class InvalidStateError(CbcHmacError):
    """Operation called in a lifecycle state that does not allow it."""

    pass


class MissingAuthTagError(CbcHmacError):
    """Decrypt processing started before an expected tag was supplied."""

    pass


class AuthenticationFailedError(CbcHmacError):
    """Authentication tag mismatch.

    CRITICAL: Any plaintext returned by earlier update() calls on the same
    decryptor is unauthenticated and must be discarded.
    """

    pass


class UnknownAlgorithmError(CbcHmacError, LookupError):
    """Algorithm, cipher or hash name is not supported."""

    pass
