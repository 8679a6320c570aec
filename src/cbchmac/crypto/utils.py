"""Byte input helpers for cbchmac."""

from __future__ import annotations

BytesLike = bytes | bytearray | memoryview


def to_bytes(value: BytesLike, name: str) -> bytes:
    """Coerce a bytes-like value to immutable bytes.

    Args:
        value: The value to convert.
        name: Parameter name used in the error message.

    Returns:
        The value as bytes.

    Raises:
        TypeError: If the value is not bytes-like.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
