"""Combined key splitting for AES-CBC-HMAC-SHA2."""

from __future__ import annotations

from ..errors import KeyLengthMismatchError
from .utils import BytesLike, to_bytes


def split_key(key: BytesLike, mac_key_len: int, enc_key_len: int) -> tuple[bytes, bytes]:
    """Split a combined key into its MAC and encryption halves.

    The layout is fixed by the standard:
      K = MAC_KEY || ENC_KEY

    Args:
        key: The combined key.
        mac_key_len: MAC key length in octets.
        enc_key_len: Encryption key length in octets.

    Returns:
        Tuple of (mac_key, enc_key).

    Raises:
        TypeError: If key is not bytes-like.
        KeyLengthMismatchError: If len(key) != mac_key_len + enc_key_len.
    """
    key = to_bytes(key, "key")
    expected = mac_key_len + enc_key_len
    if len(key) != expected:
        raise KeyLengthMismatchError(expected, len(key))
    return key[:mac_key_len], key[mac_key_len:]
