"""AL field encoding for AES-CBC-HMAC-SHA2."""

from __future__ import annotations

from ..constants import AL_SIZE, MAX_AAD_BITS
from ..errors import AADTooLongError


def encode_aad_length(num_octets: int) -> bytes:
    """Encode the bit length of associated data as the 8-octet AL field.

    Args:
        num_octets: Length of the associated data in octets.

    Returns:
        The bit length as a 64-bit big-endian integer.

    Raises:
        ValueError: If num_octets is negative.
        AADTooLongError: If the bit length does not fit in 32 bits.
    """
    if num_octets < 0:
        raise ValueError(f"AAD length cannot be negative: {num_octets}")
    bits = num_octets * 8
    if bits > MAX_AAD_BITS:
        raise AADTooLongError(
            f"AAD of {num_octets} octets exceeds the maximum of {MAX_AAD_BITS // 8} octets"
        )
    return bits.to_bytes(AL_SIZE, "big")
