"""Public entry points for cbchmac."""

from __future__ import annotations

import os

from .constants import IV_SIZE
from .crypto.cipher import Decryptor, Encryptor
from .crypto.utils import BytesLike, to_bytes
from .errors import AuthenticationFailedError
from .registry import DEFAULT_REGISTRY, AlgorithmRegistry


def create_cipher(
    algorithm: str,
    key: BytesLike,
    iv: BytesLike,
    *,
    registry: AlgorithmRegistry | None = None,
) -> Encryptor:
    """Create an encrypting context.

    Args:
        algorithm: Algorithm name, e.g. ``aes-128-cbc-hmac-sha-256``.
        key: Combined key, MAC_KEY || ENC_KEY.
        iv: 16-octet initialization vector.
        registry: Registry to resolve the name in. Defaults to the built-in table.

    Returns:
        A new Encryptor.

    Raises:
        UnknownAlgorithmError: If the algorithm is not supported.
        InvalidKeyLengthError: If the key has the wrong length.
        InvalidIVLengthError: If the IV is not 16 octets.

    Example:
        ```python
        cipher = create_cipher("aes-128-cbc-hmac-sha-256", key, iv)
        cipher.set_aad(b"header")
        ciphertext = cipher.update(plaintext) + cipher.finalize()
        tag = cipher.get_auth_tag()
        ```
    """
    params = (registry or DEFAULT_REGISTRY).resolve(algorithm)
    return Encryptor(params, key, iv)


def create_decipher(
    algorithm: str,
    key: BytesLike,
    iv: BytesLike,
    *,
    registry: AlgorithmRegistry | None = None,
) -> Decryptor:
    """Create a decrypting context.

    The expected tag must be supplied with set_auth_tag() before any data is
    processed. Plaintext from update() is provisional until finalize() returns.

    Raises:
        UnknownAlgorithmError: If the algorithm is not supported.
        InvalidKeyLengthError: If the key has the wrong length.
        InvalidIVLengthError: If the IV is not 16 octets.
    """
    params = (registry or DEFAULT_REGISTRY).resolve(algorithm)
    return Decryptor(params, key, iv)


def list_supported_algorithms(registry: AlgorithmRegistry | None = None) -> frozenset[str]:
    """Return the names of all supported algorithms."""
    return (registry or DEFAULT_REGISTRY).list_names()


def encrypt(
    algorithm: str,
    key: BytesLike,
    iv: BytesLike,
    plaintext: BytesLike,
    aad: BytesLike = b"",
    *,
    registry: AlgorithmRegistry | None = None,
) -> tuple[bytes, bytes]:
    """Encrypt a whole buffer.

    Returns:
        Tuple of (ciphertext, tag).
    """
    cipher = create_cipher(algorithm, key, iv, registry=registry)
    cipher.set_aad(aad)
    ciphertext = cipher.update(plaintext) + cipher.finalize()
    return ciphertext, cipher.get_auth_tag()


def decrypt(
    algorithm: str,
    key: BytesLike,
    iv: BytesLike,
    ciphertext: BytesLike,
    tag: BytesLike,
    aad: BytesLike = b"",
    *,
    registry: AlgorithmRegistry | None = None,
) -> bytes:
    """Decrypt and authenticate a whole buffer.

    Nothing is returned unless the tag verifies.

    Raises:
        AuthenticationFailedError: If the tag does not match.
    """
    decipher = create_decipher(algorithm, key, iv, registry=registry)
    decipher.set_aad(aad)
    decipher.set_auth_tag(tag)
    head = decipher.update(ciphertext)
    return head + decipher.finalize()


def seal(
    algorithm: str,
    key: BytesLike,
    plaintext: BytesLike,
    aad: BytesLike = b"",
    *,
    iv: BytesLike | None = None,
    registry: AlgorithmRegistry | None = None,
) -> bytes:
    """Encrypt into a single IV || ciphertext || tag message.

    A random IV is generated when none is given.
    """
    iv = os.urandom(IV_SIZE) if iv is None else to_bytes(iv, "iv")
    ciphertext, tag = encrypt(algorithm, key, iv, plaintext, aad, registry=registry)
    return iv + ciphertext + tag


def unseal(
    algorithm: str,
    key: BytesLike,
    message: BytesLike,
    aad: BytesLike = b"",
    *,
    registry: AlgorithmRegistry | None = None,
) -> bytes:
    """Decrypt an IV || ciphertext || tag message produced by seal().

    Raises:
        AuthenticationFailedError: If the message is truncated or the tag
            does not match.
    """
    params = (registry or DEFAULT_REGISTRY).resolve(algorithm)
    message = to_bytes(message, "message")
    if len(message) < IV_SIZE + params.tag_len:
        raise AuthenticationFailedError(
            f"Message too short: {len(message)} octets, "
            f"expected at least {IV_SIZE + params.tag_len}"
        )
    iv = message[:IV_SIZE]
    ciphertext = message[IV_SIZE : len(message) - params.tag_len]
    tag = message[len(message) - params.tag_len :]
    return decrypt(algorithm, key, iv, ciphertext, tag, aad, registry=registry)
