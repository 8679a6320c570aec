"""Block cipher and keyed hash adapters over the cryptography package."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes, hmac, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..constants import AES_BLOCK_SIZE_BITS
from ..errors import InvalidKeyLengthError, UnknownAlgorithmError
from ..types import Direction

# cipher_id -> AES key size in bytes
CIPHER_KEY_SIZES = {
    "aes-128-cbc": 16,
    "aes-192-cbc": 24,
    "aes-256-cbc": 32,
}

HASH_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


class BlockCipher:
    """AES-CBC with PKCS#7 padding, streaming in either direction.

    Output is released a block at a time; the decrypt side holds back the
    final block until finalize() so the padding can be stripped.
    """

    def __init__(self, cipher_id: str, key: bytes, iv: bytes, direction: Direction) -> None:
        key_size = CIPHER_KEY_SIZES.get(cipher_id)
        if key_size is None:
            raise UnknownAlgorithmError(f"Unknown cipher: {cipher_id}")
        # Contexts pass a key already split to enc_key_len; this guards direct use
        if len(key) != key_size:
            raise InvalidKeyLengthError(key_size, len(key))

        cipher = Cipher(algorithms.AES(key), modes.CBC(iv))
        pkcs7 = padding.PKCS7(AES_BLOCK_SIZE_BITS)
        self.direction = direction
        if direction is Direction.ENCRYPT:
            self._context = cipher.encryptor()
            self._padding = pkcs7.padder()
        else:
            self._context = cipher.decryptor()
            self._padding = pkcs7.unpadder()

    def update(self, data: bytes) -> bytes:
        if self.direction is Direction.ENCRYPT:
            return self._context.update(self._padding.update(data))
        return self._padding.update(self._context.update(data))

    def finalize(self) -> bytes:
        """Flush the final block.

        Raises:
            ValueError: On decrypt, if the input was not a whole number of
                blocks or the padding is invalid.
            cryptography.exceptions.AlreadyFinalized: If called twice.
        """
        if self.direction is Direction.ENCRYPT:
            tail = self._context.update(self._padding.finalize())
            return tail + self._context.finalize()
        tail = self._padding.update(self._context.finalize())
        return tail + self._padding.finalize()


class KeyedHash:
    """Streaming HMAC."""

    def __init__(self, hash_id: str, key: bytes) -> None:
        algorithm = HASH_ALGORITHMS.get(hash_id)
        if algorithm is None:
            raise UnknownAlgorithmError(f"Unknown hash: {hash_id}")
        self._hmac = hmac.HMAC(key, algorithm())

    def update(self, data: bytes) -> None:
        self._hmac.update(data)

    def digest(self) -> bytes:
        return self._hmac.finalize()
