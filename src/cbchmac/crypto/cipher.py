"""AES-CBC-HMAC-SHA2 encrypt/decrypt contexts.

Both directions feed the HMAC in the same order:

    AAD || IV || ciphertext || AL

The encryptor hashes the ciphertext it produces, the decryptor hashes the
ciphertext it is given. The tag is the HMAC digest truncated to T_LEN octets.
"""

from __future__ import annotations

import hmac
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import ClassVar, cast

from ..constants import IV_SIZE
from ..errors import (
    AuthenticationFailedError,
    InvalidIVLengthError,
    InvalidStateError,
    MissingAuthTagError,
)
from ..types import AlgorithmParameters, CipherState, Direction
from .keys import split_key
from .length import encode_aad_length
from .primitives import BlockCipher, KeyedHash
from .utils import BytesLike, to_bytes

logger = logging.getLogger("cbchmac")


class CipherContext(ABC):
    """Shared lifecycle for the encrypt and decrypt contexts.

    A context is single-use and not thread-safe. It moves through
    CREATED -> [AAD_BOUND] -> PROCESSING -> FINALIZED; any exception raised
    while processing moves it to FAILED, after which every call raises
    InvalidStateError.
    """

    direction: ClassVar[Direction]

    def __init__(self, params: AlgorithmParameters, key: BytesLike, iv: BytesLike) -> None:
        iv = to_bytes(iv, "iv")
        if len(iv) != IV_SIZE:
            raise InvalidIVLengthError(f"IV must be {IV_SIZE} octets long, got {len(iv)}")
        mac_key, enc_key = split_key(key, params.mac_key_len, params.enc_key_len)

        self._params = params
        self._iv = iv
        self._cipher = BlockCipher(params.cipher_id, enc_key, iv, self.direction)
        self._hmac = KeyedHash(params.hash_id, mac_key)
        self._aad_length = encode_aad_length(0)
        self._state = CipherState.CREATED

        logger.debug("Created %s context for %s", self.direction.value, params.name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._params.name} state={self._state.value}>"

    @property
    def algorithm(self) -> AlgorithmParameters:
        return self._params

    @property
    def state(self) -> CipherState:
        return self._state

    def set_aad(self, aad: BytesLike) -> None:
        """Bind associated data.

        Must be called at most once, before the first update() or finalize().

        Args:
            aad: The associated data.

        Raises:
            InvalidStateError: If processing has begun or AAD is already bound.
            AADTooLongError: If the AAD bit length does not fit in 32 bits.
        """
        self._ensure_open()
        if self._state is not CipherState.CREATED:
            raise InvalidStateError("AAD must be set before processing begins")
        aad = to_bytes(aad, "aad")
        aad_length = encode_aad_length(len(aad))

        self._hmac.update(aad)
        self._hmac.update(self._iv)
        self._aad_length = aad_length
        self._state = CipherState.AAD_BOUND

    def update(self, data: BytesLike) -> bytes:
        """Process a chunk of input and return whatever output is ready.

        CBC output is released in whole blocks, so the result may be shorter
        than the input, or empty.
        """
        data = to_bytes(data, "data")
        self._ensure_open()
        self._check_ready()
        self._begin()
        with self._guard():
            return self._process(data)

    @abstractmethod
    def finalize(self) -> bytes:
        """Flush the context and return its last output."""
        pass  # pragma: no cover

    @abstractmethod
    def _process(self, data: bytes) -> bytes:
        pass  # pragma: no cover

    def _check_ready(self) -> None:
        pass

    def _ensure_open(self) -> None:
        if self._state is CipherState.FAILED:
            raise InvalidStateError("Context is unusable after a failed operation")
        if self._state is CipherState.FINALIZED:
            raise InvalidStateError("Context is already finalized")

    def _begin(self) -> None:
        if self._state is CipherState.CREATED:
            # No AAD bound: the HMAC input still starts with the IV
            self._hmac.update(self._iv)
        self._state = CipherState.PROCESSING

    def _compute_tag(self) -> bytes:
        self._hmac.update(self._aad_length)
        return self._hmac.digest()[: self._params.tag_len]

    @contextmanager
    def _guard(self) -> Iterator[None]:
        try:
            yield
        except Exception:
            self._state = CipherState.FAILED
            raise


class Encryptor(CipherContext):
    """Encrypting context. The tag is available after finalize()."""

    direction = Direction.ENCRYPT

    def __init__(self, params: AlgorithmParameters, key: BytesLike, iv: BytesLike) -> None:
        super().__init__(params, key, iv)
        self._tag: bytes | None = None

    def _process(self, data: bytes) -> bytes:
        ciphertext = self._cipher.update(data)
        self._hmac.update(ciphertext)
        return ciphertext

    def finalize(self) -> bytes:
        """Flush the final padded block and compute the tag.

        Returns:
            The remaining ciphertext octets.

        Raises:
            InvalidStateError: If already finalized or failed.
        """
        self._ensure_open()
        self._begin()
        with self._guard():
            ciphertext = self._cipher.finalize()
            self._hmac.update(ciphertext)
            self._tag = self._compute_tag()
        self._state = CipherState.FINALIZED
        return ciphertext

    def get_auth_tag(self) -> bytes:
        """Return the authentication tag.

        Raises:
            InvalidStateError: If finalize() has not completed.
        """
        if self._state is not CipherState.FINALIZED or self._tag is None:
            raise InvalidStateError("Auth tag is only available after finalize()")
        return self._tag


class Decryptor(CipherContext):
    """Decrypting context.

    Plaintext returned by update() is NOT authenticated until finalize()
    returns. If finalize() raises AuthenticationFailedError, all plaintext
    from this context must be discarded.
    """

    direction = Direction.DECRYPT

    def __init__(self, params: AlgorithmParameters, key: BytesLike, iv: BytesLike) -> None:
        super().__init__(params, key, iv)
        self._expected_tag: bytes | None = None

    def set_auth_tag(self, tag: BytesLike) -> None:
        """Supply the expected tag. Must be called before update()/finalize()."""
        self._ensure_open()
        self._expected_tag = to_bytes(tag, "tag")

    def _check_ready(self) -> None:
        if self._expected_tag is None:
            raise MissingAuthTagError("No auth tag provided. Use set_auth_tag() first.")

    def _process(self, data: bytes) -> bytes:
        self._hmac.update(data)
        return self._cipher.update(data)

    def finalize(self) -> bytes:
        """Verify the tag and flush the final plaintext block.

        The tag is checked before the padding is examined.

        Returns:
            The remaining plaintext octets.

        Raises:
            MissingAuthTagError: If set_auth_tag() was never called.
            AuthenticationFailedError: If the tag does not match, or the
                ciphertext is malformed.
            InvalidStateError: If already finalized or failed.
        """
        self._ensure_open()
        self._check_ready()
        self._begin()
        with self._guard():
            tag = self._compute_tag()
            if not hmac.compare_digest(tag, cast(bytes, self._expected_tag)):
                logger.warning("Authentication failed for %s", self._params.name)
                raise AuthenticationFailedError("Authentication failed.")
            try:
                plaintext = self._cipher.finalize()
            except ValueError as e:
                raise AuthenticationFailedError(f"Authentication failed: {e}") from e
        self._state = CipherState.FINALIZED
        return plaintext
