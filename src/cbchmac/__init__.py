"""cbchmac - AES-CBC-HMAC-SHA2 authenticated encryption.

Streaming implementation of the AEAD_AES_CBC_HMAC_SHA2 family
(AES in CBC mode with PKCS#7 padding, authenticated with a truncated HMAC
over AAD || IV || ciphertext || AL).

Example:
    ```python
    import os
    from cbchmac import create_cipher, create_decipher

    key = os.urandom(32)
    iv = os.urandom(16)

    cipher = create_cipher("aes-128-cbc-hmac-sha-256", key, iv)
    cipher.set_aad(b"header")
    ciphertext = cipher.update(b"secret message") + cipher.finalize()
    tag = cipher.get_auth_tag()

    decipher = create_decipher("aes-128-cbc-hmac-sha-256", key, iv)
    decipher.set_aad(b"header")
    decipher.set_auth_tag(tag)
    plaintext = decipher.update(ciphertext) + decipher.finalize()
    ```
"""

from .api import (
    create_cipher,
    create_decipher,
    decrypt,
    encrypt,
    list_supported_algorithms,
    seal,
    unseal,
)
from .constants import AL_SIZE, DEFAULT_CHUNK_SIZE, DEFAULT_MAX_PENDING, IV_SIZE
from .crypto import CipherContext, Decryptor, Encryptor
from .errors import (
    AADTooLongError,
    AuthenticationFailedError,
    CbcHmacError,
    InvalidIVLengthError,
    InvalidKeyLengthError,
    InvalidStateError,
    KeyLengthMismatchError,
    MissingAuthTagError,
    UnknownAlgorithmError,
)
from .registry import DEFAULT_REGISTRY, AlgorithmRegistry
from .streams import CipherStream, atransform, iter_file, transform
from .types import AlgorithmParameters, CipherState, Direction, StreamConfig

__version__ = "0.1.0"

__all__ = [
    # Factories
    "create_cipher",
    "create_decipher",
    "list_supported_algorithms",
    # One-shot API
    "encrypt",
    "decrypt",
    "seal",
    "unseal",
    # Contexts
    "CipherContext",
    "Encryptor",
    "Decryptor",
    # Streaming
    "CipherStream",
    "atransform",
    "iter_file",
    "transform",
    # Registry
    "AlgorithmRegistry",
    "DEFAULT_REGISTRY",
    # Constants
    "AL_SIZE",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_MAX_PENDING",
    "IV_SIZE",
    # Types
    "AlgorithmParameters",
    "CipherState",
    "Direction",
    "StreamConfig",
    # Errors
    "CbcHmacError",
    "AADTooLongError",
    "AuthenticationFailedError",
    "InvalidIVLengthError",
    "InvalidKeyLengthError",
    "InvalidStateError",
    "KeyLengthMismatchError",
    "MissingAuthTagError",
    "UnknownAlgorithmError",
    # Version
    "__version__",
]
