"""Cryptographic building blocks for AES-CBC-HMAC-SHA2."""

from .cipher import CipherContext, Decryptor, Encryptor
from .keys import split_key
from .length import encode_aad_length
from .primitives import BlockCipher, KeyedHash

__all__ = [
    "BlockCipher",
    "CipherContext",
    "Decryptor",
    "Encryptor",
    "KeyedHash",
    "encode_aad_length",
    "split_key",
]
