"""Type definitions for cbchmac."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_PENDING


class Direction(str, Enum):
    """Processing direction of a cipher context."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


class CipherState(str, Enum):
    """Lifecycle state of a cipher context.

    Transitions only move forward. FAILED is terminal and is entered when an
    operation raises mid-stream.
    """

    CREATED = "created"
    AAD_BOUND = "aad_bound"
    PROCESSING = "processing"
    FINALIZED = "finalized"
    FAILED = "failed"


@dataclass(frozen=True)
class AlgorithmParameters:
    """Parameters of one AES-CBC-HMAC-SHA2 construction.

    Attributes:
        name: Registry name, e.g. ``aes-128-cbc-hmac-sha-256``.
        cipher_id: Block cipher identifier, e.g. ``aes-128-cbc``.
        hash_id: HMAC hash identifier, e.g. ``sha256``.
        mac_key_len: MAC key length in octets.
        enc_key_len: Encryption key length in octets.
        tag_len: Authentication tag length in octets.
    """

    name: str
    cipher_id: str
    hash_id: str
    mac_key_len: int
    enc_key_len: int
    tag_len: int

    @property
    def key_len(self) -> int:
        """Length of the combined key in octets."""
        return self.mac_key_len + self.enc_key_len


@dataclass
class StreamConfig:
    """Configuration for the streaming adapters.

    Attributes:
        chunk_size: Read size in bytes when pulling from file-like objects.
        max_pending: Maximum number of output chunks buffered by CipherStream
            before write() blocks the producer.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_pending: int = DEFAULT_MAX_PENDING

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.max_pending <= 0:
            raise ValueError(f"max_pending must be positive, got {self.max_pending}")
