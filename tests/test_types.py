"""Tests for type definitions."""

import dataclasses

import pytest

from cbchmac.constants import DEFAULT_CHUNK_SIZE, DEFAULT_MAX_PENDING
from cbchmac.types import AlgorithmParameters, CipherState, Direction, StreamConfig


class TestAlgorithmParameters:
    """Tests for AlgorithmParameters."""

    def test_key_len(self) -> None:
        """Test key_len is the sum of MAC and ENC key lengths."""
        params = AlgorithmParameters("x", "aes-256-cbc", "sha384", 24, 32, 24)
        assert params.key_len == 56

    def test_frozen(self) -> None:
        """Test parameters cannot be mutated."""
        params = AlgorithmParameters("x", "aes-128-cbc", "sha256", 16, 16, 16)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.tag_len = 32  # type: ignore[misc]


class TestEnums:
    """Tests for enum values."""

    def test_direction_values(self) -> None:
        """Test Direction string values."""
        assert Direction.ENCRYPT.value == "encrypt"
        assert Direction.DECRYPT.value == "decrypt"
        assert Direction("decrypt") is Direction.DECRYPT

    def test_cipher_state_values(self) -> None:
        """Test CipherState covers the full lifecycle."""
        assert [s.value for s in CipherState] == [
            "created",
            "aad_bound",
            "processing",
            "finalized",
            "failed",
        ]


class TestStreamConfig:
    """Tests for StreamConfig."""

    def test_defaults(self) -> None:
        """Test default values come from constants."""
        config = StreamConfig()
        assert config.chunk_size == DEFAULT_CHUNK_SIZE
        assert config.max_pending == DEFAULT_MAX_PENDING

    def test_rejects_zero_chunk_size(self) -> None:
        """Test chunk_size must be positive."""
        with pytest.raises(ValueError, match="chunk_size"):
            StreamConfig(chunk_size=0)

    def test_rejects_zero_max_pending(self) -> None:
        """Test max_pending must be positive."""
        with pytest.raises(ValueError, match="max_pending"):
            StreamConfig(max_pending=0)
