"""Tests for the one-shot API."""

import os
from unittest.mock import patch

import pytest

from cbchmac import (
    AuthenticationFailedError,
    UnknownAlgorithmError,
    create_cipher,
    create_decipher,
    decrypt,
    encrypt,
    seal,
    unseal,
)
from cbchmac.registry import DEFAULT_ALGORITHMS, AlgorithmRegistry

ALG = "aes-256-cbc-hmac-sha-384"
KEY = bytes(range(56))
IV = bytes(range(100, 116))


class TestFactories:
    """Tests for create_cipher and create_decipher."""

    def test_unknown_algorithm(self) -> None:
        """Test unknown names are rejected by both factories."""
        with pytest.raises(UnknownAlgorithmError):
            create_cipher("aes-128-cbc", bytes(32), IV)
        with pytest.raises(UnknownAlgorithmError):
            create_decipher("aes-128-cbc", bytes(32), IV)

    def test_custom_registry(self) -> None:
        """Test factories resolve names in the given registry."""
        registry = AlgorithmRegistry(DEFAULT_ALGORITHMS[:1])
        cipher = create_cipher("aes-128-cbc-hmac-sha-256", bytes(32), IV, registry=registry)
        assert cipher.algorithm.name == "aes-128-cbc-hmac-sha-256"
        with pytest.raises(UnknownAlgorithmError):
            create_cipher(ALG, KEY, IV, registry=registry)


class TestEncryptDecrypt:
    """Tests for encrypt() and decrypt()."""

    def test_round_trip(self) -> None:
        """Test encrypt then decrypt returns the plaintext."""
        ciphertext, tag = encrypt(ALG, KEY, IV, b"hello world", b"aad")
        assert len(tag) == 24
        assert decrypt(ALG, KEY, IV, ciphertext, tag, b"aad") == b"hello world"

    def test_matches_streaming_api(self) -> None:
        """Test the one-shot result equals the context API result."""
        plaintext = os.urandom(77)
        cipher = create_cipher(ALG, KEY, IV)
        cipher.set_aad(b"aad")
        ciphertext = cipher.update(plaintext[:30]) + cipher.update(plaintext[30:])
        ciphertext += cipher.finalize()

        assert encrypt(ALG, KEY, IV, plaintext, b"aad") == (ciphertext, cipher.get_auth_tag())

    def test_wrong_aad(self) -> None:
        """Test decrypt with different AAD fails."""
        ciphertext, tag = encrypt(ALG, KEY, IV, b"hello world", b"aad")
        with pytest.raises(AuthenticationFailedError):
            decrypt(ALG, KEY, IV, ciphertext, tag, b"other")

    def test_wrong_key(self) -> None:
        """Test decrypt with a different key fails."""
        ciphertext, tag = encrypt(ALG, KEY, IV, b"hello world")
        with pytest.raises(AuthenticationFailedError):
            decrypt(ALG, bytes(56), IV, ciphertext, tag)


class TestSealUnseal:
    """Tests for the IV || ciphertext || tag message helpers."""

    def test_round_trip(self) -> None:
        """Test seal then unseal returns the plaintext."""
        message = seal(ALG, KEY, b"payload", b"aad")
        assert unseal(ALG, KEY, message, b"aad") == b"payload"

    def test_layout(self) -> None:
        """Test the message is IV || ciphertext || tag."""
        message = seal(ALG, KEY, b"payload", b"aad", iv=IV)
        ciphertext, tag = encrypt(ALG, KEY, IV, b"payload", b"aad")
        assert message == IV + ciphertext + tag

    def test_random_iv(self) -> None:
        """Test a fresh IV is drawn from os.urandom when none is given."""
        with patch("cbchmac.api.os.urandom", return_value=IV) as urandom:
            message = seal(ALG, KEY, b"payload")

        urandom.assert_called_once_with(16)
        assert message[:16] == IV

    def test_distinct_messages(self) -> None:
        """Test two seals of the same plaintext differ."""
        assert seal(ALG, KEY, b"payload") != seal(ALG, KEY, b"payload")

    def test_too_short(self) -> None:
        """Test messages shorter than IV + tag are rejected."""
        with pytest.raises(AuthenticationFailedError, match="Message too short"):
            unseal(ALG, KEY, bytes(16 + 23))

    def test_tampered(self) -> None:
        """Test a modified message fails authentication."""
        message = bytearray(seal(ALG, KEY, b"payload"))
        message[20] ^= 0x01
        with pytest.raises(AuthenticationFailedError):
            unseal(ALG, KEY, bytes(message))

    def test_iv_only_no_ciphertext(self) -> None:
        """Test a message with an empty ciphertext section is rejected."""
        with pytest.raises(AuthenticationFailedError):
            unseal(ALG, KEY, bytes(16 + 24))
