#!/usr/bin/env python3
"""Testhelper CLI for cbchmac interoperability testing.

Reads a JSON request from stdin and writes a JSON response to stdout.
All binary fields are hex encoded.
"""

import json
import sys

from cbchmac import AuthenticationFailedError, decrypt, encrypt, list_supported_algorithms


def encrypt_command() -> None:
    """Encrypt {alg, key, iv, aad, plaintext} and output ciphertext and tag."""
    data = json.loads(sys.stdin.read())

    ciphertext, tag = encrypt(
        data["alg"],
        bytes.fromhex(data["key"]),
        bytes.fromhex(data["iv"]),
        bytes.fromhex(data["plaintext"]),
        bytes.fromhex(data.get("aad", "")),
    )
    print(json.dumps({"ciphertext": ciphertext.hex(), "tag": tag.hex()}))


def decrypt_command() -> None:
    """Decrypt {alg, key, iv, aad, ciphertext, tag} and output plaintext."""
    data = json.loads(sys.stdin.read())

    try:
        plaintext = decrypt(
            data["alg"],
            bytes.fromhex(data["key"]),
            bytes.fromhex(data["iv"]),
            bytes.fromhex(data["ciphertext"]),
            bytes.fromhex(data["tag"]),
            bytes.fromhex(data.get("aad", "")),
        )
    except AuthenticationFailedError as e:
        print(json.dumps({"success": False, "error": str(e)}))
        sys.exit(2)

    print(json.dumps({"success": True, "plaintext": plaintext.hex()}))


def algorithms_command() -> None:
    """List supported algorithm names."""
    print(json.dumps({"algorithms": sorted(list_supported_algorithms())}))


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <encrypt|decrypt|algorithms>", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    if command == "encrypt":
        encrypt_command()
    elif command == "decrypt":
        decrypt_command()
    elif command == "algorithms":
        algorithms_command()
    else:
        print(f"unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
