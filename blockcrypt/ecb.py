"""DES encryption of files and byte strings in electronic-codebook mode."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterator, Sequence
from pathlib import Path

from blockcrypt.des import (
    BLOCK_BYTES,
    KeyFileError,
    crypt_block,
    pad,
    read_key,
    round_keys,
    strip_padding,
)

ENCRYPTED_NAME = "encrypted.txt"
DECRYPTED_NAME = "decrypted.txt"
_PROG = "DES-ECB"


def _plaintext_blocks(data: bytes) -> Iterator[bytes]:
    """Yield whole 8-byte blocks, then one padded final block (always present)."""
    whole = len(data) - len(data) % BLOCK_BYTES
    for offset in range(0, whole, BLOCK_BYTES):
        yield data[offset : offset + BLOCK_BYTES]
    yield pad(data[whole:])


def _cipher_blocks(data: bytes) -> Iterator[bytes]:
    """Yield whole 8-byte blocks, dropping any incomplete tail."""
    whole = len(data) - len(data) % BLOCK_BYTES
    for offset in range(0, whole, BLOCK_BYTES):
        yield data[offset : offset + BLOCK_BYTES]


def encrypt_bytes(data: bytes, key: int) -> bytes:
    """Encrypt ``data`` with PKCS#5 padding; blocks are stored little-endian."""
    keys = round_keys(key, True)
    return b"".join(
        crypt_block(int.from_bytes(block, "big"), keys).to_bytes(BLOCK_BYTES, "little")
        for block in _plaintext_blocks(bytes(data))
    )


def decrypt_bytes(data: bytes, key: int) -> bytes:
    """Decrypt ``data``, stripping padding from every block that carries a count."""
    keys = round_keys(key, False)
    return b"".join(
        strip_padding(
            crypt_block(int.from_bytes(block, "little"), keys).to_bytes(BLOCK_BYTES, "big")
        )
        for block in _cipher_blocks(bytes(data))
    )


def encrypt_file(path: str | Path, key: int, output: str | Path = ENCRYPTED_NAME) -> Path:
    """Encrypt the file at ``path`` into ``output`` and return the output path."""
    plaintext = Path(path).read_bytes()
    target = Path(output)
    target.write_bytes(encrypt_bytes(plaintext, key))
    return target


def decrypt_file(path: str | Path, key: int, output: str | Path = DECRYPTED_NAME) -> Path:
    """Decrypt the file at ``path`` into ``output`` and return the output path."""
    ciphertext = Path(path).read_bytes()
    target = Path(output)
    target.write_bytes(decrypt_bytes(ciphertext, key))
    return target


def main(argv: Sequence[str] | None = None) -> int:
    """Encrypt or decrypt a file with a key read from a key file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print(
            f"Usage: {_PROG} <encrypt/decrypt> <input_filepath> <key_filepath>",
            file=sys.stderr,
        )
        return 1

    mode, source, key_path = args
    try:
        key = read_key(key_path)
    except KeyFileError as exc:
        print(exc, file=sys.stderr)
        return 1

    operations = {
        "encrypt": (encrypt_file, "encrypted"),
        "decrypt": (decrypt_file, "decrypted"),
    }
    if mode not in operations:
        print("choose either encrypt or decrypt!", file=sys.stderr)
        return 1

    operation, verb = operations[mode]
    start = time.process_time()
    try:
        operation(source, key)
    except (OSError, ValueError) as exc:
        print(f"unable to {mode} file: {exc}", file=sys.stderr)
        return 1
    elapsed_ms = (time.process_time() - start) * 1000.0
    print(f"{verb} successfully in {elapsed_ms:.3f} ms!")
    return 0


if __name__ == "__main__":
    sys.exit(main())