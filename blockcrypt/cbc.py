"""DES encryption of files and byte strings in cipher-block-chaining mode."""

from __future__ import annotations

import secrets
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
_PROG = "DES-CBC"
_IV_LIMIT = 1 << 64


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


def generate_iv() -> int:
    """Return a random 64-bit initialisation vector."""
    return secrets.randbits(64)


def encrypt_bytes(data: bytes, key: int, iv: int | None = None) -> bytes:
    """Encrypt ``data``; the result starts with the IV, blocks stored little-endian."""
    if iv is None:
        iv = generate_iv()
    if not 0 <= iv < _IV_LIMIT:
        raise ValueError("IV must be a 64-bit unsigned value")
    keys = round_keys(key, True)
    previous = iv
    out = [iv.to_bytes(BLOCK_BYTES, "little")]
    for block in _plaintext_blocks(bytes(data)):
        previous = crypt_block(int.from_bytes(block, "big") ^ previous, keys)
        out.append(previous.to_bytes(BLOCK_BYTES, "little"))
    return b"".join(out)


def decrypt_bytes(data: bytes, key: int) -> bytes:
    """Decrypt ``data`` whose first 8 bytes are the IV."""
    data = bytes(data)
    if len(data) < BLOCK_BYTES:
        raise ValueError("issue fetching IV from encrypted data")
    previous = int.from_bytes(data[:BLOCK_BYTES], "little")
    keys = round_keys(key, False)
    out = []
    for block in _cipher_blocks(data[BLOCK_BYTES:]):
        chunk = int.from_bytes(block, "little")
        plain = crypt_block(chunk, keys) ^ previous
        out.append(strip_padding(plain.to_bytes(BLOCK_BYTES, "big")))
        previous = chunk
    return b"".join(out)


def encrypt_file(path: str | Path, key: int, output: str | Path = ENCRYPTED_NAME) -> Path:
    """Encrypt the file at ``path`` into ``output`` and return the output path."""
    plaintext = Path(path).read_bytes()
    target = Path(output)
    target.write_bytes(encrypt_bytes(plaintext, key))
    return target


def decrypt_file(path: str | Path, key: int, output: str | Path = DECRYPTED_NAME) -> Path:
    """Decrypt the file at ``path`` into ``output`` and return the output path."""
    ciphertext = Path(path).read_bytes()
    plaintext = decrypt_bytes(ciphertext, key)
    target = Path(output)
    target.write_bytes(plaintext)
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