"""CRC-32 checksums using the reflected IEEE 802.3 polynomial."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

TABLE_SIZE = 256
POLYNOMIAL = 0x04C11DB7
REVERSED = 0xEDB88320
OUTPUT_NAME = "CRC-32.txt"
_CHUNK_SIZE = 4096


def make_table() -> tuple[int, ...]:
    """Build the 256-entry lookup table for the reflected polynomial."""

    def entry(value: int) -> int:
        for _ in range(8):
            value = (value >> 1) ^ REVERSED if value & 1 else value >> 1
        return value

    return tuple(entry(i) for i in range(TABLE_SIZE))


_TABLE = make_table()


def _update(crc: int, data: bytes, table: Sequence[int] = _TABLE) -> int:
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc


def crc32_bytes(data: bytes) -> int:
    """Return the CRC-32 of a byte string."""
    return _update(0xFFFFFFFF, bytes(data)) ^ 0xFFFFFFFF


def crc32_stream(stream: BinaryIO) -> int:
    """Return the CRC-32 of everything left in a binary stream."""
    crc = 0xFFFFFFFF
    while chunk := stream.read(_CHUNK_SIZE):
        crc = _update(crc, chunk)
    return crc ^ 0xFFFFFFFF


def crc32_file(path: str | Path) -> int:
    """Return the CRC-32 of the file at ``path``."""
    with open(path, "rb") as stream:
        return crc32_stream(stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Checksum one file and write the result to CRC-32.txt."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("example command line usage:\n./CRC <input file>")
        return 1

    try:
        crc = crc32_file(args[0])
    except OSError as exc:
        print(f"error opening specified file!: {exc}", file=sys.stderr)
        return 1

    try:
        with open(OUTPUT_NAME, "w", encoding="ascii", newline="\n") as out:
            out.write(f"{crc:08X}\n")
    except OSError as exc:
        print(f"unable to open output file!: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())