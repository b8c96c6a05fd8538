"""The DES block cipher: key schedule, round function and block transform."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

CHUNK_SIZE = 64
KEY_SIZE = 64
BLOCK_SIZE = 32
NUM_ROUNDS = 16
POST_PC1_SIZE = 56
POST_PC2_SIZE = 48
BLOCK_BYTES = 8

# Bit positions below are numbered from the most significant bit, starting at 0.

IP = tuple(start - 8 * step for start in (57, 59, 61, 63, 56, 58, 60, 62) for step in range(8))

FP = tuple(sorted(range(CHUNK_SIZE), key=lambda position: IP[position]))

EXPANSION = tuple((4 * group - 1 + offset) % BLOCK_SIZE for group in range(8) for offset in range(6))

_SBOX_HEX = (
    "E4D12FB83A6C5907 0F74E2D1A6CB9538 41E8D62BFC973A50 FC8249175B3EA06D",
    "F18E6B34972DC05A 3D47F28EC01A69B5 0E7BA4D158C6932F D8A13F42B67C05E9",
    "A09E63F51DC7B428 D70934A6285ECBF1 D6498F30B12C5AE7 1AD069874FE3B52C",
    "7DE3069A1285BC4F D8B56F03472C1AE9 A690CB7DF13E5284 3F06A1D8945BC72E",
    "2C417AB6853FD0E9 EB2C47D150FA3986 421BAD78F9C5630E B8C71E2D6F09A453",
    "C1AF92680D34E75B AF427C9561DE0B38 9EF528C3704A1DB6 432C95FABE17608D",
    "4B2EF08D3C975A61 D0B7491AE35C2F86 14BDC37EAF680592 6BD814A7950FE23C",
    "D2846FB1A93E50C7 1FD8A374C56B0E92 7B419CE206ADF358 21E74A8DFC90356B",
)

S_BOXES = tuple(
    tuple(tuple(int(digit, 16) for digit in row) for row in box.split())
    for box in _SBOX_HEX
)

P_BOX = tuple(
    bytes.fromhex(
        "0f0613141c0b1b10 000e161904111e09 0107170d1f1a0208 120c1d05150a0318"
    )
)

SHIFTS = (1, 1, 2, 2, 2, 2, 2, 2, 1, 2, 2, 2, 2, 2, 2, 1)

PC1 = (
    tuple(56 + column - 8 * step for column in range(4) for step in range(8))[:28]
    + tuple(62 - column - 8 * step for column in range(3) for step in range(8))
    + tuple(27 - 8 * step for step in range(4))
)

PC2 = tuple(
    bytes.fromhex(
        "0d100a170004 021b0e051409 16120b031907 0f061a130c01"
        " 28331e242e36 1d27322c202f 2b3026372134 2d2931231c1f"
    )
)

_MASK28 = 0xFFFFFFF
_MASK32 = 0xFFFFFFFF


class KeyFileError(Exception):
    """Raised when a key cannot be read from a key file."""


def read_key(path: str | Path) -> int:
    """Read the first 8 bytes of a key file as a little-endian 64-bit key."""
    try:
        with open(path, "rb") as stream:
            raw = stream.read(BLOCK_BYTES)
    except OSError as exc:
        raise KeyFileError(f"Unable to open key file: {exc}") from exc
    if len(raw) != BLOCK_BYTES:
        raise KeyFileError("Failed to read 64-bit value from key file")
    return int.from_bytes(raw, "little")


def _permute(value: int, table: Sequence[int], in_bits: int) -> int:
    """Pick bits of ``value`` (numbered from the most significant) in table order."""
    result = 0
    for position in table:
        result = (result << 1) | ((value >> (in_bits - 1 - position)) & 1)
    return result


def apply_pc1(key: int) -> int:
    """Reduce a 64-bit key to 56 bits with permuted choice 1."""
    return _permute(key, PC1, KEY_SIZE)


def apply_pc2(key: int) -> int:
    """Reduce a 56-bit key state to a 48-bit round key with permuted choice 2."""
    return _permute(key, PC2, POST_PC1_SIZE)


def initial_permutation(chunk: int) -> int:
    """Apply the initial permutation to a 64-bit block."""
    return _permute(chunk, IP, CHUNK_SIZE)


def final_permutation(chunk: int) -> int:
    """Apply the final permutation to a 64-bit block."""
    return _permute(chunk, FP, CHUNK_SIZE)


def expand(block: int) -> int:
    """Expand a 32-bit half block to 48 bits."""
    return _permute(block, EXPANSION, BLOCK_SIZE)


def substitute(expanded: int) -> int:
    """Pass 48 bits through the eight S-boxes, giving 32 bits."""
    result = 0
    for index, box in enumerate(S_BOXES):
        six = (expanded >> (42 - 6 * index)) & 0x3F
        row = ((six & 0x20) >> 4) | (six & 0x01)
        col = (six >> 1) & 0x0F
        result = (result << 4) | box[row][col]
    return result


def permute(block: int) -> int:
    """Apply the P-box permutation to a 32-bit value."""
    return _permute(block, P_BOX, BLOCK_SIZE)


def rotate_left_28(value: int, shift: int) -> int:
    """Rotate a 28-bit key half left by one or two places."""
    return ((value << shift) | ((value & 0xC000000) >> (28 - shift))) & _MASK28


def round_keys(key: int, encrypt: bool) -> tuple[int, ...]:
    """Derive the sixteen 48-bit round keys, reversed when decrypting."""
    reduced = apply_pc1(key)
    left = (reduced >> 28) & _MASK28
    right = reduced & _MASK28
    keys = []
    for shift in SHIFTS:
        left = rotate_left_28(left, shift)
        right = rotate_left_28(right, shift)
        keys.append(apply_pc2((left << 28) | right))
    return tuple(keys if encrypt else reversed(keys))


def feistel(right: int, round_key: int) -> int:
    """The DES round function."""
    return permute(substitute(expand(right) ^ round_key))


def crypt_block(block: int, keys: Sequence[int]) -> int:
    """Run one 64-bit block through the cipher with the given round keys."""
    state = initial_permutation(block)
    left = (state >> BLOCK_SIZE) & _MASK32
    right = state & _MASK32
    for round_key in keys:
        left, right = right, left ^ feistel(right, round_key)
    return final_permutation((right << BLOCK_SIZE) | left)


def pad(chunk: bytes) -> bytes:
    """Fill a chunk of fewer than 8 bytes to 8 with PKCS#5 padding."""
    if len(chunk) > BLOCK_BYTES:
        raise ValueError(f"chunk is longer than {BLOCK_BYTES} bytes")
    fill = BLOCK_BYTES - len(chunk)
    return bytes(chunk) + bytes([fill]) * fill


def strip_padding(block: bytes) -> bytes:
    """Drop trailing padding when the last byte is a count from 1 to 8."""
    if len(block) != BLOCK_BYTES:
        raise ValueError(f"block must be {BLOCK_BYTES} bytes")
    count = block[-1]
    if 0 < count <= BLOCK_BYTES:
        return bytes(block[: BLOCK_BYTES - count])
    return bytes(block)