"""CRC-32 checksums and DES encryption in ECB and CBC modes."""

__version__ = "0.1.0"
__all__ = ["crc32", "des", "ecb", "cbc"]