# blockcrypt

Small command-line tools and a library for:

- computing the CRC-32 checksum of a file (the reflected `0xEDB88320` polynomial, as used by zip and Ethernet);
- encrypting and decrypting files with single DES in ECB mode;
- encrypting and decrypting files with single DES in CBC mode, with a random 64-bit IV stored in front of the ciphertext.

Both DES modes pad the plaintext PKCS#5-style, so a padded final block is always added, even when the input is a whole number of 8-byte blocks.

DES is long broken. Use this package for learning, testing and reading or writing files in this package's own format. Do not use it to protect anything.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

### CRC-32

```
blockcrypt-crc32 input.txt
```

This writes the checksum as eight upper-case hex digits and a newline to `CRC-32.txt` in the current directory. It exits with status 1 when it is not given exactly one file, or when the input cannot be read or the output cannot be written.

### DES

The key is the first 8 bytes of a key file, read as a little-endian 64-bit number. The file must hold at least 8 bytes.

```
blockcrypt-ecb encrypt input.txt key.txt
blockcrypt-ecb decrypt encrypted.txt key.txt

blockcrypt-cbc encrypt input.txt key.txt
blockcrypt-cbc decrypt encrypted.txt key.txt
```

Encryption writes `encrypted.txt` and decryption writes `decrypted.txt`, both in the current directory, replacing any file of that name. On success each command prints how much processor time the work took, for example `encrypted successfully in 0.412 ms!`. It exits with status 1 on wrong usage, an unknown mode, a key file that cannot be read, or an input file that cannot be read or decrypted.

## File format

- Plaintext is cut into 8-byte blocks, each read as a big-endian number; each ciphertext block is written as a little-endian number.
- In CBC mode the first 8 bytes of the encrypted file are the IV, also little-endian. The IV comes from Python's `secrets` module.
- On decryption, any trailing bytes that do not fill a whole block are ignored, and every decrypted block whose last byte is between 1 and 8 loses that many bytes from its end. Padding is not otherwise checked, so a wrong key gives garbage rather than an error.

## Library

```python
from blockcrypt.crc32 import crc32_bytes, crc32_file
from blockcrypt.des import read_key
from blockcrypt import ecb, cbc

assert crc32_bytes(b"123456789") == 0xCBF43926
checksum = crc32_file("input.txt")

key = read_key("key.txt")

ciphertext = ecb.encrypt_bytes(b"attack at dawn", key)
assert ecb.decrypt_bytes(ciphertext, key) == b"attack at dawn"

iv = cbc.generate_iv()
ciphertext = cbc.encrypt_bytes(b"attack at dawn", key, iv)
assert cbc.decrypt_bytes(ciphertext, key) == b"attack at dawn"
```

- `blockcrypt.crc32`: `make_table`, `crc32_bytes`, `crc32_stream` (reads a binary stream to its end) and `crc32_file`.
- `blockcrypt.ecb` and `blockcrypt.cbc`: `encrypt_bytes`, `decrypt_bytes`, and `encrypt_file` / `decrypt_file`, which take an optional output path (default `encrypted.txt` / `decrypted.txt`) and return it as a `Path`.
- `cbc.encrypt_bytes` makes a fresh IV when none is given and raises `ValueError` for an IV outside 0 to 2**64 - 1. `cbc.decrypt_bytes` raises `ValueError` when the data is shorter than the 8-byte IV.
- `read_key` raises `blockcrypt.des.KeyFileError` when the key file is missing or shorter than 8 bytes.

The building blocks of the cipher are in `blockcrypt.des` for anyone who wants to study them: `apply_pc1`, `apply_pc2`, `rotate_left_28`, `round_keys`, `initial_permutation`, `final_permutation`, `expand`, `substitute`, `permute`, `feistel`, `crypt_block`, `pad` and `strip_padding`.

## What it does not do

There is no triple DES, no other block cipher, no other mode of operation, no authentication of ciphertext and no key derivation from a passphrase. The commands always write to fixed file names in the current directory; use the library functions to choose the output path.