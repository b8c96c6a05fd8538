import pytest

from blockcrypt import cbc, ecb

KEY = int.from_bytes(b"password", "little")
STANDARD_VECTOR_KEY = 0x133457799BBCDFF1


def test_iv_written_little_endian_first():
    ciphertext = cbc.encrypt_bytes(b"hello", KEY, 0x0102030405060708)
    assert ciphertext[:8] == bytes([8, 7, 6, 5, 4, 3, 2, 1])


def test_zero_iv_first_block_matches_standard_vector():
    ciphertext = cbc.encrypt_bytes(bytes.fromhex("0123456789ABCDEF"), STANDARD_VECTOR_KEY, 0)
    assert ciphertext[8:16] == (0x85E813540F0AB405).to_bytes(8, "little")


def test_zero_iv_first_block_matches_ecb():
    data = b"sixteen byte msg"
    assert cbc.encrypt_bytes(data, KEY, 0)[8:16] == ecb.encrypt_bytes(data, KEY)[:8]


@pytest.mark.parametrize("length", [0, 1, 7, 8, 9, 16, 33])
def test_ciphertext_length(length):
    assert len(cbc.encrypt_bytes(b"z" * length, KEY, 42)) == 8 + (length // 8 + 1) * 8


@pytest.mark.parametrize(
    "data",
    [b"", b"a", b"hello world", b"hello world!!!!!", b"The quick brown fox jumps"],
)
def test_round_trip(data):
    assert cbc.decrypt_bytes(cbc.encrypt_bytes(data, KEY), KEY) == data


def test_identical_blocks_differ_after_chaining():
    ciphertext = cbc.encrypt_bytes(b"ABCDEFGH" * 2, KEY, 7)
    assert ciphertext[8:16] != ciphertext[16:24]
    assert cbc.decrypt_bytes(ciphertext, KEY) == b"ABCDEFGH" * 2


def test_deterministic_with_fixed_iv():
    first = cbc.encrypt_bytes(b"payload", KEY, 99)
    second = cbc.encrypt_bytes(b"payload", KEY, 99)
    assert first == second
    assert first[:8] == bytes([99, 0, 0, 0, 0, 0, 0, 0])
    assert len(first) == 16
    assert cbc.decrypt_bytes(first, KEY) == b"payload"


def test_different_ivs_give_different_ciphertexts():
    first = cbc.encrypt_bytes(b"payload", KEY, 1)
    second = cbc.encrypt_bytes(b"payload", KEY, 2)
    assert first[8:] != second[8:]
    assert cbc.decrypt_bytes(first, KEY) == cbc.decrypt_bytes(second, KEY) == b"payload"


def test_generate_iv_range():
    values = {cbc.generate_iv() for _ in range(20)}
    assert all(0 <= value < 2**64 for value in values)
    assert len(values) > 1


@pytest.mark.parametrize("iv", [-1, 2**64])
def test_invalid_iv(iv):
    with pytest.raises(ValueError):
        cbc.encrypt_bytes(b"data", KEY, iv)


def test_decrypt_without_iv_raises():
    with pytest.raises(ValueError):
        cbc.decrypt_bytes(b"short", KEY)


def test_decrypt_iv_only_gives_empty():
    assert cbc.decrypt_bytes(bytes(8), KEY) == b""


def test_padding_stripped_from_inner_block():
    data = b"abcde\x01\x02\x03" + b"xyz"
    assert cbc.decrypt_bytes(cbc.encrypt_bytes(data, KEY), KEY) == b"abcde" + b"xyz"


def test_trailing_partial_block_ignored():
    ciphertext = cbc.encrypt_bytes(b"hello world", KEY)
    assert cbc.decrypt_bytes(ciphertext + b"abc", KEY) == b"hello world"


def test_files_round_trip(tmp_path):
    source = tmp_path / "input.txt"
    source.write_bytes(b"file contents here\n")
    encrypted = cbc.encrypt_file(source, KEY, tmp_path / "enc.bin")
    decrypted = cbc.decrypt_file(encrypted, KEY, tmp_path / "dec.bin")
    assert decrypted.read_bytes() == b"file contents here\n"


def test_decrypt_file_too_short(tmp_path):
    source = tmp_path / "enc.bin"
    source.write_bytes(b"abc")
    with pytest.raises(ValueError):
        cbc.decrypt_file(source, KEY, tmp_path / "dec.bin")


def test_main_round_trip(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_bytes(b"some plaintext to protect")
    (tmp_path / "key.txt").write_bytes(b"password")
    assert cbc.main(["encrypt", "input.txt", "key.txt"]) == 0
    assert "encrypted successfully" in capsys.readouterr().out
    assert cbc.main(["decrypt", "encrypted.txt", "key.txt"]) == 0
    assert "decrypted successfully" in capsys.readouterr().out
    assert (tmp_path / "decrypted.txt").read_bytes() == b"some plaintext to protect"


def test_main_decrypt_short_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "encrypted.txt").write_bytes(b"abc")
    (tmp_path / "key.txt").write_bytes(b"password")
    assert cbc.main(["decrypt", "encrypted.txt", "key.txt"]) == 1


def test_main_wrong_argument_count():
    assert cbc.main([]) == 1


def test_main_unknown_mode(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "key.txt").write_bytes(b"password")
    assert cbc.main(["scramble", "input.txt", "key.txt"]) == 1
    assert "choose either encrypt or decrypt" in capsys.readouterr().err


def test_main_missing_key_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_bytes(b"data")
    assert cbc.main(["encrypt", "input.txt", "missing.txt"]) == 1