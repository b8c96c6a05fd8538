import io
import zlib

import pytest

from blockcrypt import crc32


def test_table_shape_and_known_entries():
    table = crc32.make_table()
    assert len(table) == 256
    assert table[0] == 0
    assert table[128] == crc32.REVERSED
    assert all(0 <= value <= 0xFFFFFFFF for value in table)


def test_check_value():
    assert crc32.crc32_bytes(b"123456789") == 0xCBF43926


def test_empty_input_is_zero():
    assert crc32.crc32_bytes(b"") == 0


@pytest.mark.parametrize(
    "data",
    [b"a", b"hello world", bytes(range(256)), b"\x00" * 10000, b"xyz" * 3000],
)
def test_matches_zlib(data):
    assert crc32.crc32_bytes(data) == zlib.crc32(data)


def test_stream_matches_bytes_across_chunks():
    data = bytes(i % 251 for i in range(10000))
    assert crc32.crc32_stream(io.BytesIO(data)) == crc32.crc32_bytes(data)


def test_file(tmp_path):
    path = tmp_path / "input.txt"
    data = b"The quick brown fox jumps over the lazy dog"
    path.write_bytes(data)
    assert crc32.crc32_file(path) == zlib.crc32(data)


def test_file_missing(tmp_path):
    with pytest.raises(OSError):
        crc32.crc32_file(tmp_path / "missing.bin")


def test_main_writes_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_bytes(b"123456789")
    assert crc32.main(["input.txt"]) == 0
    assert (tmp_path / "CRC-32.txt").read_text() == "CBF43926\n"


def test_main_wrong_arguments(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert crc32.main([]) == 1
    assert "usage" in capsys.readouterr().out
    assert not (tmp_path / "CRC-32.txt").exists()


def test_main_missing_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert crc32.main(["nope.txt"]) == 1
    assert not (tmp_path / "CRC-32.txt").exists()