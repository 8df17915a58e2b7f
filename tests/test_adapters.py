from __future__ import annotations

import io
from pathlib import Path

import pytest

from minigrep.adapters.file_reader import FileContentReader, ReadError
from minigrep.adapters.stdout_writer import StreamLineWriter


def test_reads_utf8_text(tmp_path: Path) -> None:
    path = tmp_path / "poem.txt"
    path.write_bytes("Grüße\nzweite Zeile\n".encode("utf-8"))

    assert FileContentReader().read(str(path)) == "Grüße\nzweite Zeile\n"


def test_keeps_crlf_line_breaks(tmp_path: Path) -> None:
    path = tmp_path / "dos.txt"
    path.write_bytes(b"one\r\ntwo\r\n")

    assert FileContentReader().read(str(path)) == "one\r\ntwo\r\n"


def test_missing_file_raises_read_error(tmp_path: Path) -> None:
    missing = tmp_path / "nope.txt"

    with pytest.raises(ReadError) as excinfo:
        FileContentReader().read(str(missing))

    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_raises_read_error(tmp_path: Path) -> None:
    with pytest.raises(ReadError):
        FileContentReader().read(str(tmp_path))


def test_invalid_utf8_raises_read_error(tmp_path: Path) -> None:
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(ReadError) as excinfo:
        FileContentReader().read(str(path))

    assert "utf-8" in excinfo.value.reason
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_writer_emits_one_line_each() -> None:
    stream = io.StringIO()
    StreamLineWriter(stream).write_lines(["Rust:", "", "Trust me."])

    assert stream.getvalue() == "Rust:\n\nTrust me.\n"


def test_writer_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    StreamLineWriter().write_lines(["hello"])

    assert capsys.readouterr().out == "hello\n"
