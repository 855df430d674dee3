"""Tests for document state and file loading."""

from pathlib import Path

import pytest
from textpad.document import Document, ensure_txt_suffix, read_text_file
from textpad.exceptions import FileOperationError, TextpadError


@pytest.mark.parametrize("name, expected", [
    ("notes", "notes.txt"),
    ("notes.txt", "notes.txt"),
    ("NOTES.TXT", "NOTES.TXT"),
    ("notes.Txt", "notes.Txt"),
    ("notes.md", "notes.md.txt"),
    ("notes.", "notes..txt"),
])
def test_ensure_txt_suffix(name, expected):
    assert ensure_txt_suffix(name) == Path(expected)


def test_ensure_txt_suffix_keeps_directory(tmp_path):
    assert ensure_txt_suffix(tmp_path / "notes") == tmp_path / "notes.txt"


def test_ensure_txt_suffix_checks_name_not_directory(tmp_path):
    directory = tmp_path / "archive.txt"
    assert ensure_txt_suffix(directory / "notes") == directory / "notes.txt"


def test_new_document_title():
    document = Document()
    assert document.filename is None
    assert document.title == "Simple Text Editor"


def test_title_uses_file_name_only(tmp_path):
    document = Document(tmp_path / "letter.txt")
    assert document.title == "Simple Text Editor - letter.txt"


def test_load_sets_filename(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("Line 1\nLine 2", encoding="utf-8")

    document = Document()
    text = document.load(path)

    assert text == "Line 1\nLine 2"
    assert document.filename == path
    assert document.title == "Simple Text Editor - in.txt"


def test_load_is_verbatim(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"one\r\ntwo\r\n  trailing  ")

    assert read_text_file(path) == "one\r\ntwo\r\n  trailing  "


def test_load_nonexistent_file_raises(tmp_path):
    document = Document(tmp_path / "current.txt")

    with pytest.raises(FileOperationError) as excinfo:
        document.load(tmp_path / "missing.txt")

    error = excinfo.value
    assert isinstance(error, TextpadError)
    assert error.operation == "opening"
    assert error.path == tmp_path / "missing.txt"
    assert str(error).startswith("Error opening file: ")
    # Document is left unchanged
    assert document.filename == tmp_path / "current.txt"


def test_load_directory_raises(tmp_path):
    with pytest.raises(FileOperationError):
        Document().load(tmp_path)


def test_load_invalid_utf8_raises(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")

    with pytest.raises(FileOperationError):
        read_text_file(path)


def test_new_forgets_filename(tmp_path):
    document = Document(tmp_path / "a.txt")
    document.new()
    assert document.filename is None
    assert document.title == "Simple Text Editor"


def test_error_message_includes_reason():
    error = FileOperationError("saving", Path("x.txt"), "disk full")
    assert str(error) == "Error saving file: disk full"
    assert error.reason == "disk full"


def test_error_from_oserror_names_file():
    exc = FileNotFoundError(2, "No such file or directory", "/nope/x.txt")
    error = FileOperationError.from_exception("opening", Path("/nope/x.txt"), exc)
    assert error.reason == "/nope/x.txt (No such file or directory)"
