import io
import os

import pytest

from rcconfig.exceptions import FileAccessError, LineDecodeError
from rcconfig.loader import parse, parse_reader


def test_parse_reader_one_token_per_line():
    reader = io.BytesIO(b"--testparam\nfromfile\n--name=some value\n")
    tokens, errors = parse_reader(reader)
    assert tokens == ["--testparam", "fromfile", "--name=some value"]
    assert errors == []


def test_parse_reader_skips_comments_and_blank_lines():
    reader = io.BytesIO(b"# comment\n\n   \n\t# indented comment\n#--testparam\n")
    tokens, errors = parse_reader(reader)
    assert tokens == []
    assert errors == []


def test_parse_reader_trims_whitespace_and_terminators():
    reader = io.BytesIO(b"  --testparam  \r\n\tvalue\r\nlast")
    tokens, _ = parse_reader(reader)
    assert tokens == ["--testparam", "value", "last"]


def test_parse_reader_trims_unicode_whitespace():
    reader = io.BytesIO("--testparam\u00a0\n\u2003value\u3000\n # note\n".encode())
    tokens, errors = parse_reader(reader)
    assert tokens == ["--testparam", "value"]
    assert errors == []


def test_parse_reader_skips_undecodable_comments():
    reader = io.BytesIO(b"# caf\xe9\n--testswitch\n")
    tokens, errors = parse_reader(reader)
    assert tokens == ["--testswitch"]
    assert errors == []


def test_parse_reader_hash_inside_token_is_kept():
    reader = io.BytesIO(b"--color\nred#1\n")
    tokens, _ = parse_reader(reader)
    assert tokens == ["--color", "red#1"]


def test_parse_reader_collects_line_errors():
    reader = io.BytesIO(b"--testparam\n\xff\xfe\nvalue\nnul\x00byte\n--testswitch\n")
    tokens, errors = parse_reader(reader)
    assert tokens == ["--testparam", "value", "--testswitch"]
    assert [error.line_number for error in errors] == [2, 4]
    assert all(isinstance(error, LineDecodeError) for error in errors)
    assert isinstance(errors[0].cause, UnicodeDecodeError)
    assert str(errors[0]).startswith("2: ")


def test_parse_reader_line_numbers_count_skipped_lines():
    reader = io.BytesIO(b"# header\n\n\xff\n")
    _, errors = parse_reader(reader)
    assert errors[0].line_number == 3


def test_parse_reader_encoding():
    reader = io.BytesIO("--name\ncafé\n".encode("latin-1"))
    tokens, errors = parse_reader(reader, encoding="latin-1")
    assert tokens == ["--name", "café"]
    assert errors == []


def test_parse_file(tmp_path):
    config_file = tmp_path / "config1.conf"
    config_file.write_text("--testparam\nfromfile\n--testparam2\nfromfile2\n")
    tokens, errors = parse(config_file)
    assert tokens == ["--testparam", "fromfile", "--testparam2", "fromfile2"]
    assert errors == []


def test_parse_missing_file(tmp_path):
    missing = tmp_path / "missing.conf"
    with pytest.raises(FileAccessError) as excinfo:
        parse(missing)
    assert excinfo.value.path == str(missing)
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert str(missing) in str(excinfo.value)


def test_parse_directory(tmp_path):
    with pytest.raises(FileAccessError):
        parse(tmp_path)


def test_parse_path_below_regular_file(tmp_path):
    parent = tmp_path / "not-a-directory"
    parent.write_text("")
    with pytest.raises(FileAccessError) as excinfo:
        parse(parent / "config1.conf")
    assert isinstance(excinfo.value.cause, NotADirectoryError)


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="permissions are not enforced for root",
)
def test_parse_unreadable_file(tmp_path):
    config_file = tmp_path / "locked.conf"
    config_file.write_text("--testparam\nvalue\n")
    config_file.chmod(0)
    try:
        with pytest.raises(FileAccessError):
            parse(config_file)
    finally:
        config_file.chmod(0o600)
