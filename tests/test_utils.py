import io

import pytest

from bankcli.utils import (
    InputClosed,
    LengthCheck,
    clear_screen,
    generate_salt,
    hash_pin,
    line_count,
    read_char,
    read_int,
    read_line,
    read_string,
)


def test_read_line_strips_newline():
    assert read_line(io.StringIO("hello\nworld\n")) == "hello"


def test_read_line_raises_at_end():
    with pytest.raises(InputClosed):
        read_line(io.StringIO(""))


def test_read_int_retries_on_text():
    out = io.StringIO()
    assert read_int(io.StringIO("abc\n12\n"), out) == 12
    assert "Invalid input. Please enter a number: " in out.getvalue()


def test_read_int_rejects_trailing_text():
    out = io.StringIO()
    assert read_int(io.StringIO("12 x\n7\n"), out) == 7
    assert "Invalid input. Please enter only numbers: " in out.getvalue()


def test_read_int_accepts_sign_and_spaces():
    assert read_int(io.StringIO("  -5  \n"), io.StringIO()) == -5


def test_read_int_empty_line_message():
    out = io.StringIO()
    assert read_int(io.StringIO("\n3\n"), out) == 3
    assert "only numbers" in out.getvalue()


def test_read_int_closed_input():
    with pytest.raises(InputClosed):
        read_int(io.StringIO("x\n"), io.StringIO())


def test_read_char_skips_non_letters():
    out = io.StringIO()
    assert read_char(io.StringIO("1\n\nb\n"), out) == "b"
    assert out.getvalue().count("Invalid input. Enter a character: ") == 2


def test_read_char_too_long():
    out = io.StringIO()
    assert read_char(io.StringIO("a" * 2000 + "\nq\n"), out) == "q"
    assert "Input too long" in out.getvalue()


@pytest.mark.parametrize(
    "text, check",
    [("12345", LengthCheck.SHORT), ("123456", LengthCheck.EXACT), ("1234567", LengthCheck.LONG)],
)
def test_read_string_length_check(text, check):
    result, value = read_string(6, io.StringIO(text + "\n"))
    assert result is check
    assert value == text


def test_salt_is_random_and_sized():
    first, second = generate_salt(), generate_salt()
    assert len(first) == 16
    assert first != second


def test_hash_pin_is_deterministic_hex():
    salt = bytes(16)
    digest = hash_pin("123456", salt)
    assert len(digest) == 64
    assert int(digest, 16) >= 0
    assert hash_pin("123456", salt) == digest


def test_hash_pin_depends_on_salt_and_pin():
    salt = bytes(16)
    assert hash_pin("123456", salt) != hash_pin("123456", bytes([1]) * 16)
    assert hash_pin("123456", salt) != hash_pin("654321", salt)


def test_hash_pin_rejects_bad_lengths():
    with pytest.raises(ValueError):
        hash_pin("12345", bytes(16))
    with pytest.raises(ValueError):
        hash_pin("123456", bytes(4))


def test_line_count(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("header\nrow")
    assert line_count(path) == 2
    path.write_text("")
    assert line_count(path) == 0
    path.write_text("a\nb\n")
    assert line_count(path) == 3


def test_line_count_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        line_count(tmp_path / "missing.csv")


def test_clear_screen():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[2J\033[H"