"""Console input helpers, PIN hashing and small file utilities."""

from __future__ import annotations

import enum
import hashlib
import re
import secrets
from pathlib import Path
from typing import TextIO

PIN_LENGTH = 6
SALT_LENGTH_BYTES = 16

# A line longer than this does not fit the fixed input buffer and is rejected.
_MAX_LINE = 1022

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class InputClosed(EOFError):
    """Raised when the input stream ends while a value is still wanted."""


class LengthCheck(enum.IntEnum):
    """How a line read from input compares with the wanted length."""

    SHORT = -1
    EXACT = 0
    LONG = 1


def read_line(stream: TextIO) -> str:
    """Read one line from ``stream`` without its newline."""
    line = stream.readline()
    if not line:
        raise InputClosed("Error reading input")
    return line[:-1] if line.endswith("\n") else line


def read_int(stream: TextIO, out: TextIO) -> int:
    """Keep asking until a line holds a single integer and nothing else."""
    while True:
        line = read_line(stream)
        match = _INT_PREFIX.match(line)
        if match is None:
            if line.strip():
                out.write("Invalid input. Please enter a number: ")
            else:
                out.write("Invalid input. Please enter only numbers: ")
            continue
        if line[match.end():].strip():
            out.write("Invalid input. Please enter only numbers: ")
            continue
        return int(match.group())


def read_char(stream: TextIO, out: TextIO) -> str:
    """Keep asking until a line starts with an ASCII letter; return that letter."""
    while True:
        line = read_line(stream)
        if len(line) > _MAX_LINE:
            out.write("Input too long. Enter a single character\n")
            continue
        first = line[:1]
        if first and first.isascii() and first.isalpha():
            return first
        out.write("Invalid input. Enter a character: ")


def read_string(max_length: int, stream: TextIO) -> tuple[LengthCheck, str]:
    """Read a line and report how its length compares with ``max_length``."""
    line = read_line(stream)
    if len(line) > _MAX_LINE or len(line) > max_length:
        return LengthCheck.LONG, line
    if len(line) < max_length:
        return LengthCheck.SHORT, line
    return LengthCheck.EXACT, line


def generate_salt() -> bytes:
    """Return a fresh random salt."""
    return secrets.token_bytes(SALT_LENGTH_BYTES)


def hash_pin(pin: str, salt: bytes) -> str:
    """Return the hex SHA-256 digest of the PIN followed by the salt."""
    pin_bytes = pin.encode("ascii")
    if len(pin_bytes) != PIN_LENGTH:
        raise ValueError(f"PIN must be {PIN_LENGTH} characters")
    if len(salt) != SALT_LENGTH_BYTES:
        raise ValueError(f"salt must be {SALT_LENGTH_BYTES} bytes")
    return hashlib.sha256(pin_bytes + salt).hexdigest()


def line_count(path: str | Path) -> int:
    """Count the lines of a file; a non-empty file always has a final line."""
    data = Path(path).read_bytes()
    if not data:
        return 0
    # A trailing newline still opens a (blank) final line.
    return data.count(b"\n") + 1


def clear_screen(out: TextIO) -> None:
    """Clear a terminal with ANSI escapes."""
    out.write("\033[2J\033[H")
    out.flush()