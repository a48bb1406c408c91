"""Account records and the prompts that collect them."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from bankcli.utils import (
    PIN_LENGTH,
    LengthCheck,
    generate_salt,
    hash_pin,
    line_count,
    read_char,
    read_string,
)

ACCOUNT_NUMBER_LENGTH = 10
USER_ID_LENGTH = 10
HOLDER_NAME_MAX = 50
MASTER_ACCOUNT_NUMBER = "0000000000"
MASTER_BALANCE = Decimal("9999999999")

_MAX_ATTEMPTS = 999999


class AccountType(str, enum.Enum):
    SAVING = "S"
    CHECKING = "C"


class AccountNumberError(Exception):
    """Raised when no account number can be assigned."""


@dataclass
class Account:
    account_number: str
    holder_name: str
    user_id: str
    pin_hash: str
    pin_salt: str
    account_type: AccountType
    balance: Decimal = Decimal("0")

    def info_record(self) -> str:
        """The account's line in the account info table."""
        return ",".join(
            [
                self.account_number,
                self.holder_name,
                self.user_id,
                self.pin_hash,
                self.pin_salt,
                self.account_type.value,
            ]
        )

    def balance_record(self) -> str:
        """The account's line in the balance table."""
        return f"{self.account_number},{Decimal(self.balance):.2f}"


def create_pin_hash(pin: str) -> tuple[str, str]:
    """Salt and hash a PIN; return the hex hash and the hex salt."""
    salt = generate_salt()
    return hash_pin(pin, salt), salt.hex()


def _is_name(text: str) -> bool:
    return all(ch.isascii() and (ch.isalpha() or ch.isspace()) for ch in text)


def prompt_holder_name(stream: TextIO, out: TextIO) -> str:
    """Ask for a name of letters and spaces; return it in upper case."""
    while True:
        check, name = read_string(HOLDER_NAME_MAX, stream)
        if check is LengthCheck.LONG:
            out.write("Input too long! Please enter your name\n")
        elif not name or not _is_name(name):
            out.write("Invalid input. Please enter your name\n")
        else:
            return name.upper()


def prompt_user_id(stream: TextIO, out: TextIO) -> str:
    """Ask for a non-empty user ID of at most ten characters."""
    while True:
        check, user_id = read_string(USER_ID_LENGTH, stream)
        if check is LengthCheck.LONG:
            out.write("Too long! please enter only 10 characters.\n")
        elif not user_id:
            out.write("Invalid input. Please enter user ID\n")
        else:
            return user_id


def prompt_pin(stream: TextIO, out: TextIO) -> str:
    """Ask for a PIN of exactly six digits."""
    while True:
        check, pin = read_string(PIN_LENGTH, stream)
        if check is LengthCheck.SHORT:
            out.write("Please enter 6 digits\n")
        elif check is LengthCheck.LONG:
            out.write("Please only enter 6 digits\n")
        elif not all(ch in "0123456789" for ch in pin):
            out.write("Please only enter numbers\n")
        else:
            return pin


def prompt_account_type(stream: TextIO, out: TextIO) -> AccountType:
    """Ask for S (saving) or C (checking)."""
    while True:
        choice = read_char(stream, out).upper()
        try:
            return AccountType(choice)
        except ValueError:
            out.write("Invalid choice. Please select a valid account type\n")


def _existing_numbers(path: Path, count: int) -> set[str]:
    numbers: set[str] = set()
    with path.open("r", encoding="utf-8") as handle:
        handle.readline()
        for index in range(1, count + 1):
            line = handle.readline()
            if not line:
                raise AccountNumberError(f"Failed reading file content from line {index}")
            tokens = [token for token in line.rstrip("\n").split(",") if token]
            if not tokens:
                raise AccountNumberError(f"Failed to tokenize line {index}")
            numbers.add(tokens[0])
    return numbers


def generate_account_number(path: str | Path, rng: random.Random | None = None) -> str:
    """Pick an account number not yet used in the account info table.

    The first account after the header row becomes the master account.
    """
    path = Path(path)
    rng = rng or random.Random()
    try:
        total_lines = line_count(path)
    except OSError as exc:
        raise AccountNumberError("Could not open file") from exc

    total_accounts = total_lines - 1
    if total_accounts == 0:
        return MASTER_ACCOUNT_NUMBER
    if total_accounts < 0:
        raise AccountNumberError("Account table has no header")

    try:
        existing = _existing_numbers(path, total_accounts)
    except OSError as exc:
        raise AccountNumberError("File could not be opened") from exc

    for _ in range(_MAX_ATTEMPTS - 1):
        candidate = "".join(str(rng.randrange(10)) for _ in range(ACCOUNT_NUMBER_LENGTH))
        if candidate not in existing:
            return candidate
    raise AccountNumberError("Failed to generate a unique account number")