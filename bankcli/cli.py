"""Interactive menu for registering bank accounts."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from bankcli.accounts import (
    MASTER_ACCOUNT_NUMBER,
    MASTER_BALANCE,
    Account,
    AccountNumberError,
    create_pin_hash,
    generate_account_number,
    prompt_account_type,
    prompt_holder_name,
    prompt_pin,
    prompt_user_id,
)
from bankcli.utils import InputClosed, clear_screen, read_int

REGISTER = 1
EXIT = 2
_VALID_ACTIONS = frozenset({REGISTER, EXIT, 98})

INFO_FILE = "account_info.csv"
BALANCE_FILE = "account_balance.csv"


def choose_action(stream: TextIO, out: TextIO) -> int:
    """Show the menu and return a valid action number."""
    out.write("Choose an action\n1. Register New Account\n2. Exit Program\n")
    while True:
        action = read_int(stream, out)
        if action in _VALID_ACTIONS:
            return action
        out.write("Please enter a valid case\n")


def register_account(database_dir: str | Path, stream: TextIO, out: TextIO) -> bool:
    """Collect a new account and append it to the tables.

    Returns False when the program should stop, True otherwise.
    """
    database_dir = Path(database_dir)
    out.write("registering account\n")

    out.write("Enter your name\n")
    holder_name = prompt_holder_name(stream, out)
    clear_screen(out)

    out.write("Enter USER ID(10-characters)\n")
    user_id = prompt_user_id(stream, out)
    clear_screen(out)

    out.write("Enter your PIN(6-digit)\n")
    pin_hash, pin_salt = create_pin_hash(prompt_pin(stream, out))
    clear_screen(out)

    out.write(
        "Enter the account type that you want to create\n"
        "S: Saving Accounts\n"
        "C: Checking Accounts\n"
    )
    account_type = prompt_account_type(stream, out)
    clear_screen(out)

    try:
        number = generate_account_number(database_dir / INFO_FILE)
    except AccountNumberError as exc:
        out.write(f"{exc}\nSystem Error\n")
        return True

    is_master = number == MASTER_ACCOUNT_NUMBER
    account = Account(
        account_number=number,
        holder_name=holder_name,
        user_id=user_id,
        pin_hash=pin_hash,
        pin_salt=pin_salt,
        account_type=account_type,
        balance=MASTER_BALANCE if is_master else 0,
    )

    try:
        info = (database_dir / INFO_FILE).open("a", encoding="utf-8")
    except OSError as exc:
        out.write(f"Could not open file: {exc}\n")
        return False
    with info:
        try:
            balance = (database_dir / BALANCE_FILE).open("a", encoding="utf-8")
        except OSError as exc:
            out.write(f"Could not open file: {exc}\n")
            return True
        with balance:
            info.write("\n" + account.info_record())
            balance.write("\n" + account.balance_record())

    if is_master:
        out.write(
            "Congratulation! You successfully created a MASTER account.\n"
            "Your initial balance is set to 9999999999.00\n"
        )
    else:
        out.write(
            "Congratulation! You successfully created an account.\n"
            "Your initial balance is set to 0.00\n"
        )
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the account menu until the user exits."""
    parser = argparse.ArgumentParser(prog="bankcli", description="Register bank accounts.")
    parser.add_argument("--database", default="dataBase", help="directory holding the tables")
    args = parser.parse_args(argv)

    stream, out = sys.stdin, sys.stdout
    clear_screen(out)
    try:
        while True:
            action = choose_action(stream, out)
            if action == REGISTER:
                clear_screen(out)
                if not register_account(args.database, stream, out):
                    return 0
            elif action == EXIT:
                clear_screen(out)
                return 0
    except InputClosed as exc:
        out.write(f"{exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())