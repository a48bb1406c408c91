# bankcli

A small interactive terminal program for registering bank accounts. Account
details go into plain CSV files, one line for each account.

## Installing

```
pip install .
```

## Running

```
bankcli
```

By default the tables are looked for in `dataBase/` under the current
directory. Another directory can be given:

```
bankcli --database path/to/tables
```

The program clears the screen and shows a menu:

```
Choose an action
1. Register New Account
2. Exit Program
```

Choosing `2` exits. Choosing `1` starts registration, which asks, in order, for:

1. **Holder name**: ASCII letters and spaces only, up to 50 characters, not
   empty. The name is stored in upper case.
2. **User ID**: any text of 1 to 10 characters.
3. **PIN**: exactly 6 digits. The PIN itself is never stored. A random
   16-byte salt is generated, and the SHA-256 hash of the PIN followed by the
   salt is kept as hex, together with the salt as hex.
4. **Account type**: a line starting with `S` (savings) or `C` (checking),
   in either case.

If an answer is not valid, a message is shown and the question is asked again.
If the input ends while an answer is still wanted, the program stops with exit
status 1.

After that the account gets a 10-digit account number that no existing
account has. The first account registered becomes the master account: its
number is `0000000000` and its starting balance is 9999999999.00. Every
account registered after it gets a random number and starts with a balance of
0.00. When a number cannot be assigned (the info table is missing or
unreadable, or a line in it is malformed), `System Error` is printed and the
menu comes back.

## Data files

In the database directory:

- `account_info.csv`: one header line, then one line for each account:
  account number, holder name, user ID, PIN hash, PIN salt and account type
  (`S` or `C`).
- `account_balance.csv`: one line for each account: the account number and
  the balance to two decimal places.

`account_info.csv` must exist, holding its header line, before the first
account is registered. Each new record is appended starting with a newline,
so the header line must not end with one. `account_balance.csv` is created if
it does not exist.

## What it does not do

The program only registers accounts. It has no log-in, no deposits,
withdrawals or transfers, no way to view or change a balance, and no way to
delete an account. The CSV files are the whole store; nothing reads them back
except to find the account numbers already in use.

## Using it as a library

- `bankcli.utils.hash_pin(pin, salt)` returns the hex SHA-256 of a 6-character
  PIN followed by a 16-byte salt; other lengths raise `ValueError`.
- `bankcli.utils.generate_salt()` returns 16 fresh random bytes.
- `bankcli.utils.line_count(path)` counts a file's lines, as the account
  number check does.
- `bankcli.accounts.create_pin_hash(pin)` returns a `(hash_hex, salt_hex)`
  pair made with a new salt.
- `bankcli.accounts.generate_account_number(path, rng=None)` picks an account
  number not yet used in an account-info file, using the given
  `random.Random` if one is passed. It raises `AccountNumberError` when no
  number can be assigned.
- `bankcli.accounts.Account` holds one account, with an `AccountType` of
  `SAVING` or `CHECKING`. `info_record()` and `balance_record()` give the CSV
  lines that are written for it.
- `bankcli.accounts.prompt_holder_name`, `prompt_user_id`, `prompt_pin` and
  `prompt_account_type` each take an input stream and an output stream and
  ask until a valid answer is given.
- `bankcli.cli.register_account(database_dir, stream, out)` runs the whole
  registration dialogue against any text streams. It returns `False` only
  when the info table cannot be opened for appending, meaning the program
  should stop.