"""Bank account records stored as fixed-size binary entries in one file."""

from __future__ import annotations

import argparse
import os
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

# account number (20), first name (10), last name (15), padding, float32 balance
_RECORD = struct.Struct("<20s10s15s3xf")
RECORD_SIZE = _RECORD.size
DEFAULT_FILE = "record.bank"

_NUMBER_WIDTH = 20
_FIRST_WIDTH = 10
_LAST_WIDTH = 15


def _pack_text(value: str, width: int, field_name: str) -> bytes:
    raw = value.encode()
    if len(raw) >= width or b"\0" in raw:
        raise ValueError(f"{field_name} must be at most {width - 1} bytes without NUL")
    return raw


def _unpack_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(errors="replace")


class RecordNotFound(LookupError):
    """Raised when a record number is outside the stored range."""

    def __init__(self, number: int, count: int) -> None:
        super().__init__(f"record {number} not found; the file holds {count} records")
        self.number = number
        self.count = count


@dataclass
class Account:
    """One bank account."""

    number: str
    first_name: str
    last_name: str
    balance: float

    def to_bytes(self) -> bytes:
        return _RECORD.pack(
            _pack_text(self.number, _NUMBER_WIDTH, "account number"),
            _pack_text(self.first_name, _FIRST_WIDTH, "first name"),
            _pack_text(self.last_name, _LAST_WIDTH, "last name"),
            self.balance,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Account:
        if len(data) != RECORD_SIZE:
            raise ValueError(f"an account record is {RECORD_SIZE} bytes, got {len(data)}")
        number, first, last, balance = _RECORD.unpack(data)
        return cls(_unpack_text(number), _unpack_text(first), _unpack_text(last), balance)

    def describe(self) -> str:
        return (
            f"Account Number: {self.number}\n"
            f"First Name: {self.first_name}\n"
            f"Last Name: {self.last_name}\n"
            f"Current Balance: {self.balance:.6g}"
        )


class AccountStore:
    """A file of account records addressed by 1-based record number."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_FILE) -> None:
        self.path = Path(path)

    def append(self, account: Account) -> None:
        with self.path.open("ab") as fh:
            fh.write(account.to_bytes())

    def records(self) -> Iterator[Account]:
        with self.path.open("rb") as fh:
            while len(chunk := fh.read(RECORD_SIZE)) == RECORD_SIZE:
                yield Account.from_bytes(chunk)

    def count(self) -> int:
        return self.path.stat().st_size // RECORD_SIZE

    def _check(self, number: int) -> None:
        count = self.count()
        if not 1 <= number <= count:
            raise RecordNotFound(number, count)

    def get(self, number: int) -> Account:
        self._check(number)
        with self.path.open("rb") as fh:
            fh.seek((number - 1) * RECORD_SIZE)
            return Account.from_bytes(fh.read(RECORD_SIZE))

    def replace(self, number: int, account: Account) -> None:
        self._check(number)
        data = account.to_bytes()
        with self.path.open("r+b") as fh:
            fh.seek((number - 1) * RECORD_SIZE)
            fh.write(data)

    def delete(self, number: int) -> Account:
        self._check(number)
        kept = list(self.records())
        removed = kept.pop(number - 1)
        tmp = self.path.with_name(self.path.name + ".tmp")
        with tmp.open("wb") as fh:
            for account in kept:
                fh.write(account.to_bytes())
        os.replace(tmp, self.path)
        return removed


_MENU = (
    "Select one option below "
    "\n\t1-->Add record to file "
    "\n\t2-->Show records in file "
    "\n\t3-->Search record from file"
    "\n\t4-->Update record"
    "\n\t5-->Delete record"
    "\n\t6-->Quit"
    "\nEnter your choice: "
)


def _read_account() -> Account:
    number = input("\n Enter Account Number: ").strip()
    first = input("\n Enter First Name: ").strip()
    last = input("\n Enter Last Name: ").strip()
    balance = float(input("\n Enter Balance: ").strip())
    return Account(number, first, last, balance)


def _ask_record_number(store: AccountStore, action: str) -> int:
    print(f"\n There are {store.count()} records in the file")
    return int(input(f"\n Enter record number to {action}: ").strip())


def _run(store: AccountStore) -> int:
    print("*** Account information System")
    while True:
        choice = input(_MENU).strip()
        try:
            if choice == "1":
                store.append(_read_account())
            elif choice == "2":
                print("\n***Data from file***")
                for account in store.records():
                    print(account.describe())
            elif choice == "3":
                number = _ask_record_number(store, "search")
                print(store.get(number).describe())
            elif choice == "4":
                number = _ask_record_number(store, "edit")
                print(f"Record {number} has following data")
                print(store.get(number).describe())
                print("\n Enter data to modify:")
                store.replace(number, _read_account())
            elif choice == "5":
                number = _ask_record_number(store, "delete")
                store.delete(number)
            elif choice == "6":
                return 0
            else:
                print("\nEnter correct choice")
                return 0
        except FileNotFoundError:
            print("Error in Opening! File Not Found!!")
        except RecordNotFound as exc:
            print(exc)
        except ValueError as exc:
            print(f"Invalid input: {exc}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage bank account records.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="record file")
    args = parser.parse_args(argv)
    try:
        return _run(AccountStore(args.file))
    except EOFError:
        return 0