"""Student registration and login for an attendance register."""

from __future__ import annotations

import argparse
import os
from dataclasses import astuple, dataclass
from pathlib import Path

DB_FILE = "db.dat"
RECORD_SUFFIX = ".dat"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password"

_LOGIN_PROMPTS = ("\n Enter username: ", "\n Enter password: ")
_FORM_PROMPTS = (
    "\n Enter Name: ",
    "\n Enter Username: ",
    "\n Enter password: ",
    "\n Enter rollno: ",
    "\n Enter Address: ",
    "\n Enter Father's name: ",
    "\n Enter Mother's name: ",
)


class UsernameTaken(ValueError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(
            f"Username {username!r} already registered. Please choose another username"
        )
        self.username = username


@dataclass
class Student:
    """A registered student's details."""

    name: str
    username: str
    password: str
    roll_no: str
    address: str
    father: str
    mother: str


def is_admin(username: str, password: str) -> bool:
    """Return True for the administrator's credentials."""
    return username == ADMIN_USERNAME and password == ADMIN_PASSWORD


def _validate(student: Student) -> None:
    username = student.username
    if not username or any(ch.isspace() for ch in username) or any(
        sep in username for sep in ("/", "\\")
    ):
        raise ValueError("username must be a single word without path separators")
    for value in astuple(student):
        if "\n" in value or "\r" in value:
            raise ValueError("student details must not contain line breaks")


class StudentRegistry:
    """Students kept as one file each, listed in a shared index file."""

    def __init__(self, directory: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(directory)
        self.db_path = self.directory / DB_FILE

    def _record_path(self, username: str) -> Path:
        return self.directory / f"{username}{RECORD_SUFFIX}"

    def usernames(self) -> list[str]:
        """Registered usernames in registration order."""
        try:
            text = self.db_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        return [
            line.removesuffix(RECORD_SUFFIX) for line in text.splitlines() if line.strip()
        ]

    def register(self, student: Student) -> Path:
        """Add a student; return the path of the student's record file."""
        _validate(student)
        if student.username in self.usernames():
            raise UsernameTaken(student.username)
        self.directory.mkdir(parents=True, exist_ok=True)
        with self.db_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{student.username}{RECORD_SUFFIX}\n")
        path = self._record_path(student.username)
        path.write_text("".join(f"{value}\n" for value in astuple(student)), encoding="utf-8")
        return path

    def load(self, username: str) -> Student:
        """Read a registered student's record."""
        if username not in self.usernames():
            raise LookupError(f"no student registered as {username!r}")
        lines = self._record_path(username).read_text(encoding="utf-8").splitlines()
        if len(lines) < 7:
            raise ValueError(f"record of {username!r} is incomplete")
        return Student(*lines[:7])

    def check_credentials(self, username: str, password: str) -> bool:
        try:
            return self.load(username).password == password
        except (LookupError, ValueError, OSError):
            return False


def _ask_all(prompts: tuple[str, ...]) -> list[str]:
    return [input(prompt).strip() for prompt in prompts]


def _register(registry: StudentRegistry) -> None:
    print("\n ---------- Form to Register Student------------ ")
    student = Student(*_ask_all(_FORM_PROMPTS))
    try:
        registry.register(student)
    except ValueError as exc:
        print(f"\n {exc}")
        return
    print("\n Student Registered successfully!!")


def _admin_view(registry: StudentRegistry) -> None:
    while True:
        print("\n 1 Register a student")
        print(" 2 List students registered by username")
        print(" 3 List students with their details")
        print(" 0 Go Back <-")
        choice = input("\n Enter your choice: ").strip()
        if choice == "1":
            _register(registry)
        elif choice == "2":
            print("\n List of all students registered")
            names = registry.usernames()
            print("\n".join(names) if names else "\n No Record Found!!")
        elif choice == "3":
            names = registry.usernames()
            if not names:
                print("\n No Record Found!!")
            for username in names:
                try:
                    student = registry.load(username)
                except (LookupError, ValueError, OSError):
                    continue
                print(f"{student.username}: {student.name}, roll no {student.roll_no}")
        elif choice == "0":
            return
        else:
            print("\n Invalid choice. Enter your choice again")


def _admin_login(registry: StudentRegistry) -> None:
    print("\n ------------- Admin Login -----------")
    username, password = _ask_all(_LOGIN_PROMPTS)
    if is_admin(username, password):
        _admin_view(registry)
    else:
        print("\n Error! Invalid Credentials....")


def _student_login(registry: StudentRegistry) -> None:
    print("\n ------------- Student Login -----------")
    username, password = _ask_all(_LOGIN_PROMPTS)
    if not registry.check_credentials(username, password):
        print("\n Invalid credentials!!")
        return
    student = registry.load(username)
    print(f"\n Welcome {student.name} (roll no {student.roll_no})")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Attendance management system.")
    parser.add_argument("--dir", default=".", help="directory holding the records")
    args = parser.parse_args(argv)
    registry = StudentRegistry(args.dir)
    try:
        while True:
            print("\n Attendance Management System ")
            print("--------------------------------------")
            print("1. Student Login\n2. Admin Login\n0. Exit")
            choice = input("\n Enter your choice: ").strip()
            if choice == "1":
                _student_login(registry)
            elif choice == "2":
                _admin_login(registry)
            elif choice == "0":
                while True:
                    answer = input("\n Are you sure, you want to exit? (Y/N): ").strip()
                    if answer[:1] in ("y", "Y"):
                        return 0
                    if answer[:1] in ("n", "N"):
                        break
                    print("\n Invalid choice!!!")
            else:
                print("\n Invalid choice. Enter again")
    except EOFError:
        return 0