"""Hourly doctor appointments booked into a text file."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

DEFAULT_FILE = "appointment.dat"
SLOTS = "ABCDEFGHIJKLM"
FIRST_HOUR = 9


class InvalidSlot(ValueError):
    """Raised for a slot letter outside the menu."""


class SlotBooked(ValueError):
    """Raised when the chosen hour is already booked."""


def slot_hour(slot: str) -> int:
    """Return the hour of the day a slot letter stands for."""
    if not isinstance(slot, str) or len(slot) != 1 or slot not in SLOTS:
        raise InvalidSlot(
            f"Invalid Selection: please select a value from {SLOTS[0]}-{SLOTS[-1]}"
        )
    return FIRST_HOUR + SLOTS.index(slot)


class AppointmentBook:
    """Bookings stored one per line as '<slot>:<name>'."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_FILE) -> None:
        self.path = Path(path)

    def booked(self) -> dict[str, str]:
        """Booked slots mapped to the patient's name."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        result: dict[str, str] = {}
        for line in text.splitlines():
            slot, _, name = line.partition(":")
            if slot in SLOTS and len(slot) == 1:
                result.setdefault(slot, name)
        return result

    def book(self, slot: str, name: str) -> int:
        """Book a slot for a patient; return its hour."""
        hour = slot_hour(slot)
        name = name.strip()
        if not name or "\n" in name or "\r" in name:
            raise ValueError("name must be a non-empty single line")
        if slot in self.booked():
            raise SlotBooked("Appointment is already booked for this hour")
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(f"{slot}:{name}\n")
        return hour

    def summary(self) -> str:
        booked = self.booked()
        return "\n".join(
            f"{slot} -> {slot_hour(slot):02d} - {'Booked' if slot in booked else 'Available'}"
            for slot in SLOTS
        )


def _book(book: AppointmentBook) -> None:
    print("\n--------Book Your Appointment-------")
    while True:
        print("\n Appointment Summary by Hours:")
        print(book.summary())
        choice = input("\n\n Input your choice: ").strip()
        try:
            slot_hour(choice)
        except InvalidSlot as exc:
            print(f"\n Error : {exc}")
            continue
        if choice in book.booked():
            print("\n Error : Appointment is already booked for this Hour")
            print(" Please Select different time!!")
            continue
        break
    name = input("\n Enter Your First Name: ")
    try:
        hour = book.book(choice, name)
    except ValueError as exc:
        print(f"\n Error while saving booking: {exc}")
        return
    print(f"\n Appointment booked for Hours: {hour} successfully!!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Doctor appointment booking.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="appointment file")
    args = parser.parse_args(argv)
    book = AppointmentBook(args.file)
    try:
        while True:
            print("\t\tDoctor Appointment System")
            print("--------------------------------------------\n")
            print("1. Book Appointment\n2. Check Existing Appointment\n0. Exit")
            choice = input("\n Enter your choice: ").strip()
            if choice == "1":
                _book(book)
            elif choice == "2":
                print("\n -------------Appointments Summary-------------")
                print(book.summary())
            elif choice == "0":
                while True:
                    answer = input("\n Are you sure, you want to exit? (Y/N)").strip()
                    if answer[:1] in ("y", "Y"):
                        return 0
                    if answer[:1] in ("n", "N"):
                        break
                    print("Invalid choice!!!")
            else:
                print("\n Invalid choice. Enter Again")
    except EOFError:
        return 0