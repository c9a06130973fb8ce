import pytest

from deskapps.appointment import (
    SLOTS,
    AppointmentBook,
    InvalidSlot,
    SlotBooked,
    main,
    slot_hour,
)


def test_slot_hours_span_the_day():
    assert slot_hour("A") == 9
    assert slot_hour("M") == 21


def test_slot_hours_are_consecutive():
    hours = [slot_hour(slot) for slot in SLOTS]
    assert hours == list(range(hours[0], hours[0] + len(SLOTS)))


@pytest.mark.parametrize("slot", ["N", "Z", "a", "", "AB", "1"])
def test_invalid_slot(slot):
    with pytest.raises(InvalidSlot):
        slot_hour(slot)


def test_empty_book(tmp_path):
    book = AppointmentBook(tmp_path / "appointment.dat")
    assert book.booked() == {}
    assert all(line.endswith("Available") for line in book.summary().splitlines())


def test_book_and_read_back(tmp_path):
    book = AppointmentBook(tmp_path / "appointment.dat")
    assert book.book("C", "Ann") == slot_hour("C")
    assert book.booked() == {"C": "Ann"}
    assert (tmp_path / "appointment.dat").read_text() == "C:Ann\n"


def test_double_booking_rejected(tmp_path):
    book = AppointmentBook(tmp_path / "appointment.dat")
    book.book("B", "Ann")
    with pytest.raises(SlotBooked):
        book.book("B", "Ben")
    assert book.booked() == {"B": "Ann"}


def test_book_invalid_slot(tmp_path):
    book = AppointmentBook(tmp_path / "appointment.dat")
    with pytest.raises(InvalidSlot):
        book.book("Z", "Ann")


def test_book_empty_name(tmp_path):
    book = AppointmentBook(tmp_path / "appointment.dat")
    with pytest.raises(ValueError):
        book.book("A", "  ")


def test_summary_marks_booked(tmp_path):
    book = AppointmentBook(tmp_path / "appointment.dat")
    book.book("A", "Ann")
    lines = book.summary().splitlines()
    assert len(lines) == len(SLOTS)
    assert lines[0] == "A -> 09 - Booked"
    assert lines[1].endswith("Available")


def test_main_books_slot(tmp_path, monkeypatch):
    path = tmp_path / "appointment.dat"
    answers = iter(["1", "Z", "D", "Ann", "0", "y"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["--file", str(path)]) == 0
    assert AppointmentBook(path).booked() == {"D": "Ann"}