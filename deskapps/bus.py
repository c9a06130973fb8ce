"""Bus seat reservations for a small fleet."""

from __future__ import annotations

from dataclasses import dataclass, field

SEAT_ROWS = 8
SEATS_PER_ROW = 4
SEAT_COUNT = SEAT_ROWS * SEATS_PER_ROW
MAX_BUSES = 10
_SEPARATOR = "*" * 80


class UnknownBus(LookupError):
    """Raised when no bus has the given number."""


class InvalidSeat(ValueError):
    """Raised for a seat number outside the bus."""


class SeatTaken(ValueError):
    """Raised when a seat is already reserved."""


@dataclass
class Bus:
    """A bus with its route and a seat map."""

    number: str
    driver: str
    arrival: str
    departure: str
    origin: str
    destination: str
    seats: list[str | None] = field(default_factory=lambda: [None] * SEAT_COUNT)

    def empty_seats(self) -> list[int]:
        return [n for n, name in enumerate(self.seats, start=1) if name is None]

    def reserved_seats(self) -> dict[int, str]:
        return {n: name for n, name in enumerate(self.seats, start=1) if name is not None}

    def describe(self) -> str:
        return (
            f"Bus no: \t{self.number}\n"
            f"Driver: \t{self.driver}\t\tArrival time: \t{self.arrival}\n"
            f"Departure time: {self.departure}\n"
            f"From: \t\t{self.origin}\t\tTo: \t\t{self.destination}"
        )

    def seat_chart(self) -> str:
        rows = []
        for start in range(0, SEAT_COUNT, SEATS_PER_ROW):
            row = self.seats[start : start + SEATS_PER_ROW]
            rows.append(
                "".join(
                    f"{start + offset + 1:>5}.{name or 'Empty':>10}"
                    for offset, name in enumerate(row)
                )
            )
        rows.append("")
        rows.append(f"There are {len(self.empty_seats())} seats empty in Bus no: {self.number}")
        return "\n".join(rows)


class Fleet:
    """The installed buses, in installation order."""

    def __init__(self, capacity: int = MAX_BUSES) -> None:
        self.capacity = capacity
        self.buses: list[Bus] = []

    def install(self, bus: Bus) -> None:
        if len(self.buses) >= self.capacity:
            raise ValueError(f"the fleet holds at most {self.capacity} buses")
        self.buses.append(bus)

    def find(self, number: str) -> Bus:
        for bus in self.buses:
            if bus.number == number:
                return bus
        raise UnknownBus(f"no bus numbered {number!r}")

    def reserve(self, number: str, seat: int, passenger: str) -> Bus:
        bus = self.find(number)
        if not 1 <= seat <= SEAT_COUNT:
            raise InvalidSeat(f"There are only {SEAT_COUNT} seats available in the bus.")
        if not passenger.strip():
            raise ValueError("passenger name must not be empty")
        if bus.seats[seat - 1] is not None:
            raise SeatTaken(f"The seat no. {seat} is already reserved.")
        bus.seats[seat - 1] = passenger.strip()
        return bus

    def describe_all(self) -> str:
        return "\n".join(f"{_SEPARATOR}\n{bus.describe()}\n{_SEPARATOR}" for bus in self.buses)


_MENU = (
    "\n\n\t\t\t1.Install\n\t\t\t2.Reservation\n\t\t\t3.Show\n\t\t\t"
    "4.Buses Available.\n\t\t\t5.Exit\n\t\t\tEnter your choice:->  "
)


def _install(fleet: Fleet) -> None:
    bus = Bus(
        number=input("Enter bus no: ").strip(),
        driver=input("\nEnter Driver's Name: ").strip(),
        arrival=input("\nArrival time: ").strip(),
        departure=input("\nDeparture: ").strip(),
        origin=input("\nFrom: \t\t\t").strip(),
        destination=input("\nTo: \t\t\t").strip(),
    )
    fleet.install(bus)


def _reserve(fleet: Fleet) -> None:
    while True:
        number = input("Bus no: ").strip()
        try:
            fleet.find(number)
            break
        except UnknownBus:
            print("Enter correct bus number")
    while True:
        try:
            seat = int(input("\nSeat Number: ").strip())
            fleet.reserve(number, seat, input("Enter passenger's name: "))
            return
        except (InvalidSeat, SeatTaken) as exc:
            print(exc)
        except ValueError as exc:
            print(f"Invalid input: {exc}")


def _show(fleet: Fleet) -> None:
    try:
        bus = fleet.find(input("Enter bus no: ").strip())
    except UnknownBus:
        print("Enter correct bus no")
        return
    print(f"{_SEPARATOR}\n{bus.describe()}\n{_SEPARATOR}")
    print(bus.seat_chart())
    for seat, name in bus.reserved_seats().items():
        print(f"The seat no {seat} is reserved for {name}.")


def main(argv: list[str] | None = None) -> int:
    fleet = Fleet()
    try:
        while True:
            choice = input(_MENU).strip()
            if choice == "1":
                try:
                    _install(fleet)
                except ValueError as exc:
                    print(exc)
            elif choice == "2":
                _reserve(fleet)
            elif choice == "3":
                _show(fleet)
            elif choice == "4":
                print(fleet.describe_all())
            elif choice == "5":
                return 0
    except EOFError:
        return 0