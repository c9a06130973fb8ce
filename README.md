# deskapps

A collection of small interactive console applications. Each one runs from a
numbered menu in the terminal. Some keep their data in plain files and some
keep it only in memory.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Applications

| Command | Options | What it does |
| --- | --- | --- |
| `deskapps-banking` | `--file` (default `record.bank`) | Adds, lists, searches, edits and deletes bank account records. Records are fixed-size binary entries and are addressed by a record number that starts at 1. |
| `deskapps-bus` | | Installs up to 10 buses and reserves their 32 seats. It shows a bus's seat chart and reservations and lists every bus installed. Data is kept in memory only. |
| `deskapps-casino` | | A dice game. You bet on a number from 1 to 10. A correct guess pays ten times the bet and a wrong guess loses the bet. |
| `deskapps-inventory` | `--file` (default `inventory.txt`) | Keeps products in a text file and records stock changes. Each change is appended to `<name>_transactions.txt` in the same directory. A change that would make the quantity negative is refused. |
| `deskapps-machine` | `--file` (default `inventory.txt`) | Displays the products registered in this session and adds products with a category (menu option 2). It saves the list to the file. Option 4 saves and exits. |
| `deskapps-attendance` | `--dir` (default `.`) | Student and admin logins. The admin registers students and lists them. Usernames are indexed in `db.dat`, with one `<username>.dat` file for each student. |
| `deskapps-appointment` | `--file` (default `appointment.dat`) | Books hourly doctor appointments from 09 to 21 as slots `A` to `M`, one booking per slot. |
| `deskapps-stock` | | An in-memory stock list. You can display it, add products by code, price and quantity, and remove them by code. |

The administrator of `deskapps-attendance` logs in with the username `admin`
and the password `password`.

## Using the modules directly

The logic behind each application can also be used from Python:

```python
from deskapps.appointment import AppointmentBook, slot_hour

book = AppointmentBook("appointment.dat")
book.book("C", "Ada")
print(slot_hour("C"))     # 11
print(book.summary())     # lines such as "C -> 11 - Booked"
```

```python
from deskapps.casino import Game

game = Game(balance=100)
result = game.play_round(bet=10, guess=7)
print(result.won, result.dice, result.balance)
```

```python
from deskapps.inventory import Inventory

inventory = Inventory("inventory.txt")
product = inventory.add_product("Widget", 5, 2.5)
inventory.record_transaction(product.code, -2, 2.5)
inventory.save()
print(inventory.format_table())
```

```python
from deskapps.banking import Account, AccountStore

store = AccountStore("record.bank")
store.append(Account("1001", "Ada", "Lovelace", 250.0))
print(store.count(), store.get(1).describe())
```

Each module defines its own exceptions for errors. Examples are
`RecordNotFound`, `UnknownBus`, `InvalidSeat`, `SeatTaken`, `BetTooLarge`,
`GuessOutOfRange`, `ProductNotFound`, `NegativeQuantity`, `UsernameTaken`,
`InvalidSlot` and `SlotBooked`.

## What it does not do

- `deskapps-attendance` does not record or count attendance. A student who
  logs in sees a greeting with their name and roll number, and nothing else.
  There is no way to delete students.
- `deskapps-machine` lists menu entries for projects, adding products to a
  project, transactions and a product overview, but these entries do nothing.
  It does not read an existing inventory file back. Each run starts empty and
  overwrites the file when it saves. `Machine` is a data class only and is not
  used from the menu.
- `deskapps-bus`, `deskapps-casino` and `deskapps-stock` do not save anything.
  Their data is lost when the program exits.