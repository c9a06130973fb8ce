"""Stock inventory with per-product transaction logs."""

from __future__ import annotations

import argparse
import os
import shlex
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

DEFAULT_FILE = "inventory.txt"
_COLUMNS = (("Code", 10), ("Name", 20), ("Quantity", 15), ("Price", 15))


def _number(value: float) -> str:
    return f"{value:.6g}"


def _row(*cells: object) -> str:
    return "".join(f"{str(cell):>{width}}" for cell, (_, width) in zip(cells, _COLUMNS))


def _header() -> str:
    return _row(*(title for title, _ in _COLUMNS))


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ProductNotFound(LookupError):
    """Raised when no product has the given code."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Product with code {code} not found in stock.")
        self.code = code


class NegativeQuantity(ValueError):
    """Raised when a transaction would leave a negative quantity."""

    def __init__(self, name: str, available: int) -> None:
        super().__init__(
            f"Cannot have negative quantity. Max quantity in stock for product {name} is: {available}"
        )
        self.name = name
        self.available = available


@dataclass(frozen=True)
class Transaction:
    """A change in stock of one product."""

    product_code: int
    quantity_change: int
    unit_price: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class Product:
    """A product in stock with its transaction history."""

    code: int
    name: str
    quantity: int
    price: float
    history: list[Transaction] = field(default_factory=list)

    def describe(self) -> str:
        return _header() + "\n" + _row(self.code, self.name, self.quantity, _number(self.price))

    def apply_transaction(self, quantity_change: int, unit_price: float | None = None) -> Transaction:
        """Change the quantity, update the price and log the change."""
        if self.quantity + quantity_change < 0:
            raise NegativeQuantity(self.name, self.quantity)
        price = self.price if unit_price is None else unit_price
        transaction = Transaction(self.code, quantity_change, price)
        self.history.append(transaction)
        self.quantity += quantity_change
        self.price = price
        return transaction

    def save_transaction(self, directory: str | os.PathLike[str] = ".") -> Path:
        """Append the latest transaction to the product's log file."""
        path = Path(directory) / f"{self.name}_transactions.txt"
        with path.open("a", encoding="utf-8") as fh:
            if self.history:
                last = self.history[-1]
                fh.write(
                    f"Quantity Change: {last.quantity_change}"
                    f", Total Quantity: {self.quantity}"
                    f", Updated Price: {_number(self.price)}"
                    f", Timestamp: {last.timestamp.ctime()}\n"
                )
        return path


class Inventory:
    """Products kept in a text file, one quoted record per line."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_FILE) -> None:
        self.path = Path(path)
        self.products: list[Product] = []
        self.next_code = 1
        self.load()

    @property
    def directory(self) -> Path:
        return self.path.parent

    def load(self) -> bool:
        """Read the inventory file; return False when it does not exist."""
        self.products = []
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            self.next_code = 1
            return False
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                code, name, quantity, price = shlex.split(line)
                product = Product(int(code), name, int(quantity), float(price))
            except ValueError:
                break
            self.products.append(product)
        self.next_code = max((p.code for p in self.products), default=0) + 1
        return True

    def save(self) -> None:
        with self.path.open("w", encoding="utf-8") as fh:
            for product in self.products:
                fh.write(
                    f"{product.code} {_quote(product.name)} "
                    f"{product.quantity} {_number(product.price)}\n"
                )

    def add_product(self, name: str, quantity: int, price: float) -> Product:
        """Create a product and record its initial stock."""
        if quantity < 0:
            raise NegativeQuantity(name, 0)
        product = Product(self.next_code, name, 0, price)
        self.next_code += 1
        self.products.append(product)
        self.record_transaction(product.code, quantity, price)
        return product

    def find(self, code: int) -> Product:
        for product in self.products:
            if product.code == code:
                return product
        raise ProductNotFound(code)

    def record_transaction(
        self, code: int, quantity_change: int, unit_price: float | None = None
    ) -> Transaction:
        product = self.find(code)
        transaction = product.apply_transaction(quantity_change, unit_price)
        product.save_transaction(self.directory)
        return transaction

    def format_table(self) -> str:
        lines = [_header()]
        lines.extend(_row(p.code, p.name, p.quantity, _number(p.price)) for p in self.products)
        return "\n".join(lines)


_MENU = (
    "\n====== Inventory Menu ======\n"
    "1. Display Inventory\n"
    "2. Add Product\n"
    "3. Record Transaction\n"
    "4. Save and Exit\n"
    "=============================\n"
    "Enter your choice (1-4): "
)


def _add(inventory: Inventory) -> None:
    print("\nEnter product details:")
    name = input("Name: ").strip()
    quantity = int(input("Initial Quantity: ").strip())
    price = float(input("Initial Price: ").strip())
    product = inventory.add_product(name, quantity, price)
    print(f"Product added successfully! Code: {product.code}")


def _transact(inventory: Inventory) -> None:
    code = int(input("\nEnter product code: ").strip())
    product = inventory.find(code)
    change = int(
        input("Enter quantity change (positive for income, negative for outcome): ").strip()
    )
    if product.quantity + change < 0:
        raise NegativeQuantity(product.name, product.quantity)
    price = float(input("Enter Price: ").strip()) if change > 0 else None
    inventory.record_transaction(code, change, price)
    print("Transaction recorded successfully!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Keep a product inventory.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="inventory file")
    args = parser.parse_args(argv)
    inventory = Inventory(args.file)
    if not inventory.path.exists():
        print("Inventory file not found. Creating a new inventory.")
    try:
        while True:
            choice = input(_MENU).strip()
            try:
                if choice == "1":
                    print("\n=== Displaying Inventory ===")
                    print(inventory.format_table())
                    inventory.save()
                elif choice == "2":
                    _add(inventory)
                    inventory.save()
                elif choice == "3":
                    _transact(inventory)
                    inventory.save()
                elif choice == "4":
                    print("Saving data and exiting...")
                    inventory.save()
                    return 0
                else:
                    print("Invalid choice. Please enter a number between 1 and 4.")
            except (ProductNotFound, NegativeQuantity) as exc:
                print(f"Error: {exc} Transaction not recorded.")
            except ValueError as exc:
                print(f"Invalid input: {exc}")
    except EOFError:
        inventory.save()
        return 0