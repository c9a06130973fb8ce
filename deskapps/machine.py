"""Machine build inventory: products, machines and a saved product list."""

from __future__ import annotations

import argparse
import itertools
import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_FILE = "inventory.txt"
_COLUMNS = (("Code", 10), ("Name", 20), ("Quantity", 15), ("Price", 15))
_machine_ids = itertools.count(1)


def _number(value: float) -> str:
    return f"{value:.6g}"


def _row(*cells: object) -> str:
    return "".join(f"{str(cell):>{width}}" for cell, (_, width) in zip(cells, _COLUMNS))


def _header() -> str:
    return _row(*(title for title, _ in _COLUMNS))


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class MachineProduct:
    """A part with a category; its code is assigned by the inventory."""

    name: str
    quantity: float
    price: float
    category: str
    code: int = 0

    def _row(self) -> str:
        return _row(self.code, self.name, _number(self.quantity), _number(self.price))

    def describe(self) -> str:
        return _header() + "\n" + self._row()


@dataclass
class Machine:
    """A machine belonging to a project, built from products."""

    name: str
    project_number: str
    machine_id: int = field(default_factory=lambda: next(_machine_ids))
    products: list[MachineProduct] = field(default_factory=list)


class MachineInventory:
    """Registered products, written to a text file."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_FILE) -> None:
        self.path = Path(path)
        self.products: list[MachineProduct] = []
        self._codes = itertools.count(1)

    def add_product(self, product: MachineProduct) -> MachineProduct:
        product.code = next(self._codes)
        self.products.append(product)
        return product

    def format_table(self) -> str:
        return "\n".join([_header(), *(p._row() for p in self.products)])

    def save(self) -> None:
        with self.path.open("w", encoding="utf-8") as fh:
            for p in self.products:
                fh.write(f"{p.code} {_quote(p.name)} {_number(p.quantity)} {_number(p.price)}\n")


def menu_text() -> str:
    return (
        "\n====== Inventory Menu ======\n"
        "1. Display Inventory\n"
        "2. Create Project\n"
        "3. Create Product\n"
        "4. Add Product to Project\n"
        "5. Record Transaction\n"
        "6. See all registered products\n"
        "=============================\n"
        "Enter your choice (1-4): "
    )


def _create(inventory: MachineInventory) -> None:
    print("\nEnter product details:")
    name = input("Name: ").strip()
    quantity = float(input("Initial Quantity: ").strip())
    price = float(input("Initial Price: ").strip())
    category = input("Product Category: ").strip()
    product = inventory.add_product(MachineProduct(name, quantity, price, category))
    print(f"Product added successfully! Code: {product.code}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register machine build products.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="inventory file")
    args = parser.parse_args(argv)
    inventory = MachineInventory(args.file)
    try:
        while True:
            choice = input(menu_text()).strip()
            try:
                if choice == "1":
                    print("\n=== Displaying Inventory ===")
                    print(inventory.format_table())
                    inventory.save()
                elif choice == "2":
                    _create(inventory)
                    inventory.save()
                elif choice == "4":
                    print("Saving data and exiting...")
                    inventory.save()
                    return 0
                else:
                    print("Invalid choice. Please enter a number between 1 and 4.")
            except ValueError as exc:
                print(f"Invalid input: {exc}")
    except EOFError:
        inventory.save()
        return 0