"""A simple in-memory stock list with an interactive menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_RULE = "-------------------------"
_FOOTER = "----------------------------------------------"


@dataclass
class StockItem:
    """A product held in stock."""

    code: str
    price: float
    quantity: int
    description: str = ""
    serial_number: str = ""


def format_inventory(items: Iterable[StockItem]) -> str:
    """Render the stock list as a tab-separated table."""
    items = list(items)
    if not items:
        return "inventory is empty.\n"
    lines = ["inventory:", _RULE, "Name\t\tPrice\tQuantity"]
    lines.extend(f"{item.code}\t\t{item.price:.6g}\t{item.quantity}" for item in items)
    lines.append(_FOOTER)
    return "\n".join(lines) + "\n"


_MENU = (
    "\nMenu:\n"
    "1. Display Inventory\n"
    "2. Add Product\n"
    "3. Remove Product\n"
    "4. Exit\n"
    "choose your option\n"
)


def _add(items: list[StockItem]) -> None:
    code = input("Enter product code: ").strip()
    price = float(input("Enter product price: ").strip())
    quantity = int(input("Enter product quantity: ").strip())
    if not code:
        raise ValueError("product code must not be empty")
    items.append(StockItem(code, price, quantity))
    print("Product added to inventory.")


def _remove(items: list[StockItem]) -> None:
    code = input("Enter product code to remove: ").strip()
    for item in items:
        if item.code == code:
            items.remove(item)
            print("Product removed from inventory.")
            return
    print(f"No product with code {code} in inventory.")


def main(argv: list[str] | None = None) -> int:
    items: list[StockItem] = []
    try:
        while True:
            choice = input(_MENU).strip()
            if choice == "4":
                print("exiting the program")
                return 0
            try:
                if choice == "1":
                    print(format_inventory(items), end="")
                elif choice == "2":
                    _add(items)
                elif choice == "3":
                    _remove(items)
                else:
                    print("invalid choice. Please choose another one")
            except ValueError as exc:
                print(f"Invalid input: {exc}")
    except EOFError:
        return 0