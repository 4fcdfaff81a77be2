"""Restaurant invoices with stored history, and employee salary lookup."""

from __future__ import annotations

import argparse
import datetime
import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional, Union

__all__ = [
    "Item",
    "Order",
    "Employee",
    "bill_totals",
    "render_bill",
    "save_invoice",
    "load_invoices",
    "find_invoices",
    "highest_paid",
    "main",
]

DISCOUNT_RATE = 0.1
GST_RATE = 0.09
DEFAULT_FILE = "invoices.jsonl"

PathLike = Union[str, Path]


@dataclass
class Item:
    """One line of an order."""

    name: str
    quantity: int
    price: float


@dataclass
class Order:
    """A customer's order on a given date."""

    customer: str
    date: str
    items: list[Item] = field(default_factory=list)

    def subtotal(self) -> float:
        """Sum of quantity times unit price over all items."""
        return sum(item.quantity * item.price for item in self.items)


@dataclass
class Employee:
    """An employee record."""

    name: str
    account_number: str
    salary: int


def bill_totals(subtotal: float) -> dict[str, float]:
    """Discount, taxes and grand total for a subtotal."""
    discount = DISCOUNT_RATE * subtotal
    net_total = subtotal - discount
    cgst = GST_RATE * net_total
    return {
        "subtotal": subtotal,
        "discount": discount,
        "net_total": net_total,
        "cgst": cgst,
        "sgst": cgst,
        "grand_total": net_total + 2 * cgst,
    }


def render_bill(order: Order) -> str:
    """The printed invoice for ``order``."""
    lines = [
        "",
        "\t    ADV. Restaurant",
        "\t    --------------------",
        f"Date:{order.date}",
        f"Invoice to: {order.customer}",
        "-" * 45,
        "Items\t\tQty\t\tTotal\t\t",
        "-" * 45,
        "",
    ]
    for item in order.items:
        lines.append(f"{item.name}\t\t{item.quantity}\t\t{item.quantity * item.price:.2f}\t\t")
    totals = bill_totals(order.subtotal())
    lines += [
        "",
        "-" * 31,
        f"Sub Total\t\t\t{totals['subtotal']:.2f}",
        f"Discount @10%\t\t\t{totals['discount']:.2f}",
        "\t\t\t\t-------",
        f" Net Total\t\t\t{totals['net_total']:.2f}",
        f" CGST @9\t\t\t{totals['cgst']:.2f}",
        f" SGST @9\t\t\t{totals['sgst']:.2f}",
        "-" * 37,
        f"Grand Total\t\t\t{totals['grand_total']:.2f}",
        "-" * 39,
    ]
    return "\n".join(lines) + "\n"


def save_invoice(order: Order, path: PathLike) -> None:
    """Append ``order`` to the invoice file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(json.dumps(asdict(order)) + "\n")


def load_invoices(path: PathLike) -> list[Order]:
    """Every order stored in the invoice file; none if the file does not exist."""
    target = Path(path)
    if not target.exists():
        return []
    orders: list[Order] = []
    with target.open(encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            record = json.loads(line)
            orders.append(
                Order(
                    customer=record["customer"],
                    date=record["date"],
                    items=[Item(**item) for item in record["items"]],
                )
            )
    return orders


def find_invoices(path: PathLike, customer: str) -> list[Order]:
    """Stored orders whose customer name matches exactly."""
    return [order for order in load_invoices(path) if order.customer == customer]


def highest_paid(employees: Iterable[Employee]) -> Employee:
    """The employee with the largest salary; the first one wins a tie."""
    staff = list(employees)
    if not staff:
        raise ValueError("no employees given")
    return max(staff, key=lambda employee: employee.salary)


def _today() -> str:
    day = datetime.date.today()
    return f"{day:%b} {day.day:2d} {day.year}"


def _new_invoice(path: str) -> None:
    customer = input("Please enter the name of a customer:\t").strip()
    count = int(input("Please enter the number of Items:\t"))
    items = []
    for number in range(1, count + 1):
        name = input(f"Please enter the item {number}:\t").strip()
        quantity = int(input("Please enter the quantity:\t"))
        price = float(input("Please enter the unit price:\t"))
        items.append(Item(name, quantity, price))
    order = Order(customer, _today(), items)
    print(render_bill(order))
    answer = input("Do you want to save the invoice [y/n]:\t").strip().lower()
    if answer == "y":
        save_invoice(order, path)
        print("Successfully saved")


def main(argv: Optional[list[str]] = None) -> int:
    """Create, list or search restaurant invoices."""
    parser = argparse.ArgumentParser(description="Restaurant invoices")
    parser.add_argument("--file", default=DEFAULT_FILE, help="invoice store")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("new", help="generate an invoice")
    commands.add_parser("list", help="show all invoices")
    search = commands.add_parser("search", help="show a customer's invoices")
    search.add_argument("customer")
    args = parser.parse_args(argv)

    if args.command == "new":
        _new_invoice(args.file)
    elif args.command == "list":
        print("****Your Previous Invoices****")
        for order in load_invoices(args.file):
            print(render_bill(order))
    else:
        orders = find_invoices(args.file, args.customer)
        print(f"****Invoices Of {args.customer}****")
        for order in orders:
            print(render_bill(order))
        if not orders:
            print(f"Sorry the invoice for {args.customer} doesn't exist")
            return 1
    return 0