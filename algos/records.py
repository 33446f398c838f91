"""Employee salary lookup and a restaurant invoice book kept in a file."""

from __future__ import annotations

import argparse
import datetime as _dt
import json
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass, field
from os import PathLike
from pathlib import Path

DEFAULT_STORE = "invoices.txt"
MAX_ITEMS = 50
DISCOUNT_RATE = 0.1
GST_RATE = 0.09

_WIDE_RULE = "-" * 45


@dataclass(frozen=True)
class Employee:
    """An employee with a name, an account number and a salary."""

    name: str
    account_number: str
    salary: int


def highest_paid(employees: Iterable[Employee]) -> Employee:
    """The employee with the greatest salary; the earliest one wins a tie."""
    best: Employee | None = None
    for employee in employees:
        if best is None or best.salary < employee.salary:
            best = employee
    if best is None:
        raise ValueError("no employees given")
    return best


def _today() -> str:
    today = _dt.date.today()
    return f"{today:%b} {today.day:2d} {today.year}"


@dataclass(frozen=True)
class InvoiceItem:
    """One line of an invoice: an item ordered in some quantity at a unit price."""

    name: str
    quantity: int
    price: float

    @property
    def total(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class Invoice:
    """A customer's order with the date it was made."""

    customer: str
    items: tuple[InvoiceItem, ...] = ()
    date: str = field(default_factory=_today)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        if len(self.items) > MAX_ITEMS:
            raise ValueError(f"an invoice holds at most {MAX_ITEMS} items")

    @property
    def subtotal(self) -> float:
        return sum(item.total for item in self.items)

    def _to_record(self) -> dict:
        return {
            "customer": self.customer,
            "date": self.date,
            "items": [asdict(item) for item in self.items],
        }

    @classmethod
    def _from_record(cls, record: dict) -> Invoice:
        return cls(
            customer=record["customer"],
            date=record["date"],
            items=tuple(InvoiceItem(**item) for item in record["items"]),
        )


@dataclass(frozen=True)
class BillTotals:
    """Discount, tax and grand total worked out from a subtotal."""

    subtotal: float
    discount: float
    net_total: float
    cgst: float
    sgst: float
    grand_total: float


def compute_totals(subtotal: float) -> BillTotals:
    """Apply a 10% discount, then 9% CGST and 9% SGST on the net total."""
    discount = DISCOUNT_RATE * subtotal
    net_total = subtotal - discount
    gst = GST_RATE * net_total
    return BillTotals(
        subtotal=subtotal,
        discount=discount,
        net_total=net_total,
        cgst=gst,
        sgst=gst,
        grand_total=net_total + 2 * gst,
    )


def _header(customer: str, date: str) -> str:
    return (
        "\n\n\t    ADV. Restaurant"
        "\n\t    --------------------"
        f"\nDate:{date}"
        f"\nInvoice to: {customer}"
        f"\n{_WIDE_RULE}\n"
        "Items\t\tQty\t\tTotal\t\t"
        f"\n{_WIDE_RULE}\n\n"
    )


def _body(item: InvoiceItem) -> str:
    return f"{item.name}\t\t{item.quantity}\t\t{item.total:.2f}\t\t\n"


def _footer(totals: BillTotals) -> str:
    return (
        "\n-------------------------------\n"
        f"Sub Total\t\t\t{totals.subtotal:.2f}"
        f"\nDiscount @10%\t\t\t{totals.discount:.2f}"
        "\n\t\t\t\t-------"
        f"\n Net Total\t\t\t{totals.net_total:.2f}"
        f"\n CGST @9\t\t\t{totals.cgst:.2f}"
        f"\n SGST @9\t\t\t{totals.sgst:.2f}"
        "\n-------------------------------------"
        f"\nGrand Total\t\t\t{totals.grand_total:.2f}"
        "\n---------------------------------------\n"
    )


def format_invoice(invoice: Invoice) -> str:
    """Printable bill: header, one line per item, then the totals."""
    return (
        _header(invoice.customer, invoice.date)
        + "".join(_body(item) for item in invoice.items)
        + _footer(compute_totals(invoice.subtotal))
    )


class InvoiceStore:
    """Invoices appended to a file, one JSON record per line."""

    def __init__(self, path: str | PathLike[str] = DEFAULT_STORE) -> None:
        self.path = Path(path)

    def save(self, invoice: Invoice) -> None:
        """Append ``invoice`` to the file."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(invoice._to_record()) + "\n")

    def load(self) -> list[Invoice]:
        """Every saved invoice in the order it was saved; empty if there is no file."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                return [
                    Invoice._from_record(json.loads(line))
                    for line in handle
                    if line.strip()
                ]
        except FileNotFoundError:
            return []

    def find(self, customer: str) -> list[Invoice]:
        """Saved invoices whose customer name matches exactly."""
        return [invoice for invoice in self.load() if invoice.customer == customer]


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _answered_yes(prompt: str) -> bool:
    return _ask(prompt)[:1] == "y"


def _generate_invoice(store: InvoiceStore) -> None:
    customer = input("\nPlease enter the name of a costomer:\t")
    count = int(_ask("\nPlease enter the number of Items:\t"))
    if not 0 <= count <= MAX_ITEMS:
        raise ValueError("item count out of range")
    items = []
    for number in range(1, count + 1):
        print("\n")
        name = input(f"Please enter the item {number}:\t")
        quantity = int(_ask("Please enter the quantity:\t"))
        price = float(_ask("Please enter the unit price:\t"))
        items.append(InvoiceItem(name, quantity, price))
    invoice = Invoice(customer, tuple(items))
    print(format_invoice(invoice), end="")
    if _answered_yes("\nDO you want to save the invoice [y/n]:\t"):
        store.save(invoice)
        print("\nSuccessfully saved")


def _show_all(store: InvoiceStore) -> None:
    print("\n\n  ****Your Previous Invoices****")
    for invoice in store.load():
        print(format_invoice(invoice), end="")


def _search(store: InvoiceStore) -> None:
    name = input("\nPlease Enter the Name of the costomer:\t")
    print(f"\n  ****Invoices Of {name}****")
    found = store.find(name)
    for invoice in found:
        print(format_invoice(invoice), end="")
    if not found:
        print(f"\nSorry the invoice for {name} doesn't exists")


def _dashboard() -> str:
    return _ask(
        "\n\nPlease select ypur prefered option: "
        "\n\n\t=============ADV. RESTAURANT============="
        "\n\n1. Generate Invoice"
        "\n2. Show all Invoices"
        "\n3. Search Invoice"
        "\n4. Exit"
        "\n\nPLease select your choice here:\t"
    )


def _run_choice(store: InvoiceStore, choice: str) -> None:
    actions = {"1": _generate_invoice, "2": _show_all, "3": _search}
    if choice == "4":
        return
    action = actions.get(choice)
    if action is None:
        print("\nError")
        return
    try:
        action(store)
    except ValueError:
        print("\nError")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive invoice menu reading answers from standard input."""
    parser = argparse.ArgumentParser(description="Restaurant billing system.")
    parser.add_argument(
        "--file", default=DEFAULT_STORE, help="file the invoices are kept in"
    )
    args = parser.parse_args(argv)
    store = InvoiceStore(args.file)
    try:
        while True:
            _run_choice(store, _dashboard())
            if not _answered_yes("\nDo you want to perform another operation [y/n]:\t"):
                break
    except EOFError:
        pass
    print("\n")
    return 0