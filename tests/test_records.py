import io
import math

import pytest

from algos.records import (
    MAX_ITEMS,
    Employee,
    Invoice,
    InvoiceItem,
    InvoiceStore,
    compute_totals,
    format_invoice,
    highest_paid,
    main,
)


def test_highest_paid_picks_greatest_salary():
    staff = [
        Employee("Ann", "ACC-0001", 300),
        Employee("Bob", "ACC-0002", 900),
        Employee("Cy", "ACC-0003", 500),
    ]
    assert highest_paid(staff).name == "Bob"


def test_highest_paid_tie_keeps_first():
    staff = [Employee("Ann", "ACC-0001", 700), Employee("Bob", "ACC-0002", 700)]
    assert highest_paid(staff).name == "Ann"


def test_highest_paid_empty_raises():
    with pytest.raises(ValueError):
        highest_paid([])


def test_compute_totals_zero():
    totals = compute_totals(0)
    assert totals.grand_total == 0
    assert totals.discount == 0


@pytest.mark.parametrize("subtotal", [1.0, 42.5, 1000.0])
def test_compute_totals_invariants(subtotal):
    totals = compute_totals(subtotal)
    assert math.isclose(totals.discount, subtotal * 0.1)
    assert math.isclose(totals.net_total, subtotal - totals.discount)
    assert totals.cgst == totals.sgst
    assert math.isclose(totals.grand_total, totals.net_total + 2 * totals.cgst)


def test_invoice_subtotal_sums_lines():
    invoice = Invoice("Ann", (InvoiceItem("Tea", 2, 1.5), InvoiceItem("Cake", 1, 4.0)))
    assert math.isclose(invoice.subtotal, 2 * 1.5 + 4.0)


def test_invoice_item_limit():
    with pytest.raises(ValueError):
        Invoice("Ann", tuple(InvoiceItem("x", 1, 1.0) for _ in range(MAX_ITEMS + 1)))


def test_format_invoice_contents():
    invoice = Invoice("Ann", (InvoiceItem("Tea", 2, 1.5),), date="Jan  1 2024")
    text = format_invoice(invoice)
    assert "ADV. Restaurant" in text
    assert "\nDate:Jan  1 2024" in text
    assert "\nInvoice to: Ann" in text
    assert "Tea\t\t2\t\t3.00\t\t\n" in text
    assert text.endswith("---------------------------------------\n")


def test_store_round_trip(tmp_path):
    store = InvoiceStore(tmp_path / "invoices.txt")
    first = Invoice("Ann", (InvoiceItem("Tea", 2, 1.5),), date="Jan  1 2024")
    second = Invoice("Bob", (), date="Feb  2 2024")
    store.save(first)
    store.save(second)
    assert store.load() == [first, second]


def test_store_find(tmp_path):
    store = InvoiceStore(tmp_path / "invoices.txt")
    ann = Invoice("Ann", (InvoiceItem("Tea", 1, 1.0),), date="d")
    store.save(ann)
    store.save(Invoice("Bob", (), date="d"))
    assert store.find("Ann") == [ann]
    assert store.find("ann") == []


def test_store_missing_file_loads_empty(tmp_path):
    assert InvoiceStore(tmp_path / "absent.txt").load() == []


def test_main_generates_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "invoices.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nAnn Lee\n1\nTea\n2\n1.5\ny\nn\n"))
    assert main(["--file", str(path)]) == 0
    saved = InvoiceStore(path).load()
    assert [invoice.customer for invoice in saved] == ["Ann Lee"]
    assert saved[0].items == (InvoiceItem("Tea", 2, 1.5),)
    assert "Successfully saved" in capsys.readouterr().out


def test_main_search_missing(tmp_path, monkeypatch, capsys):
    path = tmp_path / "invoices.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nNobody\nn\n"))
    main(["--file", str(path)])
    assert "Sorry the invoice for Nobody doesn't exists" in capsys.readouterr().out


def test_main_bad_choice(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\nn\n"))
    main(["--file", str(tmp_path / "invoices.txt")])
    assert "\nError" in capsys.readouterr().out