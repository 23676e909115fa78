from datetime import datetime

import pytest

from stocksmart.database import InventoryItem
from stocksmart.report import default_report_path, format_report, write_report

MOMENT = datetime(2024, 3, 5, 14, 7, 9)


def test_report_starts_with_title_and_timestamp():
    lines = format_report([], MOMENT).split("\n")
    assert lines[0] == "INVENTORY REPORT"
    assert lines[1] == "Tue Mar 5 14:07:09 2024"
    assert lines[2] == ""


def test_header_columns_are_padded():
    header = format_report([], MOMENT).split("\n")[3]
    assert header == "Product Name".ljust(20) + "\t" + "Quantity".ljust(10) + "\tPrice"


def test_empty_report_ends_after_header():
    text = format_report([], MOMENT)
    assert text.endswith("Price\n")
    assert text.count("\n") == 4


def test_rows_follow_items_in_order():
    items = [InventoryItem("HP Laptop", 3, 900), InventoryItem("Mouse", 12, 25)]
    rows = format_report(items, MOMENT).splitlines()[4:]
    assert [row.split("\t") for row in rows] == [
        ["HP Laptop".ljust(20), "3".ljust(10), "900"],
        ["Mouse".ljust(20), "12".ljust(10), "25"],
    ]


def test_long_names_are_not_truncated():
    name = "x" * 30
    rows = format_report([InventoryItem(name, 1, 2)], MOMENT).splitlines()
    assert rows[-1].split("\t")[0] == name


def test_write_report_round_trip(tmp_path):
    items = [InventoryItem("Cable", 4, 7)]
    target = write_report(items, tmp_path / "out.txt", MOMENT)
    assert target == tmp_path / "out.txt"
    assert target.read_text(encoding="utf-8") == format_report(items, MOMENT)


def test_write_report_to_missing_directory_fails(tmp_path):
    with pytest.raises(OSError):
        write_report([], tmp_path / "nowhere" / "out.txt", MOMENT)


def test_default_path_name():
    path = default_report_path()
    assert path.name == "Inventory_Report.txt"
    assert path.parent.name == "Documents"