"""Plain-text inventory reports."""

from __future__ import annotations

from datetime import datetime
from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Union

from stocksmart.database import InventoryItem

REPORT_FILENAME = "Inventory_Report.txt"

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _format_timestamp(moment: datetime) -> str:
    day = _DAYS[moment.weekday()]
    month = _MONTHS[moment.month - 1]
    return f"{day} {month} {moment.day} {moment:%H:%M:%S} {moment.year}"


def _line(name: object, quantity: object, price: object) -> str:
    return f"{str(name):<20}\t{str(quantity):<10}\t{price}\n"


def format_report(items: Iterable[InventoryItem], timestamp: Optional[datetime] = None) -> str:
    """Render the inventory as a tab-separated report."""
    moment = timestamp if timestamp is not None else datetime.now()
    parts = ["INVENTORY REPORT\n", _format_timestamp(moment), "\n\n",
             _line("Product Name", "Quantity", "Price")]
    parts.extend(_line(item.name, item.quantity, item.price) for item in items)
    return "".join(parts)


def default_report_path() -> Path:
    """Location of the report in the user's documents folder."""
    return Path.home() / "Documents" / REPORT_FILENAME


def write_report(
    items: Iterable[InventoryItem],
    path: Union[str, PathLike, None] = None,
    timestamp: Optional[datetime] = None,
) -> Path:
    """Write the report to *path* and return where it was written."""
    target = Path(path) if path is not None else default_report_path()
    target.write_text(format_report(items, timestamp), encoding="utf-8")
    return target