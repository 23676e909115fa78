"""Actions behind the add-inventory window, independent of any toolkit."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Protocol, Union

from stocksmart.database import DatabaseError, InventoryDatabase
from stocksmart.report import write_report

MAX_AMOUNT = 100000


class UserInterface(Protocol):
    def info(self, title: str, message: str) -> None: ...
    def warning(self, title: str, message: str) -> None: ...
    def error(self, title: str, message: str) -> None: ...
    def ask_yes_no(self, title: str, message: str) -> bool: ...
    def open_file(self, path: Path) -> None: ...


def validate_amount(value: int) -> int:
    """Check that a quantity or price lies between 0 and 100000."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"amount must be a whole number, got {value!r}")
    if not 0 <= value <= MAX_AMOUNT:
        raise ValueError(f"amount must be between 0 and {MAX_AMOUNT}, got {value}")
    return value


class InventoryController:
    """Saves products and exports the inventory, reporting through a UI."""

    def __init__(self, database: InventoryDatabase, ui: UserInterface) -> None:
        self.database = database
        self.ui = ui

    def save(self, name: str, quantity: int, price: int) -> bool:
        """Store a product; return whether it was stored."""
        quantity = validate_amount(quantity)
        price = validate_amount(price)
        try:
            self.database.add_product(name, quantity, price)
        except DatabaseError:
            self.ui.warning("Error", "Failed to add this to the inventory")
            return False
        self.ui.info("Success", "added this to the inventory")
        return True

    def confirm(self, report_path: Union[str, PathLike, None] = None) -> Optional[Path]:
        """Export the inventory, show it, and offer to clear the records.

        Returns the report path, or None if the export failed.
        """
        try:
            items = self.database.products()
        except DatabaseError as exc:
            self.ui.error("Database Error", str(exc))
            return None

        try:
            path = write_report(items, report_path)
        except OSError:
            self.ui.error("File Error", "Could not create the file")
            return None

        self.ui.open_file(path)
        self.ui.info("Exported", "Inventory exported to text file.")

        if self.ui.ask_yes_no("Delete Records",
                              "Do you want to delete all inventory records now?"):
            try:
                self.database.clear()
            except DatabaseError:
                self.ui.error("Error", "Failed to clear the inventory table.")
            else:
                self.ui.info("Deleted", "All inventory records deleted.")
        return path