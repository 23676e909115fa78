"""SQLite storage for inventory records."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from os import PathLike
from typing import Union

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS InventoryInfo
    (
        ID INTEGER PRIMARY KEY AUTOINCREMENT,
        ProductName TEXT NOT NULL,
        Quantity INTEGER,
        Price INTEGER
    )
"""


class DatabaseError(Exception):
    """Raised when the inventory database cannot complete an operation."""


@dataclass(frozen=True)
class InventoryItem:
    """One product line stored in the inventory."""

    name: str
    quantity: int
    price: int


class InventoryDatabase:
    """An inventory table kept in an SQLite file."""

    def __init__(self, path: Union[str, PathLike]) -> None:
        try:
            self._connection = sqlite3.connect(path)
            with self._connection:
                self._connection.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Failed to connect to {path}: {exc}") from exc

    def add_product(self, name: str, quantity: int, price: int) -> int:
        """Insert a product and return its row id."""
        try:
            with self._connection:
                cursor = self._connection.execute(
                    "INSERT INTO InventoryInfo (ProductName, Quantity, Price) "
                    "VALUES (?, ?, ?)",
                    (name, quantity, price),
                )
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return cursor.lastrowid

    def products(self) -> list[InventoryItem]:
        """Return every stored product in insertion order."""
        try:
            rows = self._connection.execute(
                "SELECT ProductName, Quantity, Price FROM InventoryInfo ORDER BY ID"
            ).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return [InventoryItem(name, quantity, price) for name, quantity, price in rows]

    def clear(self) -> None:
        """Delete every stored product."""
        try:
            with self._connection:
                self._connection.execute("DELETE FROM InventoryInfo")
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "InventoryDatabase":
        return self

    def __exit__(self, *args) -> None:
        self.close()