"""Tk windows for the inventory application."""

from __future__ import annotations

import argparse
import tkinter as tk
from pathlib import Path
from tkinter import messagebox
from typing import Optional, Sequence

from stocksmart.controller import MAX_AMOUNT, InventoryController
from stocksmart.database import InventoryDatabase

_FONT = ("Arial", 12)


class TkInterface:
    """Dialogs shown on top of a Tk window."""

    def __init__(self, parent: tk.Misc) -> None:
        self.parent = parent

    def info(self, title: str, message: str) -> None:
        messagebox.showinfo(title, message, parent=self.parent)

    def warning(self, title: str, message: str) -> None:
        messagebox.showwarning(title, message, parent=self.parent)

    def error(self, title: str, message: str) -> None:
        messagebox.showerror(title, message, parent=self.parent)

    def ask_yes_no(self, title: str, message: str) -> bool:
        return bool(messagebox.askyesno(title, message, parent=self.parent))

    def open_file(self, path: Path) -> None:
        """Show a text file in a read-only viewer window."""
        viewer = tk.Toplevel(self.parent)
        viewer.title(Path(path).name)
        text = tk.Text(viewer, wrap="none", font=("Courier", 11))
        text.insert("1.0", Path(path).read_text(encoding="utf-8"))
        text.configure(state="disabled")
        text.pack(fill="both", expand=True)


class AddInventoryWindow:
    """Form for entering products and exporting the inventory."""

    def __init__(self, master: tk.Misc, database: InventoryDatabase) -> None:
        self.window = tk.Toplevel(master)
        self.window.title("Add Inventory")
        self.window.geometry("600x400")
        self.window.resizable(False, False)
        self.window.configure(bg="#1a1110")
        self.controller = InventoryController(database, TkInterface(self.window))

        form = tk.Frame(self.window, bg="#1a1110", padx=50, pady=50)
        form.pack(fill="both", expand=True)

        self.name = tk.Entry(form, font=_FONT)
        self.quantity = tk.Spinbox(form, from_=0, to=MAX_AMOUNT, font=_FONT)
        self.price = tk.Spinbox(form, from_=0, to=MAX_AMOUNT, font=_FONT)
        rows = (("Product Name: ", self.name), ("Quantity: ", self.quantity),
                ("Price: ", self.price))
        for row, (label, widget) in enumerate(rows):
            tk.Label(form, text=label, font=_FONT, fg="white", bg="#1a1110").grid(
                row=row, column=0, sticky="w", pady=5)
            widget.grid(row=row, column=1, sticky="ew", pady=5)
        form.columnconfigure(1, weight=1)

        tk.Button(form, text="Save", font=("Arial", 16, "bold"), bg="#4caf50",
                  fg="white", command=self._save).grid(
            row=3, column=0, columnspan=2, pady=(20, 10))
        tk.Button(form, text="Confirm", font=("Arial", 16, "bold"), bg="#f44336",
                  fg="white", command=self._confirm).grid(
            row=4, column=0, columnspan=2)

    def _save(self) -> None:
        try:
            quantity = int(self.quantity.get())
            price = int(self.price.get())
            self.controller.save(self.name.get(), quantity, price)
        except ValueError:
            self.controller.ui.warning(
                "Error", f"Quantity and price must be whole numbers from 0 to {MAX_AMOUNT}.")

    def _confirm(self) -> None:
        self.controller.confirm()


class MainWindow:
    """Home screen with entry to the inventory form."""

    def __init__(self, root: tk.Tk, database: InventoryDatabase) -> None:
        self.root = root
        self.database = database
        root.title("StockSmart Home")
        root.geometry("600x400")
        root.minsize(400, 300)
        root.configure(bg="#550000")

        frame = tk.Frame(root, bg="#550000", padx=50, pady=50)
        frame.pack(expand=True)
        tk.Label(frame, text="StockSmart Home", font=("Arial Black", 24, "bold"),
                 fg="#333333", bg="#550000").pack(pady=(0, 40))
        tk.Label(frame, text="Manage your inventory easy and efficiently.",
                 font=("Arial", 14), fg="#555555", bg="#550000").pack(pady=(0, 30))
        tk.Button(frame, text="Add Inventory", font=("Arial", 16, "bold"),
                  bg="#ffaf50", fg="white", width=16,
                  command=self.add_inventory).pack(pady=(0, 20))
        tk.Button(frame, text="Exit", font=("Arial", 16, "bold"), bg="#f44336",
                  fg="white", width=16, command=root.destroy).pack()
        root.bind("<Escape>", lambda _event: root.destroy())

    def add_inventory(self) -> AddInventoryWindow:
        return AddInventoryWindow(self.root, self.database)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="stocksmart",
                                     description="Manage a small inventory.")
    parser.add_argument("--database", default="inventory.db",
                        help="SQLite file holding the inventory (default: inventory.db)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    with InventoryDatabase(args.database) as database:
        root = tk.Tk()
        MainWindow(root, database)
        root.mainloop()
    return 0