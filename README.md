# StockSmart

StockSmart is a small desktop program for keeping track of inventory. It stores
products in a local SQLite database. It can also export everything it holds to a
plain-text report.

## Installing

```
pip install .
```

The graphical interface uses Tkinter, which comes with most Python installations.
StockSmart needs no other libraries.

## Running

```
stocksmart
```

This opens the **StockSmart Home** window. By default the inventory is kept in
`inventory.db` in the current directory. To use another file, pass
`--database PATH`:

```
stocksmart --database shop.db
stocksmart --help
```

From the home window:

- **Add Inventory** opens a form for entering products:
  - **Save** stores one product, with its name, quantity and price. Quantity and
    price must be whole numbers from 0 to 100000. Any other value gives a warning,
    and nothing is stored.
  - **Confirm** writes `Inventory_Report.txt` to the `Documents` folder in your
    home directory. It then shows the report in a read-only viewer window and
    offers to delete all stored records. If the folder does not exist or the file
    cannot be written, an error dialog appears instead.
- **Exit**, or the Escape key, closes the program.

The report starts with the title `INVENTORY REPORT` and the time it was written.
After that come a header row and one tab-separated line per product.

## Using it from Python

```python
from datetime import datetime

from stocksmart.database import InventoryDatabase
from stocksmart.report import default_report_path, format_report, write_report

with InventoryDatabase("inventory.db") as db:
    db.add_product("HP Laptop", 5, 700)
    items = db.products()

print(format_report(items, datetime.now()))
write_report(items, default_report_path(), datetime.now())
```

- `stocksmart.database.InventoryDatabase` creates the `InventoryInfo` table if it
  does not exist yet. `add_product` returns the new row id. `products` returns
  `InventoryItem` records (`name`, `quantity`, `price`) in the order they were
  added. `clear` deletes every record. It raises `DatabaseError` when the database
  cannot be opened or a statement fails.
- `stocksmart.report.format_report` returns the report text. `write_report` writes
  the report as UTF-8 and returns the path it wrote to. Its default path is the one
  from `default_report_path()`. When no timestamp is given, both use the current
  time.
- `stocksmart.controller.InventoryController` holds the form's save and confirm
  steps and does not depend on any particular toolkit. Pass it an object with
  `info`, `warning`, `error`, `ask_yes_no` and `open_file` methods, as
  `stocksmart.gui.TkInterface` does. `validate_amount` checks a quantity or price
  and raises `ValueError` when the value is out of range.

## What it does not do

The form only adds products. StockSmart has no screen that lists, edits or removes
single products. The stored inventory can only be seen through the exported
report, and it can only be emptied all at once.

## Running the tests

```
pip install .[test]
pytest
```