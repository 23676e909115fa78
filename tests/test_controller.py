import pytest

from stocksmart.controller import InventoryController, validate_amount
from stocksmart.database import InventoryDatabase, InventoryItem
from stocksmart.report import format_report


class RecordingUI:
    def __init__(self, answer=False):
        self.answer = answer
        self.calls = []

    def info(self, title, message):
        self.calls.append(("info", title, message))

    def warning(self, title, message):
        self.calls.append(("warning", title, message))

    def error(self, title, message):
        self.calls.append(("error", title, message))

    def ask_yes_no(self, title, message):
        self.calls.append(("ask", title, message))
        return self.answer

    def open_file(self, path):
        self.calls.append(("open", path))


@pytest.fixture
def db(tmp_path):
    with InventoryDatabase(tmp_path / "inventory.db") as database:
        yield database


@pytest.mark.parametrize("value", [0, 1, 100000])
def test_validate_amount_accepts_range(value):
    assert validate_amount(value) == value


@pytest.mark.parametrize("value", [-1, 100001, 2.5, "3", True])
def test_validate_amount_rejects(value):
    with pytest.raises(ValueError):
        validate_amount(value)


def test_save_stores_and_reports_success(db):
    ui = RecordingUI()
    assert InventoryController(db, ui).save("Laptop", 2, 500) is True
    assert db.products() == [InventoryItem("Laptop", 2, 500)]
    assert ui.calls == [("info", "Success", "added this to the inventory")]


def test_save_rejects_out_of_range(db):
    with pytest.raises(ValueError):
        InventoryController(db, RecordingUI()).save("Laptop", -5, 1)
    assert db.products() == []


def test_save_failure_warns(tmp_path):
    database = InventoryDatabase(tmp_path / "inventory.db")
    database.close()
    ui = RecordingUI()
    assert InventoryController(database, ui).save("Laptop", 1, 1) is False
    assert ui.calls == [("warning", "Error", "Failed to add this to the inventory")]


def test_confirm_exports_and_keeps_records(db, tmp_path):
    db.add_product("Mouse", 4, 20)
    ui = RecordingUI(answer=False)
    report = tmp_path / "report.txt"
    path = InventoryController(db, ui).confirm(report)
    assert path == report
    lines = report.read_text(encoding="utf-8").splitlines()
    expected = format_report([InventoryItem("Mouse", 4, 20)]).splitlines()
    assert lines[0] == expected[0]
    assert lines[3:] == expected[3:]
    assert ui.calls[0] == ("open", report)
    assert ui.calls[1] == ("info", "Exported", "Inventory exported to text file.")
    assert ui.calls[2][0] == "ask"
    assert len(ui.calls) == 3
    assert db.products() == [InventoryItem("Mouse", 4, 20)]


def test_confirm_yes_clears_records(db, tmp_path):
    db.add_product("Mouse", 4, 20)
    ui = RecordingUI(answer=True)
    InventoryController(db, ui).confirm(tmp_path / "report.txt")
    assert db.products() == []
    assert ui.calls[-1] == ("info", "Deleted", "All inventory records deleted.")


def test_confirm_file_error(db, tmp_path):
    ui = RecordingUI(answer=True)
    result = InventoryController(db, ui).confirm(tmp_path / "nowhere" / "r.txt")
    assert result is None
    assert ui.calls == [("error", "File Error", "Could not create the file")]


def test_confirm_database_error(tmp_path):
    database = InventoryDatabase(tmp_path / "inventory.db")
    database.close()
    ui = RecordingUI()
    assert InventoryController(database, ui).confirm(tmp_path / "r.txt") is None
    assert [call[:2] for call in ui.calls] == [("error", "Database Error")]
    assert not (tmp_path / "r.txt").exists()