"""StockSmart: a small SQLite-backed inventory tracker with text reports and a Tk interface."""

__version__ = "0.1.0"

__all__ = ["controller", "database", "gui", "report"]