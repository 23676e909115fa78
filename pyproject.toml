[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "stocksmart"
version = "0.1.0"
description = "A small desktop inventory tracker backed by SQLite, with plain-text inventory reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "stock", "sqlite", "tkinter", "report"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stocksmart = "stocksmart.gui:main"

[tool.setuptools]
packages = ["stocksmart"]

[tool.pytest.ini_options]
addopts = "-ra"
