# src/snouty/__init__.py
"""snouty: command-line client for the Antithesis launch API."""

__version__ = "0.1.0"
