"""Reconnaissance pipeline over external scanning tools, with YAML configuration and per-workspace SQLite storage."""

__version__ = "2.0.0"