"""Timestamped, coloured console messages."""

from __future__ import annotations

import sys
from datetime import datetime

from termcolor import colored


def timestamp() -> str:
    """Return the current local time as HH:MM:SS."""
    return datetime.now().strftime("%H:%M:%S")


def _emit(label: str, color: str, message: str) -> None:
    prefix = colored(f"[{label}][{timestamp()}] ", color)
    print(prefix + message, flush=True)


def info(message: str) -> None:
    """Print an informational message."""
    _emit("INFO", "green", message)


def warn(message: str) -> None:
    """Print a warning message."""
    _emit("WARN", "yellow", message)


def error(message: str, err: BaseException | None = None) -> None:
    """Print an error message, followed by the error itself when one is given."""
    text = message if err is None else f"{message}: {err}"
    _emit("ERROR", "red", text)


def success(message: str) -> None:
    """Print a success message."""
    _emit("SUCCESS", "cyan", message)


def critical(message: str, err: BaseException | None = None) -> None:
    """Print a critical message to stderr and exit with status 1."""
    text = f"[CRITICAL][{timestamp()}] {message}: {err}"
    print(colored(text, "red", attrs=["bold"]), file=sys.stderr, flush=True)
    raise SystemExit(1)