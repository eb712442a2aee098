"""Running external tools, either streaming or capturing their output."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence

from sentinel import log


class CommandError(Exception):
    """An external command could not be started or exited unsuccessfully."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        reason: str | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.reason = reason
        if reason is not None:
            detail = reason
        else:
            detail = f"exit status {returncode}"
        super().__init__(f"{self.command[0]}: {detail}")


def _run(argv: list[str], **kwargs) -> subprocess.CompletedProcess:
    try:
        result = subprocess.run(argv, check=False, **kwargs)
    except OSError as exc:
        raise CommandError(argv, reason=str(exc)) from exc
    if result.returncode != 0:
        raise CommandError(argv, returncode=result.returncode)
    return result


def run_command(command_name: str, *args: str) -> None:
    """Run a command with its output going straight to this process's stdout and stderr."""
    log.info(f"Running: {command_name} {' '.join(args)}")
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        _run([command_name, *args])
    except CommandError as exc:
        log.error("Command finished with error", exc)
        raise
    log.success(f"Successfully executed: {command_name}")


def run_command_and_capture(command_name: str, *args: str) -> str:
    """Run a command and return what it wrote to stdout; stderr is discarded."""
    log.info(f"Capturing output from: {command_name} {' '.join(args)}")
    try:
        result = _run(
            [command_name, *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
        )
    except CommandError as exc:
        log.error("Command finished with error", exc)
        raise
    log.success(f"Successfully captured output from: {command_name}")
    return result.stdout