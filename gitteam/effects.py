"""Side effects at the end of a command: print a message and exit."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from termcolor import colored


class Effect(Protocol):
    """A side effect to run."""

    def run(self) -> None: ...


class ExitError(Exception):
    """Request to end the program with a failure status and message."""

    def __init__(self, message: str = "", code: int = 1) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class _ExitKind(Enum):
    OK = "ok"
    ERROR = "error"


@dataclass(frozen=True)
class Exit:
    """Exit successfully or with an error, optionally with a message."""

    kind: _ExitKind
    message: str | None = None

    def run(self) -> None:
        """Print the message on success; raise ExitError on failure."""
        if self.kind is _ExitKind.OK:
            if self.message is not None:
                print(self.message)
            return
        raise ExitError(self.message or "", 1)


def exit_ok() -> Exit:
    """Exit with success and no message."""
    return Exit(_ExitKind.OK)


def exit_ok_msg(message: str) -> Exit:
    """Exit with success and print a message."""
    return Exit(_ExitKind.OK, message)


def exit_err() -> Exit:
    """Exit with a failure status and no message."""
    return Exit(_ExitKind.ERROR)


def exit_err_msg(error: object) -> Exit:
    """Exit with a failure status and a red "error: ..." message."""
    return Exit(_ExitKind.ERROR, colored(f"error: {error}", "red"))