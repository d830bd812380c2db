"""Data models for clamby command invocations and outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RunMode(str, Enum):
    """How the process runner treats a child process."""

    PROBE = "probe"
    STANDARD = "standard"


class Outcome(str, Enum):
    """Semantic result of a scan, derived from the exit status."""

    CLEAN = "clean"
    INFECTED = "infected"
    CLIENT_ERROR = "client_error"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True, slots=True)
class Invocation:
    """A single, fully built command.

    Attributes:
        executable: Resolved path of the ClamAV executable.
        args: Arguments in lexicographic order, executable excluded.
        mode: ``RunMode.PROBE`` for the version check, otherwise ``STANDARD``.
    """

    executable: str
    args: tuple[str, ...]
    mode: RunMode = RunMode.STANDARD

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.args]

    def __str__(self) -> str:
        return " ".join(self.argv)
