"""Members of a shared-expense group."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A participant identified by name."""

    name: str = ""

    def __str__(self) -> str:
        return self.name