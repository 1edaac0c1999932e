"""Port for reading the current date."""

from datetime import date
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing "today" so computations never read the wall clock."""

    def today(self) -> date:
        """Return the current date."""


__all__ = ["ClockPort"]
