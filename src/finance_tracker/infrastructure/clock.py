"""Clock adapters."""

from datetime import date

from finance_tracker.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock reading the local system date."""

    def today(self) -> date:
        return date.today()


__all__ = ["SystemClock"]
