class BsDateError(Exception):
    """Base error."""

class InvalidMonthError(BsDateError, ValueError):
    """Raised when a month number falls outside 1..12."""

    def __init__(self, month: object):
        self.month = month
        super().__init__(f"Invalid BS month: {month!r} (expected 1..12)")

class CalendarTableError(BsDateError, ValueError):
    """Raised when a calendar data asset cannot be parsed."""

class UnknownLocaleError(BsDateError, KeyError):
    """Raised when a locale code is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
