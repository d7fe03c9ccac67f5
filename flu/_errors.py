"""Exception and warning types raised by flu."""

from __future__ import annotations


class InvalidColorFormat(ValueError):
    """Exception raised when a hex color string can't be parsed.

    The offending input is kept in `value`, unmodified."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid hex color: {value!r}")
        self.value = value


class FluWarning(UserWarning):
    """Warning category for flu-specific warnings.

    This can be used to filter flu warnings:
    >>> import warnings
    >>> warnings.filterwarnings("ignore", category=FluWarning)
    """

    pass
