"""Settings for flu.

Options are read from environment variables once, at import time. They can also be
changed at runtime by mutating :data:`options`.
"""

from __future__ import annotations

import os

from typing_extensions import TypedDict


class OptionsDict(TypedDict):
    """Options for flu.

    Attributes:
        warn_unknown_styles: Emit a `FluWarning` when an attribute that isn't a
            registered style is accessed on a builder. Access still returns None.
        warn_overrides: Emit a `FluWarning` when a registration replaces an
            existing style or factory.
    """

    warn_unknown_styles: bool
    warn_overrides: bool


_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off", "")


def read_option(str_name: str, default: bool) -> bool:
    if str_name in os.environ:
        value = os.environ[str_name].strip().lower()
        assert value in _TRUTHY + _FALSY, (
            f"{str_name}={os.environ[str_name]} not in choices {_TRUTHY + _FALSY}"
        )
        return value in _TRUTHY
    return default


# Global options dictionary.
options: OptionsDict = {
    "warn_unknown_styles": read_option("PYTHON_FLU_WARN_UNKNOWN_STYLES", False),
    "warn_overrides": read_option("PYTHON_FLU_WARN_OVERRIDES", False),
}
