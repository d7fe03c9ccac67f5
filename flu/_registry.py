"""Mutable table of named styles, consulted by builders at attribute-access time."""

from __future__ import annotations

import warnings
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from . import _catalog, _settings
from ._catalog import Style, StyleFactory
from ._errors import FluWarning

StyleLike = Union[Style, Tuple[str, str], Mapping[str, str]]
"""Static style definitions accepted by :meth:`StyleRegistry.extend()`: a `Style`,
an `(open, close)` tuple, or a mapping with `open` and `close` keys."""

RESERVED_NAMES = frozenset(
    {
        "styles",
        "register_style",
        "register_dynamic_style",
        "extend",
        "registerStyle",
        "registerDynamicStyle",
    }
)
"""Builder attributes that take precedence over registered styles."""


def _as_style(value: StyleLike) -> Style:
    if isinstance(value, Style):
        return value
    if isinstance(value, Mapping):
        return Style(value["open"], value["close"])
    open, close = value
    return Style(open, close)


class StyleRegistry:
    """Registry of static styles and dynamic style factories.

    Static styles are checked before factories when resolving a name, and the most
    recent registration for a name wins. Each root builder owns one registry, which
    is shared by every builder chained from it.

    Not thread-safe: hosts that register styles from multiple threads should
    synchronize externally.
    """

    def __init__(
        self,
        styles: Optional[Dict[str, Style]] = None,
        dynamics: Optional[Dict[str, StyleFactory]] = None,
    ) -> None:
        self._styles: Dict[str, Style] = dict(styles) if styles is not None else {}
        self._dynamics: Dict[str, StyleFactory] = (
            dict(dynamics) if dynamics is not None else {}
        )

    @staticmethod
    def default() -> StyleRegistry:
        """Create a registry populated with the built-in styles and factories."""
        return StyleRegistry(_catalog.builtin_styles(), _catalog.builtin_dynamics())

    def _check_override(self, name: str) -> None:
        if _settings.options["warn_overrides"] and name in self:
            warnings.warn(
                f"Style {name!r} is already registered and will be replaced.",
                category=FluWarning,
                stacklevel=3,
            )

    def _check_reachable(self, name: str) -> None:
        if name.startswith("_") or name in RESERVED_NAMES:
            warnings.warn(
                f"Style {name!r} is registered, but can't be accessed as a builder"
                " attribute. Names can't start with an underscore or shadow"
                f" builder attributes: {sorted(RESERVED_NAMES)}.",
                category=FluWarning,
                stacklevel=3,
            )

    def register_style(self, name: str, open: str, close: str) -> None:
        """Register a static style. The escape sequences are not validated."""
        self._check_reachable(name)
        self._check_override(name)
        self._styles[name] = Style(open, close)

    def register_dynamic_style(self, name: str, factory: StyleFactory) -> None:
        """Register a factory. Arguments passed to the accessor are forwarded to
        `factory`, which should return a `Style`."""
        self._check_reachable(name)
        self._check_override(name)
        self._dynamics[name] = factory

    def extend(self, defs: Mapping[str, Union[StyleLike, StyleFactory]]) -> None:
        """Register many styles at once. Callable values are registered as
        factories, everything else as static styles."""
        for name, value in defs.items():
            if callable(value):
                self.register_dynamic_style(name, value)
            else:
                style = _as_style(value)
                self.register_style(name, style.open, style.close)

    def get_style(self, name: str) -> Optional[Style]:
        return self._styles.get(name)

    def get_factory(self, name: str) -> Optional[StyleFactory]:
        return self._dynamics.get(name)

    def names(self) -> Iterable[str]:
        """Static style names followed by factory names, in registration order."""
        yield from self._styles
        yield from (name for name in self._dynamics if name not in self._styles)

    def __contains__(self, name: Any) -> bool:
        return name in self._styles or name in self._dynamics
