"""Chainable, callable style builder.

Attribute access on a builder looks names up in its registry and returns a new
builder with the style appended; calling a builder renders text:

.. code-block:: python

    from flu import flu

    print(flu.bold.red("error:"), flu.hex("#ff8800")("warning"))
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Tuple, Union

from . import _settings
from ._catalog import Style, StyleFactory
from ._compositor import apply_styles, join_args
from ._errors import FluWarning
from ._registry import StyleLike, StyleRegistry

# Operations that mutate the registry. They're resolved before style names, and are
# available at any point in a chain.
_plugin_operations: Dict[str, Callable[[StyleRegistry], Callable[..., None]]] = {
    "register_style": lambda registry: registry.register_style,
    "register_dynamic_style": lambda registry: registry.register_dynamic_style,
    "extend": lambda registry: registry.extend,
    "registerStyle": lambda registry: registry.register_style,
    "registerDynamicStyle": lambda registry: registry.register_dynamic_style,
}


class Flu:
    """A sequence of styles, which can be extended through attribute access and
    called to render text.

    Builders are immutable: every resolved attribute returns a new builder, and the
    builder it was accessed on is left untouched. Names that don't resolve to a
    style, a factory, or a registry operation evaluate to `None`.
    """

    __slots__ = ("_styles", "_labels", "_registry")

    def __init__(
        self,
        styles: Tuple[Style, ...],
        labels: Tuple[str, ...],
        registry: StyleRegistry,
    ) -> None:
        self._styles = styles
        self._labels = labels
        self._registry = registry

    @property
    def styles(self) -> Tuple[Style, ...]:
        """Accumulated styles, in chain order."""
        return self._styles

    def _with(self, style: Style, label: str) -> Flu:
        return Flu(self._styles + (style,), self._labels + (label,), self._registry)

    def __call__(self, *values: object) -> str:
        return apply_styles(join_args(values), self._styles)

    def __getattr__(self, name: str) -> Any:
        # Keep Python protocols (copy, pickle, IPython display hooks...) away from
        # the registry.
        if name.startswith("_"):
            raise AttributeError(name)

        operation = _plugin_operations.get(name)
        if operation is not None:
            return operation(self._registry)

        style = self._registry.get_style(name)
        if style is not None:
            return self._with(style, name)

        factory = self._registry.get_factory(name)
        if factory is not None:
            return self._make_dynamic_accessor(name, factory)

        if _settings.options["warn_unknown_styles"]:
            warnings.warn(
                f"{name!r} is not a registered style.",
                category=FluWarning,
                stacklevel=2,
            )
        return None

    def _make_dynamic_accessor(
        self, name: str, factory: StyleFactory
    ) -> Callable[..., Flu]:
        def accessor(*args: Any, **kwargs: Any) -> Flu:
            arg_strs = [repr(a) for a in args]
            arg_strs.extend(f"{k}={v!r}" for k, v in kwargs.items())
            label = f"{name}({', '.join(arg_strs)})"
            return self._with(factory(*args, **kwargs), label)

        accessor.__name__ = name
        return accessor

    # String coercion renders empty text.
    def __str__(self) -> str:
        return self()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __add__(self, other: object) -> Any:
        if isinstance(other, str):
            return str(self) + other
        return NotImplemented

    def __radd__(self, other: object) -> Any:
        if isinstance(other, str):
            return other + str(self)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Flu({', '.join(self._labels)})"

    if TYPE_CHECKING:
        # Built-in styles, for static analysis. At runtime these all go through
        # `__getattr__()`.
        reset: Flu
        bold: Flu
        dim: Flu
        italic: Flu
        underline: Flu
        inverse: Flu
        hidden: Flu
        strikethrough: Flu

        black: Flu
        red: Flu
        green: Flu
        yellow: Flu
        blue: Flu
        magenta: Flu
        cyan: Flu
        white: Flu
        gray: Flu
        grey: Flu
        blackBright: Flu
        redBright: Flu
        greenBright: Flu
        yellowBright: Flu
        blueBright: Flu
        magentaBright: Flu
        cyanBright: Flu
        whiteBright: Flu

        bgBlack: Flu
        bgRed: Flu
        bgGreen: Flu
        bgYellow: Flu
        bgBlue: Flu
        bgMagenta: Flu
        bgCyan: Flu
        bgWhite: Flu
        bgGray: Flu
        bgGrey: Flu
        bgBlackBright: Flu
        bgRedBright: Flu
        bgGreenBright: Flu
        bgYellowBright: Flu
        bgBlueBright: Flu
        bgMagentaBright: Flu
        bgCyanBright: Flu
        bgWhiteBright: Flu

        def rgb(self, r: float, g: float, b: float) -> Flu: ...
        def bgRgb(self, r: float, g: float, b: float) -> Flu: ...
        def hex(self, value: str) -> Flu: ...
        def bgHex(self, value: str) -> Flu: ...

        def register_style(self, name: str, open: str, close: str) -> None: ...
        def register_dynamic_style(self, name: str, factory: StyleFactory) -> None: ...
        def extend(
            self, defs: Mapping[str, Union[StyleLike, StyleFactory]]
        ) -> None: ...

        registerStyle = register_style
        registerDynamicStyle = register_dynamic_style


def create_flu() -> Flu:
    """Create a root builder with its own registry, populated with the built-in
    styles. Styles registered on one root are not visible from others."""
    return Flu((), (), StyleRegistry.default())
