"""Command-line entrypoint, mostly useful for previewing styles."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, Tuple

import tyro
from tyro.conf import Positional

from ._builder import Flu, create_flu
from ._compositor import strip_ansi
from ._errors import InvalidColorFormat


def _resolve(root: Flu, styles: Tuple[str, ...]) -> Flu:
    builder = root
    for name in styles:
        next_builder = getattr(builder, name, None)
        if not isinstance(next_builder, Flu):
            if root._registry.get_factory(name) is not None:
                raise SystemExit(
                    f"Style {name!r} takes arguments and can't be used with"
                    " --style. Use --fg or --bg for truecolor."
                )
            raise SystemExit(
                f"Unknown style: {name!r}. Run `flu list` to see choices."
            )
        builder = next_builder
    return builder


def render(
    text: Positional[Tuple[str, ...]],
    style: Tuple[str, ...] = (),
    fg: Optional[str] = None,
    bg: Optional[str] = None,
    plain: bool = False,
) -> None:
    """Print text with styles applied.

    Args:
        text: Values to render. They are joined with spaces.
        style: Names of static styles to apply, outermost first.
        fg: Foreground truecolor, as #RGB or #RRGGBB.
        bg: Background truecolor, as #RGB or #RRGGBB.
        plain: Print the text with escape sequences removed.
    """
    builder = _resolve(create_flu(), style)
    try:
        if fg is not None:
            builder = builder.hex(fg)
        if bg is not None:
            builder = builder.bgHex(bg)
    except InvalidColorFormat as e:
        print(f"flu: {e}", file=sys.stderr)
        raise SystemExit(2)

    out = builder(*text)
    print(strip_ansi(out) if plain else out)


def list_styles() -> None:
    """Print every built-in style, rendered in itself."""
    root = create_flu()
    registry = root._registry
    for name in registry.names():
        if registry.get_style(name) is not None:
            print(getattr(root, name)(name))
        else:
            print(f"{name}(...)")


def main(args: Optional[Sequence[str]] = None) -> None:
    tyro.extras.subcommand_cli_from_dict(
        {
            "render": render,
            "list": list_styles,
        },
        prog="flu",
        description="Preview flu styles in the terminal.",
        args=args,
    )
