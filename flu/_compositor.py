"""Rendering text through a sequence of styles."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from ._catalog import Style

_ANSI_PATTERN = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def apply_styles(text: str, styles: Sequence[Style]) -> str:
    """Wrap `text` in each style, first style outermost.

    ANSI styles don't nest: an inner close sequence ends the effect for everything
    that shares it. Before wrapping, every occurrence of a style's close sequence in
    the text is therefore followed by that style's open sequence again, so the
    outer style resumes after the nested segment.

    Empty text or an empty style sequence returns `text` as-is.
    """
    if len(styles) == 0 or len(text) == 0:
        return text
    out = text
    # The last style is wrapped first, which leaves the first style outermost.
    for style in reversed(styles):
        reopened = out.replace(style.close, style.close + style.open)
        out = style.open + reopened + style.close
    return out


def _to_str(value: object) -> str:
    # Booleans are rendered lowercase, as `true` and `false`.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def join_args(args: Iterable[object]) -> str:
    """Convert arguments to strings and join them with single spaces."""
    return " ".join(_to_str(arg) for arg in args)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from a string."""
    return _ANSI_PATTERN.sub("", text)
