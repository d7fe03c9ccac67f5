"""Custom Styles

Styles can be registered at runtime, and are visible to every builder that shares the
same root, including builders created before registration.

Usage:

    python ./04_custom_styles.py
"""

from flu import Style, create_flu


def ansi256(n: int) -> Style:
    """256-color foreground."""
    return Style(f"\x1b[38;5;{n}m", "\x1b[39m")


if __name__ == "__main__":
    flu = create_flu()
    heading = flu.bold

    flu.register_style("overline", "\x1b[53m", "\x1b[55m")
    flu.register_dynamic_style("ansi256", ansi256)
    flu.extend({"blink": ("\x1b[5m", "\x1b[25m")})

    print(heading.overline("heading"))
    print(flu.ansi256(208)("orange"), flu.blink("blinking"))
