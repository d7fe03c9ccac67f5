import math

import pytest

from flu import InvalidColorFormat, Style, parse_hex, truecolor
from flu._catalog import BASE_COLORS, BG_CLOSE, FG_CLOSE, builtin_styles, clamp255


def test_builtin_style_names() -> None:
    styles = builtin_styles()
    # 8 modifiers, 32 color entries, 4 gray aliases.
    assert len(styles) == 44
    for name in BASE_COLORS:
        cap = name.capitalize()
        for variant in (name, f"{name}Bright", f"bg{cap}", f"bg{cap}Bright"):
            assert variant in styles


def test_builtin_style_codes() -> None:
    styles = builtin_styles()
    assert styles["reset"] == Style("\x1b[0m", "\x1b[0m")
    assert styles["bold"] == Style("\x1b[1m", "\x1b[22m")
    assert styles["dim"] == Style("\x1b[2m", "\x1b[22m")
    assert styles["strikethrough"] == Style("\x1b[9m", "\x1b[29m")
    assert styles["red"] == Style("\x1b[31m", FG_CLOSE)
    assert styles["whiteBright"] == Style("\x1b[97m", FG_CLOSE)
    assert styles["bgBlue"] == Style("\x1b[44m", BG_CLOSE)
    assert styles["bgWhiteBright"] == Style("\x1b[107m", BG_CLOSE)
    assert styles["gray"] == styles["grey"] == styles["blackBright"]
    assert styles["bgGray"] == styles["bgGrey"] == styles["bgBlackBright"]
    assert FG_CLOSE == "\x1b[39m"
    assert BG_CLOSE == "\x1b[49m"


def test_builtin_styles_are_fresh() -> None:
    a = builtin_styles()
    a["red"] = Style("", "")
    assert builtin_styles()["red"] == Style("\x1b[31m", "\x1b[39m")


def test_clamp255() -> None:
    assert clamp255(-5) == 0
    assert clamp255(300) == 255
    assert clamp255(2.9) == 2
    assert clamp255(255.9) == 255
    assert clamp255("12") == 12
    assert clamp255("not a number") == 0
    assert clamp255(None) == 0
    assert clamp255(math.nan) == 0
    assert clamp255(math.inf) == 255
    assert clamp255(-math.inf) == 0
    assert clamp255(10**400) == 255
    assert clamp255(-(10**400)) == 0


def test_truecolor() -> None:
    assert truecolor("fg", -5, 300, 2.9) == Style("\x1b[38;2;0;255;2m", "\x1b[39m")
    assert truecolor("bg", 1, 2, 3) == Style("\x1b[48;2;1;2;3m", "\x1b[49m")
    assert truecolor(38, 1, 2, 3) == truecolor("fg", 1, 2, 3)
    assert truecolor(48, 1, 2, 3) == truecolor("bg", 1, 2, 3)


def test_parse_hex() -> None:
    assert parse_hex("#fff") == parse_hex("#ffffff") == (255, 255, 255)
    assert parse_hex("000") == (0, 0, 0)
    assert parse_hex("AbC") == (170, 187, 204)
    assert parse_hex("#ff8800") == (255, 136, 0)
    assert parse_hex("  #123456 ") == (0x12, 0x34, 0x56)


@pytest.mark.parametrize(
    "value", ["12g", "1234", "", "#", "##fff", "#ff88001", "#gggggg", "f f"]
)
def test_parse_hex_invalid(value: str) -> None:
    with pytest.raises(InvalidColorFormat) as e:
        parse_hex(value)
    assert e.value.value == value
    assert isinstance(e.value, ValueError)
