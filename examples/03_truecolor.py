"""Truecolor

`rgb()`, `bgRgb()`, `hex()` and `bgHex()` must be called before chaining further.
Channels are clamped into 0..255; malformed hex strings raise `InvalidColorFormat`.

Usage:

    python ./03_truecolor.py
"""

import flu

if __name__ == "__main__":
    root = flu.flu
    for i in range(0, 256, 32):
        print(root.bgRgb(i, 64, 255 - i)("  "), end="")
    print()
    print(root.hex("#ff8800").bold("orange"), root.bgHex("#222").hex("#0f0")("green"))

    try:
        root.hex("#12345g")
    except flu.InvalidColorFormat as e:
        print(f"{e.value!r} is not a hex color")
