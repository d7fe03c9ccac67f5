"""Nesting

Styled strings can be passed into other styled calls. Close sequences that belong to
the outer style are reopened, so the outer style resumes after the nested segment.

Usage:

    python ./02_nesting.py
"""

from flu import flu

if __name__ == "__main__":
    print(flu.underline("underlined,", flu.bold("bold and underlined,"), "underlined"))
    print(flu.red("red,", flu.blue("blue,"), "red again"))
