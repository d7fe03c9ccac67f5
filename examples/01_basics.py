"""Basics

Styles are selected through attribute access, and applied by calling the builder.
Arguments are joined with spaces.

Usage:

    python ./01_basics.py
"""

from flu import flu

if __name__ == "__main__":
    print(flu.bold("bold"), flu.italic("italic"), flu.underline("underline"))
    print(flu.red("red"), flu.greenBright("greenBright"), flu.bgBlue.white("bgBlue"))
    print(flu.bold.red("error:"), "exit code", 1)
