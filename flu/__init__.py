"""Chainable ANSI styling for terminal text."""

__version__ = "0.1.0"


from . import _settings as _settings
from ._builder import Flu as Flu
from ._builder import create_flu as create_flu
from ._catalog import Style as Style
from ._catalog import StyleFactory as StyleFactory
from ._catalog import parse_hex as parse_hex
from ._catalog import truecolor as truecolor
from ._compositor import strip_ansi as strip_ansi
from ._errors import FluWarning as FluWarning
from ._errors import InvalidColorFormat as InvalidColorFormat
from ._registry import StyleRegistry as StyleRegistry

flu: Flu = create_flu()
"""Default root builder. Use :func:`create_flu()` for a root with an independent
registry."""
