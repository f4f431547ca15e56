"""
String utilities with .NET flavoured ergonomics: comparison, containment and
affix checks, case conversion, printf-style formatting and token splitting for
both narrow (bytes) and wide (str) character sequences.
"""

# std
from importlib.metadata import version

# third-party
from loguru import logger

# silence logging by default
logger.disable('xstrings')

# relative
from .config import CONFIG
from .traits import NARROW, WIDE, traits_of
from .split import SplitOptions, split
from .casing import CaseTable, to_lower, to_upper
from .printf import FormatArg, FormatError, Formatter, Kind, format
from .compare import compare, concat, contains, ends_with, starts_with


# ---------------------------------------------------------------------------- #

# version
__version__ = version('xstrings')


# aliases
lower = to_lower
upper = to_upper
