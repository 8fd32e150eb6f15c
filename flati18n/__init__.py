"""Flat-file translation lookup with language fallback."""
from importlib import metadata

from .errors import FormatError
from .i18n import Translator, load
from .loader import parse_line
from .table import TranslationTable, bullet, clean_lang

__all__ = [
    "FormatError",
    "Translator",
    "TranslationTable",
    "bullet",
    "clean_lang",
    "load",
    "parse_line",
    "__version__",
]

try:
    __version__ = metadata.version("flati18n")
except metadata.PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.1.0"
