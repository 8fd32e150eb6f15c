from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Callable, Dict, MutableMapping, Optional

from .loader import DEFAULT_COMMENT, DEFAULT_SEPARATOR, load_entries
from .table import TranslationTable
from .utils import log_if_slow

logger = logging.getLogger("flati18n")

FuncMap = MutableMapping[str, Callable[..., str]]


class Translator:
    """Owns a translation table and the default language used as last fallback.

    Lookups resolve the exact language tag first, then its two-letter prefix,
    then the default language, and finally return the key itself.
    """

    def __init__(
        self,
        default_language: str = "",
        *,
        strict: bool = False,
        recursive: bool = False,
        table: Optional[TranslationTable] = None,
    ) -> None:
        self.default_language = default_language
        self.strict = strict
        self.recursive = recursive
        self.table = table if table is not None else TranslationTable()

    @log_if_slow()
    def load(
        self,
        directory: Path | str,
        default_language: str,
        separator: str = "",
        comment: str = "",
        *,
        strict: Optional[bool] = None,
        recursive: Optional[bool] = None,
    ) -> int:
        """Merge the translation files of ``directory`` into the table.

        An empty ``separator`` means ``=`` and an empty ``comment`` means ``#``.
        Existing entries are overwritten, never cleared. Returns the number of
        entries read.
        """
        self.default_language = default_language
        entries = load_entries(
            directory,
            separator or DEFAULT_SEPARATOR,
            comment or DEFAULT_COMMENT,
            strict=self.strict if strict is None else strict,
            recursive=self.recursive if recursive is None else recursive,
        )
        self.table.update(entries)
        logger.info("load: %d entries from %s (default language %s)", len(entries), directory, default_language)
        return len(entries)

    def _resolve(self, lang: str, key: str) -> Optional[str]:
        # A tag shorter than two characters is its own prefix; the retry just misses again.
        found = self.table.get(lang[:2], key)
        if found is not None:
            return found
        return self.table.get(self.default_language, key)

    def printf(self, lang: str, key: str, *args: Any, **kwargs: Any) -> str:
        """Translate ``key`` and substitute ``{}`` placeholders with the given arguments."""
        template = self.table.get(lang, key)
        if template is None:
            logger.info("printf: lang [%s] key [%s] not found", lang, key)
            template = self._resolve(lang, key)
            if template is None:
                return key
        try:
            return template.format(*args, **kwargs)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
            logger.warning("printf: cannot format lang [%s] key [%s]: %s", lang, key, e)
            return template

    def println(self, lang: str, key: str) -> str:
        template = self.table.get(lang, key)
        if template is None:
            template = self._resolve(lang, key)
        return key if template is None else template

    def func_map(self) -> Dict[str, Callable[..., str]]:
        return {"i18n": self.println, "i18nf": self.printf}

    def reutilize_func_map(self, fnmap: FuncMap) -> FuncMap:
        """Add ``i18n`` and ``i18nf`` to a template function registry and return it."""
        fnmap.update(self.func_map())
        return fnmap

    def __len__(self) -> int:
        return len(self.table)


def load(
    directory: Path | str,
    default_language: str,
    separator: str = "",
    comment: str = "",
    *,
    strict: bool = False,
    recursive: bool = False,
) -> Translator:
    """Build a :class:`Translator` from the files in ``directory``."""
    translator = Translator(default_language, strict=strict, recursive=recursive)
    translator.load(directory, default_language, separator, comment)
    return translator
