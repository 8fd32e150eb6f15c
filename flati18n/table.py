from __future__ import annotations
import threading
from typing import Iterable, Mapping, Optional, Tuple

KEY_SEPARATOR = ":"
MAX_LANG_LEN = 5


def clean_lang(lang: str) -> str:
    return lang.lower()[:MAX_LANG_LEN]


def bullet(lang: str, key: str) -> str:
    # Entry keys are case-sensitive and kept as is; only the tag is normalized.
    return clean_lang(lang) + KEY_SEPARATOR + key


class TranslationTable:
    # Readers look up the current snapshot without locking. Writers build a new
    # dict under the lock and swap the reference, so a merge is seen whole or not at all.
    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, str] = dict(entries or {})

    def get(self, lang: str, key: str) -> Optional[str]:
        return self._entries.get(bullet(lang, key))

    def update(self, pairs: Iterable[Tuple[str, str, str]]) -> int:
        """Merge ``(lang, key, value)`` triples; later triples overwrite earlier ones."""
        staged = {bullet(lang, key): value for lang, key, value in pairs}
        with self._lock:
            merged = dict(self._entries)
            merged.update(staged)
            self._entries = merged
        return len(staged)

    def clear(self) -> None:
        with self._lock:
            self._entries = {}

    def snapshot(self) -> dict[str, str]:
        return dict(self._entries)

    def __contains__(self, composite: object) -> bool:
        return composite in self._entries

    def __len__(self) -> int:
        return len(self._entries)
