"""Reading of flat ``KEY=VALUE`` translation files.

Every file in the locales directory is one language; its file name is the
language tag (``en``, ``es-MX``). Lines starting with the comment prefix and
blank lines are ignored.
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from .errors import FormatError

logger = logging.getLogger("flati18n")

DEFAULT_SEPARATOR = "="
DEFAULT_COMMENT = "#"

Entry = Tuple[str, str, str]


def parse_line(line: str, separator: str = DEFAULT_SEPARATOR) -> Tuple[str, str]:
    """Split ``line`` on the first ``separator``.

    Further separators stay in the value. A line starting with the separator
    gives an empty key.
    """
    key, sep, value = line.partition(separator or DEFAULT_SEPARATOR)
    if not sep:
        raise FormatError(line)
    return key, value


def read_lines(path: Path, comment: str = DEFAULT_COMMENT, strict: bool = False) -> List[Tuple[int, str]]:
    """Return ``(lineno, line)`` for every non-blank, non-comment line of ``path``."""
    comment = comment or DEFAULT_COMMENT
    out: list[Tuple[int, str]] = []
    # Stray binary files (e.g. .DS_Store) must not break a lenient load.
    with path.open("r", encoding="utf-8", errors="strict" if strict else "replace", newline="\n") as f:
        for lineno, raw in enumerate(f, start=1):
            # Only \n ends a line; a lone \r inside a value is kept.
            line = raw[:-1] if raw.endswith("\n") else raw
            if line.endswith("\r"):
                line = line[:-1]
            if not line or line.startswith(comment):
                continue
            out.append((lineno, line))
    return out


def iter_files(directory: Path, recursive: bool = False) -> Iterator[Path]:
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            # Symlinked directories are neither followed nor loaded.
            if entry.is_symlink():
                continue
            if recursive:
                yield from iter_files(entry, recursive=True)
            continue
        yield entry


def load_entries(
    directory: Path | str,
    separator: str = DEFAULT_SEPARATOR,
    comment: str = DEFAULT_COMMENT,
    *,
    strict: bool = False,
    recursive: bool = False,
) -> List[Entry]:
    """Read every translation file under ``directory`` into ``(lang, key, value)`` triples.

    Raises ``OSError`` when the directory or one of its files cannot be read;
    the remaining files are not visited. In strict mode a malformed line raises
    ``FormatError``, otherwise it is skipped.
    """
    separator = separator or DEFAULT_SEPARATOR
    comment = comment or DEFAULT_COMMENT
    entries: list[Entry] = []
    for path in iter_files(Path(directory), recursive=recursive):
        lang = path.name
        skipped = 0
        for lineno, line in read_lines(path, comment, strict=strict):
            try:
                key, value = parse_line(line, separator)
            except FormatError:
                if strict:
                    raise FormatError(line, source=str(path), lineno=lineno) from None
                skipped += 1
                continue
            entries.append((lang, key, value))
        if skipped:
            logger.debug("load: %s skipped %d malformed line(s)", path, skipped)
    return entries
