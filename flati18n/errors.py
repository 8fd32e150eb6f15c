from __future__ import annotations


class FormatError(ValueError):
    """Raised when a translation line has no KEY=VALUE separator."""

    def __init__(self, line: str, source: str | None = None, lineno: int | None = None) -> None:
        self.line = line
        self.source = source
        self.lineno = lineno
        where = f"{source}:{lineno}: " if source is not None else ""
        super().__init__(f"{where}line must contain KEY=VALUE")
