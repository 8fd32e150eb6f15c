from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    locales_dir: Path
    default_language: str
    separator: str
    comment: str
    strict: bool
    recursive: bool
    log_level: str

    @staticmethod
    def load() -> "Settings":
        # Load .env in dev if present
        if os.path.exists(".env"):
            load_dotenv(".env")

        locales_dir = os.getenv("I18N_DIR", "").strip()
        if not locales_dir:
            raise RuntimeError("I18N_DIR is required")

        return Settings(
            locales_dir=Path(locales_dir).resolve(),
            default_language=os.getenv("I18N_DEFAULT_LANG", "en").strip() or "en",
            separator=os.getenv("I18N_SEPARATOR", "="),
            comment=os.getenv("I18N_COMMENT", "#"),
            strict=_flag("I18N_STRICT"),
            recursive=_flag("I18N_RECURSIVE"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
