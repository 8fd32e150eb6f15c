from __future__ import annotations
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .i18n import Translator
from .settings import Settings


def setup_logging(level: str, log_file: Optional[Path | str] = None) -> None:
    # Safe to call on every build(); handlers are attached once.
    logger = logging.getLogger("flati18n")
    logger.setLevel(level)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    if log_file is not None:
        path = os.path.abspath(log_file)
        if any(getattr(h, "baseFilename", None) == path for h in logger.handlers):
            return
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)


def build(settings: Optional[Settings] = None) -> Translator:
    """Load settings from the environment (unless given) and return a loaded translator."""
    settings = settings or Settings.load()
    setup_logging(settings.log_level)
    logger = logging.getLogger("flati18n")
    logger.info("loading translations from %s", settings.locales_dir)

    translator = Translator(settings.default_language, strict=settings.strict, recursive=settings.recursive)
    translator.load(settings.locales_dir, settings.default_language, settings.separator, settings.comment)
    return translator
