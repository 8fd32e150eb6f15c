from __future__ import annotations
from functools import partial
from typing import Any, Awaitable, Callable, Dict, Optional

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, User

from .i18n import Translator


class I18nMiddleware(BaseMiddleware):
    """Injects ``lang``, ``i18n`` and ``i18nf`` into handler data.

    The language comes from the sender's ``language_code``; region tags such as
    ``es-MX`` are passed through as is and resolved by the translator fallback.
    """

    def __init__(self, translator: Translator, default_language: Optional[str] = None) -> None:
        self.translator = translator
        self.default_language = default_language

    def _get_locale(self, user: Optional[User]) -> str:
        default = self.default_language or self.translator.default_language
        return (user.language_code or default) if user else default

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        lang = self._get_locale(data.get("event_from_user"))
        data["lang"] = lang
        data["i18n"] = partial(self.translator.println, lang)
        data["i18nf"] = partial(self.translator.printf, lang)
        return await handler(event, data)
