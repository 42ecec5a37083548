# core/i18n.py

"""
Language selection for the CLI.

A `LanguageContext` holds the active language and resolves dotted keys (e.g. "students.title")
against the static tables in `core.translations`. `LanguageProvider` makes one context active for
the duration of a `with` block; menus reach it through `use_language()`, which fails loudly when
no provider is active.

Only the display language changes on toggle. Nothing here touches stored data.
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Any

from core.translations import TRANSLATIONS

LANGUAGES = ("eu", "es")
DEFAULT_LANGUAGE = "eu"

_active_context: ContextVar[LanguageContext | None] = ContextVar(
    "active_language_context", default=None
)


class LanguageContext:

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        self._language = language

    # === properties ===

    @property
    def language(self) -> str:
        return self._language

    @property
    def table(self) -> dict:
        return TRANSLATIONS[self._language]

    def toggle(self) -> str:
        self._language = "es" if self._language == "eu" else "eu"
        return self._language

    # === lookups ===

    def t(self, key: str) -> Any:
        """
        Resolves a dotted key against the active table.

        Returns:
            The string (or list, for day and month names) stored under the key. Unknown keys
            return the key itself so a missing label shows up on screen instead of crashing a menu.
        """
        node: Any = self.table

        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return key
            node = node[part]

        return node

    def month_name(self, month: int) -> str:
        return self.t("calendar.month_names")[month - 1]

    def day_names(self) -> list[str]:
        return list(self.t("calendar.day_names"))

    def __repr__(self) -> str:
        return f"LanguageContext({self._language})"


class LanguageProvider:
    """
    Context manager that activates a `LanguageContext`.

    Usage:
        with LanguageProvider() as lang:
            ...
            use_language() is lang  # True inside the block
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self._context = LanguageContext(language)
        self._token: Token | None = None

    def __enter__(self) -> LanguageContext:
        self._token = _active_context.set(self._context)
        return self._context

    def __exit__(self, *exc_info) -> None:
        if self._token is not None:
            _active_context.reset(self._token)
            self._token = None


def use_language() -> LanguageContext:
    context = _active_context.get()

    if context is None:
        raise RuntimeError("use_language must be used within a LanguageProvider")

    return context
