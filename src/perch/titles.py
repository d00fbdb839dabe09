"""Page title resolution.

The title is looked up under ``<controller>.<action>.title`` in the
translation source. When no translation exists the caller's default is
used, and failing that one is generated from the identifiers.

The first resolved title wins for the rest of the render. Content
templates render before their layout, so a content template that calls
``page_title(default="Edit profile")`` fixes the title the layout's
``<title>`` later asks for with no arguments.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from perch.i18n import MISSING, TranslationSource

if TYPE_CHECKING:
    from perch.context import RequestContext
    from perch.identity import IdentityResolver

logger = logging.getLogger("perch.titles")

TITLE_KEY = "title"


class TitleCache:
    """Single-slot, write-once title cell for one render."""

    __slots__ = ("_value",)

    def __init__(self) -> None:
        self._value: str | None = None

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def get(self) -> str | None:
        return self._value

    def get_or_compute(self, compute: Callable[[], str]) -> str:
        """Return the cached title, computing and latching it on first use."""
        if self._value is None:
            self._value = compute()
        return self._value

    def __repr__(self) -> str:
        return f"<TitleCache {self._value!r}>"


def capitalize(word: str) -> str:
    """Upper-case the first character only; the rest is left unchanged."""
    return word[:1].upper() + word[1:]


def default_title(controller_id: str, action_id: str) -> str:
    """Generate a title from the page identifiers: ``"Anime Show"``."""
    return f"{capitalize(controller_id)} {capitalize(action_id)}"


class TitleResolver:
    """Resolve page titles from a translation source."""

    __slots__ = ("_identity", "_translations")

    def __init__(self, identity: IdentityResolver, translations: TranslationSource) -> None:
        self._identity = identity
        self._translations = translations

    def resolve(
        self,
        context: RequestContext,
        cache: TitleCache,
        default: str | None = None,
        **interpolations: Any,
    ) -> str:
        """Return the page title, latched in *cache* after the first call.

        Once *cache* holds a title, *default* and *interpolations* are
        ignored.
        """
        return cache.get_or_compute(
            lambda: self.compute(context, default=default, **interpolations)
        )

    def compute(
        self,
        context: RequestContext,
        default: str | None = None,
        **interpolations: Any,
    ) -> str:
        """Compute the title without consulting any cache."""
        controller_id = self._identity.controller_id(context)
        action_id = self._identity.action_id(context)

        title = self._translations.lookup((controller_id, action_id), TITLE_KEY, interpolations)
        if title is not MISSING:
            return title

        logger.debug("No title translation for %s.%s.%s", controller_id, action_id, TITLE_KEY)
        if default is not None:
            return default
        return default_title(controller_id, action_id)
