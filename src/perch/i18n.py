"""Translation lookup for page titles.

perch only needs one thing from an i18n layer: look up a string under a
scope path and interpolate ``%{name}`` placeholders. ``TranslationSource``
describes that shape; ``Translations`` is a small in-memory backend that
satisfies it. Anything with a matching ``lookup`` method can replace it.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Final, Protocol, runtime_checkable

logger = logging.getLogger("perch.i18n")

_PLACEHOLDER = re.compile(r"%\{(\w+)\}")


class _Missing:
    """Sentinel for a translation that does not exist."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@runtime_checkable
class TranslationSource(Protocol):
    """Anything that can resolve a scoped translation key."""

    def lookup(
        self,
        scope: Sequence[str],
        key: str,
        interpolations: Mapping[str, Any],
    ) -> str | _Missing: ...


def interpolate(template: str, values: Mapping[str, Any]) -> str:
    """Fill ``%{name}`` placeholders in *template* from *values*.

    Placeholders without a value are left as-is.
    """

    def _fill(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return str(values[name])
        logger.warning("No value for placeholder %%{%s} in %r", name, template)
        return match.group(0)

    return _PLACEHOLDER.sub(_fill, template)


class Translations:
    """In-memory, nested-dict translation store.

    Usage::

        translations = Translations()
        translations.store("en", {"anime": {"show": {"title": "An awesome title, %{name}"}}})
        translations.lookup(["anime", "show"], "title", {"name": "bro"})
        → "An awesome title, bro"
    """

    __slots__ = ("_data", "locale")

    def __init__(self, locale: str = "en") -> None:
        self.locale = locale
        self._data: dict[str, dict[str, Any]] = {}

    def store(self, locale: str, data: Mapping[str, Any]) -> None:
        """Deep-merge *data* into the translations for *locale*."""
        _deep_merge(self._data.setdefault(locale, {}), data)

    def lookup(
        self,
        scope: Sequence[str],
        key: str,
        interpolations: Mapping[str, Any],
    ) -> str | _Missing:
        node: Any = self._data.get(self.locale, {})
        for part in (*scope, key):
            if not isinstance(node, Mapping) or part not in node:
                return MISSING
            node = node[part]
        if not isinstance(node, str):
            return MISSING
        return interpolate(node, interpolations)

    def __repr__(self) -> str:
        return f"<Translations locale={self.locale!r} locales={sorted(self._data)!r}>"


def _deep_merge(target: dict[str, Any], data: Mapping[str, Any]) -> None:
    for key, value in data.items():
        key = str(key)
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, dict):
            _deep_merge(existing, value)
        elif isinstance(value, Mapping):
            target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value
