"""Pending flash messages.

A flash is a one-shot message set by a handler and shown on the next
rendered page. The store is ordered by first insertion; categories may
be strings or enum members and are normalized to plain strings.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from enum import Enum
from typing import Any


def normalize_category(key: Any) -> str:
    """Return the canonical string form of a flash category."""
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


class FlashMessages(MutableMapping[str, str]):
    """Ordered ``category → message`` store for one request.

    Usage::

        flash = FlashMessages()
        flash.add("success", "Saved.")
        flash[Level.ERROR] = "Could not reach the server."

        for category, message in flash.consume():
            ...
    """

    __slots__ = ("_messages",)

    def __init__(self, messages: Mapping[Any, str] | None = None) -> None:
        self._messages: dict[str, str] = {}
        if messages:
            for category, message in messages.items():
                self.add(category, message)

    def add(self, category: Any, message: str) -> None:
        """Set the message for *category*. Re-adding keeps the original position."""
        self._messages[normalize_category(category)] = message

    def consume(self) -> list[tuple[str, str]]:
        """Return all pending messages and clear the store."""
        items = list(self._messages.items())
        self._messages.clear()
        return items

    def clear(self) -> None:
        self._messages.clear()

    def __setitem__(self, category: Any, message: str) -> None:
        self.add(category, message)

    def __getitem__(self, category: Any) -> str:
        return self._messages[normalize_category(category)]

    def __delitem__(self, category: Any) -> None:
        del self._messages[normalize_category(category)]

    def __contains__(self, category: object) -> bool:
        return normalize_category(category) in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"<FlashMessages {self._messages!r}>"
