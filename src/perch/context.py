"""Request context and request-scoped page state via ContextVar.

Provides:
- ``RequestContext``: what perch needs to know about the current request.
- ``HandlerContext``: a plain implementation of it.
- ``page_scope()``: binds a ``PageState`` for the duration of one render.
- ``get_page()``: the current ``PageState``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. A ``PageState`` is only touched by the render that owns it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from perch.errors import NoActivePage
from perch.flash import FlashMessages
from perch.titles import TitleCache


@runtime_checkable
class RequestContext(Protocol):
    """The handler and action serving the current request."""

    def handler_type_name(self) -> str: ...

    def raw_action_name(self) -> str: ...


@dataclass(frozen=True, slots=True)
class HandlerContext:
    """A ``RequestContext`` built from plain values.

    Usage::

        HandlerContext("Admin::AnimeController", "update")
        HandlerContext.for_handler(AnimeController, "show")
    """

    handler: str
    action: str

    @classmethod
    def for_handler(cls, handler: Any, action: str) -> HandlerContext:
        """Build a context from a handler class or instance.

        Uses the qualified name, so nested classes keep their namespace:
        ``Admin.AnimeController`` → ``"admin_anime"``. ``<locals>`` segments
        of classes defined inside a function are dropped.
        """
        target = handler if isinstance(handler, type) else type(handler)
        segments = [part for part in target.__qualname__.split(".") if part != "<locals>"]
        return cls(".".join(segments), action)

    def handler_type_name(self) -> str:
        return self.handler

    def raw_action_name(self) -> str:
        return self.action


@dataclass(slots=True)
class PageState:
    """Mutable state for one page render.

    ``client_init_method`` lets a content template name an extra client
    hook that the layout's init script then calls.
    """

    context: RequestContext
    flash: FlashMessages = field(default_factory=FlashMessages)
    title_cache: TitleCache = field(default_factory=TitleCache)
    client_init_method: str | None = None


_page_var: ContextVar[PageState | None] = ContextVar("perch_page", default=None)


def get_page() -> PageState:
    """Return the current page state.

    Raises ``NoActivePage`` (a ``LookupError``) outside ``page_scope()``.
    """
    page = _page_var.get()
    if page is None:
        msg = (
            "No active page. Wrap rendering in perch.page_scope(context) "
            "before calling page helpers."
        )
        raise NoActivePage(msg)
    return page


@contextmanager
def page_scope(
    context: RequestContext,
    *,
    flash: FlashMessages | Mapping[Any, str] | None = None,
) -> Iterator[PageState]:
    """Bind a fresh ``PageState`` for one render.

    Usage::

        with page_scope(HandlerContext("AnimeController", "show"), flash=session_flash):
            html = template.render(ctx)

    Scopes nest; the outer page is restored on exit.
    """
    if flash is None:
        store = FlashMessages()
    elif isinstance(flash, FlashMessages):
        store = flash
    else:
        store = FlashMessages(flash)

    page = PageState(context=context, flash=store)
    token = _page_var.set(page)
    try:
        yield page
    finally:
        _page_var.reset(token)
