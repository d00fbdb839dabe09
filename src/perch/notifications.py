"""Flash message banners.

Renders pending flash messages as dismissible Bootstrap alerts::

    <div class="alert alert-success fade in"><button type="button" class="close"
    data-dismiss="alert">x</button>Saved.</div>

``error`` and ``alert`` carry both ``alert-danger`` (Bootstrap 3) and
``alert-error`` (Bootstrap 2). Unknown categories become their own
``alert-<category>`` class.

Message text is run through the flash denylist and emitted as markup;
the joined result is ``Markup`` so autoescaping templates leave it alone.
"""

import html
import logging
from collections.abc import Collection, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from kida.utils.html import Markup

from perch.flash import normalize_category
from perch.sanitize import sanitize_message

logger = logging.getLogger("perch.notifications")

FLASH_CLASSES = MappingProxyType(
    {
        "success": "success",
        "notice": "info",
        "error": "danger alert-error",
        "alert": "danger alert-error",
    }
)

IGNORED_CATEGORIES: frozenset[str] = frozenset({"timedout"})

DEFAULT_BUTTON_CONTENT = "x"
DEFAULT_BUTTON_CLASS = "close"


def flash_class(category: Any) -> str:
    """Return the alert classes for *category*: ``"alert alert-info"``."""
    category = normalize_category(category)
    return f"alert alert-{FLASH_CLASSES.get(category, category)}"


def render_banner(
    category: Any,
    message: str,
    *,
    button_content: str = DEFAULT_BUTTON_CONTENT,
    button_class: str = DEFAULT_BUTTON_CLASS,
) -> str:
    """Render one dismissible banner. *button_content* is trusted markup."""
    classes = html.escape(f"{flash_class(category)} fade in", quote=True)
    button = (
        f'<button type="button" class="{html.escape(button_class, quote=True)}"'
        f' data-dismiss="alert">{button_content}</button>'
    )
    return f'<div class="{classes}">{button}{sanitize_message(message)}</div>'


def render_notifications(
    messages: Mapping[Any, Any] | Iterable[tuple[Any, Any]],
    *,
    button_content: str | None = None,
    button_class: str | None = None,
    ignored: Collection[str] = IGNORED_CATEGORIES,
) -> Markup:
    """Render all pending messages as banners, in insertion order.

    Ignored categories (``timedout`` always among them) and blank
    messages are skipped. ``None`` for a button option means the
    default; an empty string is a valid override. Always returns
    ``Markup``, empty when nothing qualifies.
    """
    if button_content is None:
        button_content = DEFAULT_BUTTON_CONTENT
    if button_class is None:
        button_class = DEFAULT_BUTTON_CLASS

    items = messages.items() if isinstance(messages, Mapping) else messages
    fragments: list[str] = []
    for key, message in items:
        category = normalize_category(key)
        if category in IGNORED_CATEGORIES or category in ignored:
            logger.debug("Skipping flash %r: ignored category", category)
            continue
        if message is None or not str(message).strip():
            logger.debug("Skipping flash %r: blank message", category)
            continue
        fragments.append(
            render_banner(
                category,
                str(message),
                button_content=button_content,
                button_class=button_class,
            )
        )
    return Markup("\n".join(fragments))
