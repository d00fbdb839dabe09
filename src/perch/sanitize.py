"""Minimal sanitization for flash message text.

A fixed denylist, not a general-purpose sanitizer:

- ``<script>`` elements are removed together with their body.
- ``<img>`` elements are removed.
- ``<a>`` elements are unwrapped: the tags go, the link text stays.

Everything else passes through untouched, because flash text is emitted
as markup.
"""

import re
from collections.abc import Callable

_SCRIPT_ELEMENT = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
# Unterminated openers and stray closers left behind by the element pass
_SCRIPT_TAG = re.compile(r"</?script\b[^>]*>", re.IGNORECASE)
_IMG_TAG = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_ANCHOR_TAG = re.compile(r"<a\b[^>]*>|</a\s*>", re.IGNORECASE)


def _until_stable(strip: Callable[[str], str], text: str) -> str:
    # Removing a tag can join its neighbours into a new one: "<im<img>g>"
    while (stripped := strip(text)) != text:
        text = stripped
    return text


def _strip_scripts_once(text: str) -> str:
    return _SCRIPT_TAG.sub("", _SCRIPT_ELEMENT.sub("", text))


def _sanitize_once(text: str) -> str:
    return _ANCHOR_TAG.sub("", _IMG_TAG.sub("", _strip_scripts_once(text)))


def strip_scripts(text: str) -> str:
    """Remove ``<script>`` elements and their content."""
    return _until_stable(_strip_scripts_once, text)


def strip_images(text: str) -> str:
    """Remove ``<img>`` elements, self-closing or not."""
    return _until_stable(lambda t: _IMG_TAG.sub("", t), text)


def unwrap_links(text: str) -> str:
    """Remove ``<a>`` tags, keeping the text between them."""
    return _until_stable(lambda t: _ANCHOR_TAG.sub("", t), text)


def sanitize_message(text: str) -> str:
    """Apply the flash denylist to *text*.

    All rules are reapplied until nothing changes, since one rule's
    removal can assemble a tag another rule targets.
    """
    return _until_stable(_sanitize_once, text)
