"""Action name normalization.

A failed ``create`` re-renders the ``new`` form and a failed ``update``
re-renders ``edit``, so both collapse onto the verb of the page the user
is looking at. Unknown actions map to themselves.
"""

from types import MappingProxyType

PAGE_ACTIONS = MappingProxyType({"create": "new", "update": "edit"})
"""Action remapping used for page identifiers and title lookup."""

CLIENT_HOOK_ACTIONS = MappingProxyType({"create": "new", "update": "edit"})
"""Action remapping used for client init hook names."""


def page_action(action: str) -> str:
    """Return the page verb for *action*."""
    return PAGE_ACTIONS.get(action, action)


def client_hook_action(action: str) -> str:
    """Return the client hook segment for *action*."""
    return CLIENT_HOOK_ACTIONS.get(action, action)
