"""Controller, action and page identifiers for the current request."""

from __future__ import annotations

from typing import TYPE_CHECKING

from perch.actions import page_action
from perch.config import PerchConfig
from perch.naming import format_handler_name

if TYPE_CHECKING:
    from perch.context import RequestContext


class IdentityResolver:
    """Derive page identifiers from a request context.

    Recomputed on every call; nothing is cached at this layer.
    """

    __slots__ = ("_config",)

    def __init__(self, config: PerchConfig) -> None:
        self._config = config

    @property
    def config(self) -> PerchConfig:
        return self._config

    def controller_id(self, context: RequestContext) -> str:
        """``"Admin::AnimeController"`` → ``"admin_anime"`` (or ``"admin-anime"``)."""
        return format_handler_name(
            context.handler_type_name(),
            self._config.selector_format,
            suffix=self._config.handler_suffix,
        )

    def action_id(self, context: RequestContext) -> str:
        """The request's action, with ``create``/``update`` mapped to ``new``/``edit``."""
        return page_action(context.raw_action_name())

    def page_id(self, context: RequestContext) -> str:
        """Controller and action identifiers joined by a space, for a ``class`` attribute."""
        return f"{self.controller_id(context)} {self.action_id(context)}"
