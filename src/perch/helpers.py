"""Template-facing page helpers.

``PageHelpers`` is the composition root: it binds a configuration and a
translation source, and reads everything request-specific from the
current ``page_scope()``.

Usage::

    helpers = PageHelpers(translations=translations)
    env = create_environment(helpers)

    with page_scope(HandlerContext("Admin::AnimeController", "update"), flash=flash):
        html = env.get_template("anime/edit.html").render(ctx)

Templates::

    <body class="{{ page_class() }}">
      <title>{{ page_title() }}</title>
      {{ flash_messages() }}
      {{ javascript_initialization("Shop") }}
"""

from collections.abc import Callable
from typing import Any

from kida.utils.html import Markup

from perch import hooks
from perch.config import PerchConfig, SelectorFormat, get_config
from perch.context import get_page
from perch.i18n import TranslationSource, Translations
from perch.identity import IdentityResolver
from perch.naming import format_handler_name
from perch.notifications import render_notifications
from perch.titles import TitleResolver


class PageHelpers:
    """The page helpers, bound to one configuration and translation source."""

    __slots__ = ("_config", "_identity", "_titles", "translations")

    def __init__(
        self,
        config: PerchConfig | None = None,
        translations: TranslationSource | None = None,
    ) -> None:
        self._config = config if config is not None else get_config()
        self.translations = translations if translations is not None else Translations()
        self._identity = IdentityResolver(self._config)
        self._titles = TitleResolver(self._identity, self.translations)

    @property
    def config(self) -> PerchConfig:
        return self._config

    # -- Identifiers --

    def page_controller_identifier(self) -> str:
        return self._identity.controller_id(get_page().context)

    def page_action_identifier(self) -> str:
        return self._identity.action_id(get_page().context)

    def page_identifier(self) -> str:
        return self._identity.page_id(get_page().context)

    # -- Title --

    def page_title(self, default: str | None = None, **interpolations: Any) -> str:
        """Return the page title. The first call of a render fixes it."""
        page = get_page()
        return self._titles.resolve(page.context, page.title_cache, default, **interpolations)

    # -- Client hooks --

    def set_client_init_method(self, name: str | None) -> str:
        """Name an extra controller-level hook for the layout's init script.

        Returns an empty string so templates can call it inline.
        """
        get_page().client_init_method = name or None
        return ""

    def client_init_script(self, namespace: str | None = None, override: str | None = None) -> str:
        """Return the init statements for the current page.

        *override* defaults to the name set with ``set_client_init_method``.
        """
        return hooks.build_hooks(*self._hook_args(namespace, override))

    def client_init_tag(self, namespace: str | None = None, override: str | None = None) -> Markup:
        """Like ``client_init_script`` but wrapped in a ``<script>`` element."""
        return hooks.client_init_tag(*self._hook_args(namespace, override))

    def _hook_args(self, namespace: str | None, override: str | None) -> tuple[str, str, str, str | None]:
        page = get_page()
        # Hook paths are JavaScript property names, never hyphenated
        controller_id = format_handler_name(
            page.context.handler_type_name(),
            SelectorFormat.UNDERSCORED,
            suffix=self._config.handler_suffix,
        )
        return (
            namespace or self._config.client_namespace,
            controller_id,
            page.context.raw_action_name(),
            override or page.client_init_method,
        )

    # -- Flash --

    def render_notifications(
        self,
        button_content: str | None = None,
        button_class: str | None = None,
    ) -> Markup:
        """Render and consume the page's pending flash messages."""
        if button_content is None:
            button_content = self._config.close_button_content
        if button_class is None:
            button_class = self._config.close_button_class
        return render_notifications(
            get_page().flash.consume(),
            button_content=button_content,
            button_class=button_class,
            ignored=self._config.ignored_flash_keys,
        )

    def flash_messages(
        self,
        button_html: str | None = None,
        button_class: str | None = None,
    ) -> Markup:
        return self.render_notifications(button_content=button_html, button_class=button_class)

    # -- Template globals --

    def template_globals(self) -> dict[str, Callable[..., Any]]:
        """Return the helpers keyed by their template global names."""
        return {
            # Conventional names
            "page_controller_class": self.page_controller_identifier,
            "page_action_class": self.page_action_identifier,
            "page_class": self.page_identifier,
            "page_title": self.page_title,
            "javascript_initialization": self.client_init_tag,
            "js_init_method": self.set_client_init_method,
            "flash_messages": self.flash_messages,
            # Descriptive names
            "page_controller_identifier": self.page_controller_identifier,
            "page_action_identifier": self.page_action_identifier,
            "page_identifier": self.page_identifier,
            "client_init_script": self.client_init_script,
            "render_notifications": self.render_notifications,
        }
