"""perch: view helpers for server-rendered pages.

Derives page identifiers from the current handler and action, resolves
the page title from translations, emits client init hooks and renders
flash banners.

Basic usage::

    from perch import HandlerContext, PageHelpers, page_scope
    from perch.templating.integration import create_environment

    helpers = PageHelpers()
    env = create_environment(helpers)

    with page_scope(HandlerContext("Admin::AnimeController", "show"), flash={"notice": "Hi"}):
        html = env.from_string('<body class="{{ page_class() }}">{{ flash_messages() }}').render()
"""

__version__ = "0.1.0-dev"
__all__ = [
    "MISSING",
    "ConfigurationError",
    "FlashMessages",
    "HandlerContext",
    "NoActivePage",
    "PageHelpers",
    "PageState",
    "PerchConfig",
    "PerchError",
    "RequestContext",
    "SelectorFormat",
    "TranslationSource",
    "Translations",
    "configure",
    "get_config",
    "get_page",
    "page_scope",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` free of the kida import until a helper is used.
    """
    if name == "PageHelpers":
        from perch.helpers import PageHelpers

        return PageHelpers

    if name in ("PerchConfig", "SelectorFormat", "configure", "get_config"):
        from perch import config as _config

        return getattr(_config, name)

    if name in ("HandlerContext", "PageState", "RequestContext", "get_page", "page_scope"):
        from perch import context as _ctx

        return getattr(_ctx, name)

    if name == "FlashMessages":
        from perch.flash import FlashMessages

        return FlashMessages

    if name in ("MISSING", "TranslationSource", "Translations"):
        from perch import i18n as _i18n

        return getattr(_i18n, name)

    if name in ("ConfigurationError", "NoActivePage", "PerchError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
