"""kida environment setup and page helper binding.

Registers the page helpers as kida globals. Helper output that is
markup (flash banners, the init ``<script>``) is ``Markup``, so an
autoescaping environment does not escape it again.
"""

from kida import Environment

from perch.helpers import PageHelpers


def register_page_helpers(env: Environment, helpers: PageHelpers) -> Environment:
    """Add every page helper to *env* as a global. Returns *env*."""
    for name, value in helpers.template_globals().items():
        env.add_global(name, value)
    return env


def create_environment(helpers: PageHelpers, *, loader: object | None = None, **options: object) -> Environment:
    """Create an autoescaping kida Environment with the page helpers registered.

    Extra keyword arguments are passed to ``Environment``.
    """
    options.setdefault("autoescape", True)
    if loader is not None:
        options["loader"] = loader
    env = Environment(**options)
    return register_page_helpers(env, helpers)
