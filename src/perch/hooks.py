"""Client-side init hooks.

Pages call into a client namespace object by convention::

    App.init();
    App.admin_anime.init();
    App.admin_anime.edit.init();

so page scripts can register ``App.admin_anime.edit = {init() {...}}``
and have it run only on that page. An optional override adds one more
controller-level hook, named by the content template.
"""

from kida.utils.html import Markup

from perch.actions import client_hook_action

STATEMENT_SEPARATOR = "\n"


def build_hook_statements(
    namespace: str,
    controller_id: str,
    action: str,
    override: str | None = None,
) -> list[str]:
    """Return the init call statements for a page, outermost first.

    *action* is the raw action name; ``create`` and ``update`` call the
    ``new`` and ``edit`` hooks. An empty or missing *override* adds
    nothing.
    """
    controller_path = f"{namespace}.{controller_id}"
    statements = [
        f"{namespace}.init();",
        f"{controller_path}.init();",
        f"{controller_path}.{client_hook_action(action)}.init();",
    ]
    if override:
        statements.append(f"{controller_path}.{override}.init();")
    return statements


def build_hooks(
    namespace: str,
    controller_id: str,
    action: str,
    override: str | None = None,
) -> str:
    """Return the init statements as a single script body."""
    return STATEMENT_SEPARATOR.join(
        build_hook_statements(namespace, controller_id, action, override)
    )


def client_init_tag(
    namespace: str,
    controller_id: str,
    action: str,
    override: str | None = None,
) -> Markup:
    """Return the init statements wrapped in a ``<script>`` element."""
    body = build_hooks(namespace, controller_id, action, override)
    return Markup(f"<script>\n{body}\n</script>")
