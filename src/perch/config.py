"""Page helper configuration.

PerchConfig is a frozen dataclass, immutable after creation. A single
process-wide instance lives here for the composition root; everything
below it receives its config explicitly.
"""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

from perch.errors import ConfigurationError
from perch.flash import normalize_category


class SelectorFormat(StrEnum):
    """Word separator used for generated CSS selectors."""

    UNDERSCORED = "underscored"
    HYPHENATED = "hyphenated"


@dataclass(frozen=True, slots=True)
class PerchConfig:
    """Page helper configuration. Immutable after creation.

    Override what you need::

        config = PerchConfig(selector_format="hyphenated", client_namespace="Shop")
    """

    # Identifiers
    selector_format: SelectorFormat = SelectorFormat.UNDERSCORED
    handler_suffix: str = "Controller"

    # Client hooks
    client_namespace: str = "App"

    # Flash banners
    ignored_flash_keys: frozenset[str] = frozenset({"timedout"})
    close_button_content: str = "x"
    close_button_class: str = "close"

    def __post_init__(self) -> None:
        try:
            fmt = SelectorFormat(self.selector_format)
        except ValueError:
            allowed = ", ".join(f.value for f in SelectorFormat)
            msg = f"Unknown selector_format {self.selector_format!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg) from None
        object.__setattr__(self, "selector_format", fmt)

        ignored = frozenset(normalize_category(key) for key in self.ignored_flash_keys)
        object.__setattr__(self, "ignored_flash_keys", ignored | {"timedout"})


# -- Process-wide instance --

_config = PerchConfig()


def get_config() -> PerchConfig:
    """Return the process-wide configuration."""
    return _config


def configure(**overrides: Any) -> PerchConfig:
    """Replace the process-wide configuration with *overrides* applied.

    Returns the previous configuration so it can be restored::

        previous = configure(selector_format="hyphenated")
        ...
        set_config(previous)

    Meant to be called once during application setup. There is no
    locking: concurrent callers get last-writer-wins.
    """
    global _config
    previous = _config
    _config = replace(_config, **overrides)
    return previous


def set_config(config: PerchConfig) -> None:
    """Install *config* as the process-wide configuration."""
    global _config
    _config = config


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(PerchConfig())
