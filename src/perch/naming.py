"""Handler name formatting.

Turns a namespaced handler type name into a flat, lower-case identifier
suitable for a CSS class::

    format_handler_name("Super::Awesome::AnimeController")
    → "super_awesome_anime"

    format_handler_name("Super::Awesome::AnimeController", SelectorFormat.HYPHENATED)
    → "super-awesome-anime"

Underscore-joined words are the canonical intermediate form; the
hyphenated format is a final character swap over the joined result.
"""

import re

from perch.config import SelectorFormat

# Ruby-style "::", Python qualified names "." and path-style "/"
_NAMESPACE_SEPARATOR = re.compile(r"::|[./]")

# "HTMLParser" → "HTML_Parser"
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
# "animeList" → "anime_List"
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def underscore(word: str) -> str:
    """Convert a PascalCase or camelCase word to lower snake case.

    Acronym runs stay together: ``"HTMLParser"`` → ``"html_parser"``.
    """
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def split_namespace(name: str) -> list[str]:
    """Split a namespaced name into its non-empty segments."""
    return [segment for segment in _NAMESPACE_SEPARATOR.split(name) if segment]


def apply_selector_format(identifier: str, style: SelectorFormat) -> str:
    """Render an underscored identifier in *style*."""
    if style is SelectorFormat.HYPHENATED:
        return identifier.replace("_", "-")
    return identifier


def format_handler_name(
    name: str,
    style: SelectorFormat = SelectorFormat.UNDERSCORED,
    *,
    suffix: str = "Controller",
) -> str:
    """Format a handler type name as a canonical identifier.

    Strips *suffix*, splits on namespace separators, underscores each
    segment and joins them with ``_``. The result contains no upper-case
    characters and no namespace separators.
    """
    if suffix:
        name = name.removesuffix(suffix)
    joined = "_".join(underscore(segment) for segment in split_namespace(name))
    return apply_selector_format(joined, SelectorFormat(style))
