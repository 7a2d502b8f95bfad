"""String helpers shared by the catalog parser and the view builders."""

from __future__ import annotations

import re

WHITESPACE_RUN = re.compile(r"\s+")
ESCAPE_PREFIXES = ("/", "\\")


def topic_link(title: str) -> str:
    """Return the Markdown anchor for a heading titled ``title``.

    Examples
    --------
    >>> topic_link("My Great Topic")
    'my-great-topic'
    >>> topic_link("A  B")
    'a-b'
    """
    return WHITESPACE_RUN.sub("-", title).lower()


def sanitize_description(desc: str | None) -> str | None:
    """Prefix a description with a dash separator for list rendering.

    A single leading ``/`` or ``\\`` is dropped first; catalog authors use it to
    stop YAML from interpreting descriptions that start with special
    characters.

    Examples
    --------
    >>> sanitize_description("/hello")
    ' - hello'
    >>> sanitize_description(None) is None
    True
    """
    if desc is None:
        return None
    if desc.startswith(ESCAPE_PREFIXES):
        desc = desc[1:]
    return f" - {desc}"


def optional_str(value: object | None) -> str | None:
    """Return ``value`` as a string, keeping ``None`` as is."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


__all__ = ["optional_str", "sanitize_description", "topic_link"]
