"""Shape raw YAML payloads into typed catalog records."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..errors import CatalogError
from .helpers import optional_str
from .models import Company, Entry, FlatTopic, NestedTopic, SubTopic, Topic

FLAT_TOPIC_KEYS = frozenset({"title", "entries"})


def parse_topics(raw: cabc.Mapping[str, typ.Any] | None) -> list[Topic]:
    """Parse the module catalog into flat or nested topics.

    A topic record whose keys are exactly ``title`` and ``entries`` becomes a
    :class:`FlatTopic`. Any other record is a :class:`NestedTopic` and every
    key besides ``title`` names one of its sub-topics, kept in YAML order.

    Parameters
    ----------
    raw : Mapping or None
        Parsed ``modules.yml`` document; ``None`` (an empty file) yields no
        topics.

    Returns
    -------
    list[Topic]
        Topics in document order.

    Raises
    ------
    CatalogError
        If the document, a topic, or a sub-topic is not a mapping, or when a
        ``title`` is missing or not a string.
    """
    if raw is None:
        return []
    if not isinstance(raw, cabc.Mapping):
        msg = "Module catalog must be a mapping of topics."
        raise CatalogError(msg)

    topics: list[Topic] = []
    for key, record in raw.items():
        match record:
            case cabc.Mapping() if set(record) == FLAT_TOPIC_KEYS:
                topics.append(
                    FlatTopic(
                        title=_require_title(record, key),
                        entries=_parse_entries(record["entries"], key),
                    )
                )
            case cabc.Mapping():
                topics.append(
                    NestedTopic(
                        title=_require_title(record, key),
                        subtopics=_parse_subtopics(record, key),
                    )
                )
            case _:
                msg = f"Topic '{key}' must be a mapping."
                raise CatalogError(msg)
    return topics


def parse_companies(raw: cabc.Mapping[str, typ.Any] | None) -> list[Company]:
    """Flatten grouped company lists into a single ordered list.

    Group names are discarded. Empty groups contribute nothing and missing
    ``name``/``link`` fields become ``None``.

    Raises
    ------
    CatalogError
        If the document is not a mapping, a group is not a list, or a group
        member is not a mapping.
    """
    if raw is None:
        return []
    if not isinstance(raw, cabc.Mapping):
        msg = "Companies list must be a mapping of groups."
        raise CatalogError(msg)

    companies: list[Company] = []
    for group, members in raw.items():
        match members:
            case None:
                continue
            case list():
                pass
            case _:
                msg = f"Company group '{group}' must be a list."
                raise CatalogError(msg)
        for member in members:
            if not isinstance(member, cabc.Mapping):
                msg = f"Company group '{group}' contains a non-mapping item."
                raise CatalogError(msg)
            companies.append(
                Company(
                    name=optional_str(member.get("name")),
                    link=optional_str(member.get("link")),
                )
            )
    return companies


def _parse_subtopics(
    record: cabc.Mapping[str, typ.Any], topic: str
) -> list[SubTopic]:
    subtopics: list[SubTopic] = []
    for key, payload in record.items():
        if key == "title":
            continue
        if not isinstance(payload, cabc.Mapping):
            msg = f"Sub-topic '{key}' of topic '{topic}' must be a mapping."
            raise CatalogError(msg)
        location = f"{topic}.{key}"
        subtopics.append(
            SubTopic(
                title=_require_title(payload, location),
                entries=_parse_entries(payload.get("entries"), location),
            )
        )
    return subtopics


def _parse_entries(payload: object, location: str) -> list[Entry]:
    match payload:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = f"Entries of '{location}' must be a list."
            raise CatalogError(msg)

    entries: list[Entry] = []
    for item in items:
        if not isinstance(item, cabc.Mapping):
            msg = f"Entries of '{location}' must be mappings."
            raise CatalogError(msg)
        entries.append(
            Entry(
                name=optional_str(item.get("name")),
                link=optional_str(item.get("link")),
                official=item.get("official") is True,
                desc=optional_str(item.get("desc")),
            )
        )
    return entries


def _require_title(record: cabc.Mapping[str, typ.Any], location: str) -> str:
    title = record.get("title")
    if title is None:
        msg = f"'{location}' is missing a 'title'."
        raise CatalogError(msg)
    if not isinstance(title, str):
        msg = f"'{location}' has a non-string 'title': {title!r}."
        raise CatalogError(msg)
    return title


__all__ = ["FLAT_TOPIC_KEYS", "parse_companies", "parse_topics"]
