"""Build the template view objects from parsed catalog data.

The README template expects two collections: ``index``, a two-level list of
topics carrying modules or sub-topics, and ``companies``, a flat list of
organisations. The dataclasses here model exactly that shape; optional
fields are ``None`` when the template should skip the matching block.

Examples
--------
>>> from awesome_readme.views import build_modules_view
>>> view = build_modules_view(
...     {"core": {"title": "Core Modules", "entries": [{"name": "A", "link": "a"}]}}
... )
>>> view[0].link, view[0].subtopics, view[0].modules[0].name
('core-modules', None, 'A')
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from ._constants import OFFICIAL_BADGE
from .catalog import (
    Entry,
    FlatTopic,
    NestedTopic,
    Topic,
    parse_companies,
    parse_topics,
    sanitize_description,
    topic_link,
)


@dc.dataclass(frozen=True, slots=True)
class EntryView:
    """Template-ready catalog entry.

    Attributes
    ----------
    name : str or None
        Display name of the module.
    link : str or None
        Target URL of the module.
    official : str or None
        Badge markup for official modules, otherwise ``None``.
    desc : str or None
        Description prefixed with ``" - "``, or ``None`` when absent.
    """

    name: str | None
    link: str | None
    official: str | None = None
    desc: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SubTopicView:
    """Sub-topic heading with its modules."""

    name: str
    link: str
    modules: list[EntryView]


@dc.dataclass(frozen=True, slots=True)
class TopicView:
    """Top-level topic; carries ``modules`` or ``subtopics``, never both."""

    name: str
    link: str
    subtopics: list[SubTopicView] | None = None
    modules: list[EntryView] | None = None


@dc.dataclass(frozen=True, slots=True)
class CompanyView:
    """Company link rendered in the "who is using" section."""

    name: str | None
    link: str | None


@dc.dataclass(frozen=True, slots=True)
class RenderView:
    """The complete object handed to the README template."""

    index: list[TopicView]
    companies: list[CompanyView]


def build_companies_view(
    raw: cabc.Mapping[str, typ.Any] | None,
) -> list[CompanyView]:
    """Flatten grouped companies into one list, preserving YAML order."""
    return [
        CompanyView(name=company.name, link=company.link)
        for company in parse_companies(raw)
    ]


def build_modules_view(
    raw: cabc.Mapping[str, typ.Any] | None,
) -> list[TopicView]:
    """Build the navigational module index from the raw catalog.

    Parameters
    ----------
    raw : Mapping or None
        Parsed ``modules.yml`` document.

    Returns
    -------
    list[TopicView]
        One node per topic in catalog order. Flat topics set ``modules``;
        nested topics set ``subtopics``, which stays ``None`` when the topic
        declares no sub-topics.

    Raises
    ------
    CatalogError
        If the catalog cannot be shaped into topics.
    """
    return [build_topic_view(topic) for topic in parse_topics(raw)]


def build_topic_view(topic: Topic) -> TopicView:
    """Return the view node for a single parsed topic."""
    match topic:
        case FlatTopic(title=title, entries=entries):
            return TopicView(
                name=title,
                link=topic_link(title),
                modules=sanitize_entries(entries),
            )
        case NestedTopic(title=title, subtopics=subtopics):
            children = [
                SubTopicView(
                    name=subtopic.title,
                    link=topic_link(subtopic.title),
                    modules=sanitize_entries(subtopic.entries),
                )
                for subtopic in subtopics
            ]
            return TopicView(
                name=title,
                link=topic_link(title),
                subtopics=children or None,
            )
        case _:  # pragma: no cover - exhaustive over Topic
            msg = f"Unsupported topic type: {type(topic).__name__}"
            raise TypeError(msg)


def sanitize_entries(entries: cabc.Iterable[Entry]) -> list[EntryView]:
    """Convert catalog entries into template-ready records, one per entry."""
    return [
        EntryView(
            name=entry.name,
            link=entry.link,
            official=OFFICIAL_BADGE if entry.official is True else None,
            desc=sanitize_description(entry.desc),
        )
        for entry in entries
    ]


__all__ = [
    "CompanyView",
    "EntryView",
    "RenderView",
    "SubTopicView",
    "TopicView",
    "build_companies_view",
    "build_modules_view",
    "build_topic_view",
    "sanitize_entries",
]
