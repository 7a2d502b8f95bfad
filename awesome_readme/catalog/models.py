"""Typed dataclasses describing the parsed module catalog and companies list."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Entry:
    """A single catalog item, usually a Moleculer module."""

    name: str | None
    link: str | None
    official: bool = False
    desc: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SubTopic:
    """Second navigation level grouping entries under a topic."""

    title: str
    entries: list[Entry] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class FlatTopic:
    """Topic that lists its entries directly."""

    title: str
    entries: list[Entry] = dc.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class NestedTopic:
    """Topic that delegates its entries to sub-topics."""

    title: str
    subtopics: list[SubTopic] = dc.field(default_factory=list)


Topic: typ.TypeAlias = FlatTopic | NestedTopic


@dc.dataclass(frozen=True, slots=True)
class Company:
    """Organisation listed in the "who is using" section."""

    name: str | None
    link: str | None


__all__ = ["Company", "Entry", "FlatTopic", "NestedTopic", "SubTopic", "Topic"]
