"""Parse the module catalog and companies list into typed records.

The catalog maps topic keys to records that either list entries directly or
group them into sub-topics. :func:`parse_topics` decides which shape each
topic has once, returning :class:`FlatTopic` or :class:`NestedTopic` values
so later stages never inspect raw key sets.

Examples
--------
>>> from awesome_readme.catalog import parse_topics
>>> topics = parse_topics({"core": {"title": "Core", "entries": []}})
>>> type(topics[0]).__name__
'FlatTopic'
"""

from .helpers import sanitize_description, topic_link
from .loader import parse_companies, parse_topics
from .models import Company, Entry, FlatTopic, NestedTopic, SubTopic, Topic

__all__ = [
    "Company",
    "Entry",
    "FlatTopic",
    "NestedTopic",
    "SubTopic",
    "Topic",
    "parse_companies",
    "parse_topics",
    "sanitize_description",
    "topic_link",
]
