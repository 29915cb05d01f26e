"""Tag query semantics.

A non-empty tag query matches notes carrying every queried tag
(intersection). Union matching is available only when a caller asks for it
explicitly; :func:`select_mode` never picks it.
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from notebook_api.core.models.note import Tag


class TagMatchMode(str, Enum):
    ALL_NOTES = "all_notes"
    INTERSECTION = "intersection"
    UNION = "union"


def select_mode(query_tags: Iterable[Tag]) -> TagMatchMode:
    """Pick the matching policy for a tag query."""
    if not set(query_tags):
        return TagMatchMode.ALL_NOTES
    return TagMatchMode.INTERSECTION


def matches(
    note_tags: Iterable[Tag],
    query_tags: Iterable[Tag],
    mode: TagMatchMode = TagMatchMode.INTERSECTION,
) -> bool:
    """Return True if a note with ``note_tags`` satisfies the query."""
    query = set(query_tags)
    if mode is TagMatchMode.ALL_NOTES or not query:
        return True
    owned = set(note_tags)
    if mode is TagMatchMode.UNION:
        return not owned.isdisjoint(query)
    return query.issubset(owned)
