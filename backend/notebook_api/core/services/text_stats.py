from __future__ import annotations

import re
from collections import Counter

# Any run of characters that are not letters, digits or underscore
_WORD_DELIMITER = re.compile(r"\W+")


def split_words(text: str) -> list[str]:
    """Split text into lowercase words, dropping empty fragments."""
    return [fragment.lower() for fragment in _WORD_DELIMITER.split(text) if fragment]


def compute_word_stats(text: str | None) -> dict[str, int]:
    """Count word occurrences in a note body.

    Words are ordered by their first appearance in ``text``, not by frequency
    or alphabetically. Blank input yields an empty mapping.
    """
    if text is None or not text.strip():
        return {}
    # Counter preserves first-insertion order of keys
    return dict(Counter(split_words(text)))
