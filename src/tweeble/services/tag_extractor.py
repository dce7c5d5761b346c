"""Parse ``<Name>`` peep mentions out of post text."""
from __future__ import annotations

from tweeble.models.tag import TAG_MAX_LENGTH, TAG_MIN_LENGTH

TAG_DELIMITER = "<"

__all__ = ["TAG_DELIMITER", "extract_tag_names"]


def extract_tag_names(text: str) -> list[str]:
    """Return candidate tag names in first-occurrence order.

    Every ``<`` starts a mention; the name is the maximal run of letters and
    decimal digits right after it. Other numerals such as ``²`` end the run.
    No closing ``>`` is required. Runs shorter than ``TAG_MIN_LENGTH`` or longer
    than ``TAG_MAX_LENGTH`` are dropped, never truncated. Duplicates are kept.

    Args:
        text: Raw post content.

    Returns:
        Candidate names, at most one per ``<`` in ``text``.
    """
    names: list[str] = []
    length = len(text)
    i = 0
    while i < length:
        if text[i] != TAG_DELIMITER:
            i += 1
            continue

        start = i + 1
        end = start
        while end < length and (text[end].isalpha() or text[end].isdecimal()):
            end += 1

        if TAG_MIN_LENGTH <= end - start <= TAG_MAX_LENGTH:
            names.append(text[start:end])
        # end is past the "<" even when no name follows it.
        i = end
    return names
