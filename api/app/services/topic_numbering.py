"""
Topic numbering - slip-box style hierarchical codes.

Root topics are numbered 1, 2, 3, ...; below them the appended symbol
alternates between a lowercase letter (odd levels) and a decimal number
(even levels): 1 → 1a → 1a1 → 1a1a.
"""
import re
from typing import Iterable, Optional

_LEADING_DIGITS_RE = re.compile(r"\s*(\d+)")


def parse_leading_int(value: str) -> Optional[int]:
    """Parse the decimal prefix of value, or None when it has none."""
    match = _LEADING_DIGITS_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


def _suffixes(parent_number: str, sibling_numbers: Iterable[str]) -> list[str]:
    return [
        number[len(parent_number):]
        for number in sibling_numbers
        if number.startswith(parent_number)
    ]


def next_topic_number(
    parent_number: Optional[str],
    level: int,
    sibling_numbers: Iterable[str]
) -> str:
    """
    Compute the code for a new topic.

    Args:
        parent_number: Code of the parent topic, None for a root topic
        level: Depth of the new topic (root = 0)
        sibling_numbers: Codes of the topics that share the new topic's parent

    Returns:
        The new, unused code

    Raises:
        ValueError: If a child topic has no parent code, or the letter
            sequence under the parent is exhausted
    """
    if level == 0:
        max_num = 0
        for number in sibling_numbers:
            parsed = parse_leading_int(number)
            if parsed is not None:
                max_num = max(max_num, parsed)
        return str(max_num + 1)

    if not parent_number:
        raise ValueError("Cannot number a child topic whose parent has no number")

    suffixes = _suffixes(parent_number, sibling_numbers)

    if level % 2 == 1:
        max_code = ord("a") - 1
        for suffix in suffixes:
            first = suffix[:1].lower()
            if first.isalpha() and first.isascii():
                max_code = max(max_code, ord(first))
        if max_code >= ord("z"):
            raise ValueError(f"No letters left for children of topic {parent_number}")
        return parent_number + chr(max_code + 1)

    max_num = 0
    for suffix in suffixes:
        parsed = parse_leading_int(suffix)
        if parsed is not None:
            max_num = max(max_num, parsed)
    return parent_number + str(max_num + 1)
