"""Inline numeric conditions on pluralization segments.

A segment such as ``{0}no items``, ``[2,*]many items`` or ``{*,5}a few`` is
prefixed by a condition in braces or brackets. The condition holds a single
number or a ``from,to`` range where either bound may be ``*``.
"""

import math
import re
from typing import List, Optional, Sequence, Union

Number = Union[int, float]

CONDITION_PATTERN = re.compile(r"^[\{\[]([^\[\]\{\}]*)[\}\]](.*)", re.DOTALL)
CONDITION_PREFIX = re.compile(r"^[\{\[][^\[\]\{\}]*[\}\]]")
_LEADING_NUMBER = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.ASCII,
)


def parse_number(text: str) -> float:
    """Parse the leading decimal literal (or ``Infinity``) of ``text``; NaN when there is none."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return math.nan
    return float(match.group(1))


def extract_from_string(segment: str, count: Number) -> Optional[str]:
    """Return the segment text when its inline condition holds for ``count``.

    ``None`` means the segment has no condition or the condition does not hold.
    The text after the condition is returned untouched.
    """
    match = CONDITION_PATTERN.match(segment)
    if match is None:
        return None

    condition, value = match.group(1), match.group(2)

    if "," in condition:
        bounds = condition.split(",")
        lower, upper = bounds[0], bounds[1]

        if upper == "*":
            return value if count >= parse_number(lower) else None
        if lower == "*":
            return value if count <= parse_number(upper) else None
        return value if parse_number(lower) <= count <= parse_number(upper) else None

    return value if parse_number(condition) == count else None


def extract(segments: Sequence[str], count: Number) -> Optional[str]:
    """First segment, in order, whose inline condition holds."""
    for segment in segments:
        line = extract_from_string(segment, count)
        if line is not None:
            return line
    return None


def strip_conditions(segments: Sequence[str]) -> List[str]:
    """Drop the inline condition prefix from each segment, keeping the text."""
    return [CONDITION_PREFIX.sub("", segment, count=1) for segment in segments]
