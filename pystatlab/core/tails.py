"""
Tail types shared by intervals, hypothesis tests and power analysis.

A tail type decides which bound of an interval is finite and whether a
critical value is taken at alpha or alpha/2.
"""

from __future__ import annotations

from enum import Enum

from pystatlab.core.exceptions import ValidationError


class TailType(str, Enum):
    """Which side(s) of the distribution are treated as the rejection region."""

    TWO = "two-tailed"
    LEFT = "left-tailed"
    RIGHT = "right-tailed"

    @property
    def is_two_sided(self) -> bool:
        return self is TailType.TWO

    @classmethod
    def _missing_(cls, value: object) -> TailType | None:
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key == member.value or key == member.value.split("-")[0]:
                    return member
        return None


def resolve_tail(tail: TailType | str) -> TailType:
    """
    Coerce a tail specification to TailType.

    Accepts TailType members, their values ('two-tailed', ...) and the
    short aliases 'two', 'left' and 'right'.

    Raises:
        ValidationError: If the value names no known tail type
    """
    try:
        return TailType(tail)
    except ValueError:
        valid = tuple(t.value for t in TailType)
        raise ValidationError(
            f"tail must be one of {valid}, got {tail!r}"
        ) from None
