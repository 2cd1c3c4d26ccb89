from __future__ import annotations

"""Hangul syllable decomposition and rendering (domain layer).

This module contains *no* I/O.

It centralises:
- The Unicode arithmetic between a precomposed syllable and its (lead, vowel, tail) codes
- Rendering of a single component as a conjoining jamo or a romanized string

Primary API:
- Syllable.decode(ch)
- Syllable.to_char()
"""

from dataclasses import dataclass
from typing import Final

from hangul_rules.domain.jamo_tables import (
    DEFAULT_CONTEXT,
    LEAD_COUNT,
    TAIL_COUNT,
    VOWEL_COUNT,
    JamoPosition,
    LookupContext,
)


# -----------------------------------------------------------------------------
# Unicode constants
# -----------------------------------------------------------------------------

SYLLABLE_BASE: Final[int] = 0xAC00
LEAD_BASE: Final[int] = 0x1100
VOWEL_BASE: Final[int] = 0x1161
# Tail code 0 has no jamo, so the first real tail (code 1) sits at 0x11A8
TAIL_BASE: Final[int] = 0x11A7

# Syllables per lead consonant (VOWEL_COUNT * TAIL_COUNT)
_SYLLABLES_PER_LEAD: Final[int] = VOWEL_COUNT * TAIL_COUNT

_JAMO_BASE: Final[dict[JamoPosition, int]] = {
    JamoPosition.Lead: LEAD_BASE,
    JamoPosition.Vowel: VOWEL_BASE,
    JamoPosition.Tail: TAIL_BASE,
}

_COUNTS: Final[dict[JamoPosition, int]] = {
    JamoPosition.Lead: LEAD_COUNT,
    JamoPosition.Vowel: VOWEL_COUNT,
    JamoPosition.Tail: TAIL_COUNT,
}


# -----------------------------------------------------------------------------
# Components
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Jamo:
    """One positional component: a jamo slot tag plus its bounds-checked code."""

    position: JamoPosition
    code: int

    def __post_init__(self) -> None:
        count = _COUNTS[self.position]
        if not 0 <= self.code < count:
            raise ValueError("%s code out of range: %r (expected 0..%d)"
                             % (self.position.name, self.code, count - 1))

    def roman(self, context: LookupContext = DEFAULT_CONTEXT) -> str:
        return context.roman(self.position, self.code)

    def jamo_string(self) -> str:
        """Return the conjoining jamo for this component ("" for an empty tail)."""
        if self.position is JamoPosition.Tail and self.code == 0:
            return ""
        return chr(_JAMO_BASE[self.position] + self.code)


@dataclass(frozen=True)
class Syllable:
    """A decoded Hangul syllable block: (lead, vowel, tail)."""

    lead: Jamo
    vowel: Jamo
    tail: Jamo

    @classmethod
    def from_codes(cls, lead: int, vowel: int, tail: int = 0) -> "Syllable":
        return cls(
            lead=Jamo(JamoPosition.Lead, lead),
            vowel=Jamo(JamoPosition.Vowel, vowel),
            tail=Jamo(JamoPosition.Tail, tail),
        )

    @classmethod
    def decode(cls, ch: str) -> "Syllable":
        """Split a precomposed syllable into its three component codes.

        The caller guarantees that `ch` is a precomposed Hangul syllable.
        """
        offset = ord(ch) - SYLLABLE_BASE
        return cls.from_codes(
            offset // _SYLLABLES_PER_LEAD,
            offset % _SYLLABLES_PER_LEAD // TAIL_COUNT,
            offset % TAIL_COUNT,
        )

    @property
    def codes(self) -> tuple[int, int, int]:
        return self.lead.code, self.vowel.code, self.tail.code

    def with_lead(self, code: int) -> "Syllable":
        return Syllable(Jamo(JamoPosition.Lead, code), self.vowel, self.tail)

    def with_tail(self, code: int) -> "Syllable":
        return Syllable(self.lead, self.vowel, Jamo(JamoPosition.Tail, code))

    def to_char(self) -> str:
        """Recombine the components into a precomposed syllable.

        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
        """
        lead, vowel, tail = self.codes
        return chr(SYLLABLE_BASE + (lead * VOWEL_COUNT + vowel) * TAIL_COUNT + tail)

    def roman_string(self, context: LookupContext = DEFAULT_CONTEXT) -> str:
        return "{}{}{}".format(self.lead.roman(context), self.vowel.roman(context), self.tail.roman(context))

    def jamo_string(self) -> str:
        return "[{}][{}][{}]".format(self.lead.jamo_string(), self.vowel.jamo_string(), self.tail.jamo_string())

    def hangul_string(self) -> str:
        return self.to_char()
