from __future__ import annotations

"""Romanization tables for the three jamo positions (domain layer).

This module is pure data. It provides:
  - The romanized string for every lead / vowel / tail code, in Unicode order
  - The inverse (string -> code) maps used when rules rewrite a syllable
  - `LookupContext`, the read-only bundle shared by sentences and the rule engine
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping


class JamoPosition(Enum):
    """The three jamo slots of a syllable block."""
    Lead = 0
    Vowel = 1
    Tail = 2


# -----------------------------------------------------------------------------
# Forward tables (code -> romanized string)
# -----------------------------------------------------------------------------

# Leading consonants (Choseong); index 11 is the silent ㅇ
LEAD_ROMAN: Final[tuple[str, ...]] = (
    "g", "kk", "n", "d", "tt", "r", "m", "b", "pp", "s",
    "ss", "", "j", "tch", "ch", "k", "t", "p", "h",
)

# Vowels (Jungseong)
VOWEL_ROMAN: Final[tuple[str, ...]] = (
    "a", "ae", "ya", "yae", "eo", "e", "yeo", "ye", "o", "wa",
    "wae", "oe", "yo", "u", "weo", "we", "wi", "yu", "eu", "eui",
    "i",
)

# Trailing consonants (Jongseong); index 0 is "no final"
TAIL_ROMAN: Final[tuple[str, ...]] = (
    "", "g", "gg", "gs", "n", "nj", "nh", "d", "r", "rg",
    "rm", "rb", "rs", "rt", "rp", "rh", "m", "b", "bs", "s",
    "ss", "ng", "j", "ch", "k", "t", "p", "h",
)

LEAD_COUNT: Final[int] = len(LEAD_ROMAN)
VOWEL_COUNT: Final[int] = len(VOWEL_ROMAN)
TAIL_COUNT: Final[int] = len(TAIL_ROMAN)


def _reverse(table: tuple[str, ...]) -> Mapping[str, int]:
    reverse = {roman: code for code, roman in enumerate(table)}
    if len(reverse) != len(table):
        raise ValueError("Romanization table is not a bijection: %r" % (table,))
    return MappingProxyType(reverse)


@dataclass(frozen=True)
class LookupContext:
    """Forward and inverse romanization tables for every jamo position."""

    forward: Mapping[JamoPosition, tuple[str, ...]]
    inverse: Mapping[JamoPosition, Mapping[str, int]]

    @classmethod
    def build(cls) -> "LookupContext":
        forward = {
            JamoPosition.Lead: LEAD_ROMAN,
            JamoPosition.Vowel: VOWEL_ROMAN,
            JamoPosition.Tail: TAIL_ROMAN,
        }
        inverse = {position: _reverse(table) for position, table in forward.items()}
        return cls(forward=MappingProxyType(forward), inverse=MappingProxyType(inverse))

    def roman(self, position: JamoPosition, code: int) -> str:
        return self.forward[position][code]

    def code(self, position: JamoPosition, roman: str) -> int | None:
        """Return the code for a romanized string, or None if it has none."""
        return self.inverse[position].get(roman)

    def size(self, position: JamoPosition) -> int:
        return len(self.forward[position])


# Built once at import time and shared read-only
DEFAULT_CONTEXT: Final[LookupContext] = LookupContext.build()

# Lead code of the silent ㅇ (the empty lead romanization)
EMPTY_LEAD: Final[int] = LEAD_ROMAN.index("")
