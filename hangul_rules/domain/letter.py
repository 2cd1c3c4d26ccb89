from __future__ import annotations

"""Letters: one input character, either a decoded Hangul syllable or a passthrough.

Classification uses the half-open range [0xAC00, 0xD74A). This is narrower than the
Unicode Hangul Syllables block (which ends at 0xD7A3); syllables from 0xD74A upward
are kept as passthrough characters.
"""

from dataclasses import dataclass
from typing import Final, Union

from hangul_rules.domain.jamo_tables import DEFAULT_CONTEXT, LookupContext
from hangul_rules.domain.syllable_codec import SYLLABLE_BASE, Syllable


HANGUL_LIMIT: Final[int] = 0xD74A


def is_hangul_char(ch: str) -> bool:
    return SYLLABLE_BASE <= ord(ch) < HANGUL_LIMIT


@dataclass(frozen=True)
class HangulLetter:
    syllable: Syllable

    is_hangul = True

    def roman(self, context: LookupContext = DEFAULT_CONTEXT) -> str:
        return self.syllable.roman_string(context)

    def jamo(self) -> str:
        return self.syllable.jamo_string()

    def hangul_string(self) -> str:
        return self.syllable.hangul_string()


@dataclass(frozen=True)
class OtherLetter:
    """Punctuation, whitespace and anything else outside the Hangul range."""

    char: str

    is_hangul = False

    def roman(self, context: LookupContext = DEFAULT_CONTEXT) -> str:
        return self.char

    def jamo(self) -> str:
        return self.char

    def hangul_string(self) -> str:
        return self.char


Letter = Union[HangulLetter, OtherLetter]


def make_letter(ch: str) -> Letter:
    """Classify a single character."""
    if is_hangul_char(ch):
        return HangulLetter(Syllable.decode(ch))
    return OtherLetter(ch)
