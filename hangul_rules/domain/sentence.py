from __future__ import annotations

"""KoreanSentence: a sequence of letters rendered as roman / jamo / hangul views."""

import logging
from typing import Iterable

from hangul_rules.domain.jamo_tables import DEFAULT_CONTEXT, LookupContext
from hangul_rules.domain.letter import HangulLetter, Letter, make_letter
from hangul_rules.domain.rules import RULES, Rule, apply_pair

logger = logging.getLogger(__name__)


class KoreanSentence:
    """An immutable sequence of letters plus the shared lookup context."""

    def __init__(self, text: str = "", *, context: LookupContext = DEFAULT_CONTEXT) -> None:
        self._letters: tuple[Letter, ...] = tuple(make_letter(ch) for ch in text)
        self._context = context

    @classmethod
    def from_letters(cls, letters: Iterable[Letter], *, context: LookupContext = DEFAULT_CONTEXT) -> "KoreanSentence":
        sentence = cls(context=context)
        sentence._letters = tuple(letters)
        return sentence

    @property
    def letters(self) -> tuple[Letter, ...]:
        return self._letters

    @property
    def context(self) -> LookupContext:
        return self._context

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KoreanSentence):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __repr__(self) -> str:
        return "KoreanSentence({!r})".format(self.hangul_string())

    # --- Views ---
    def roman(self) -> str:
        return "".join(letter.roman(self._context) for letter in self._letters)

    def jamo(self) -> str:
        return "".join(letter.jamo() for letter in self._letters)

    def hangul_string(self) -> str:
        return "".join(letter.hangul_string() for letter in self._letters)

    # --- Rules ---
    def apply_rules(self, rules: tuple[Rule, ...] = RULES) -> "KoreanSentence":
        """Return a new sentence with the sound-change rules applied.

        One left-to-right sweep: each adjacent pair of Hangul letters runs the rule
        chain once, seeing the left letter as rewritten by the previous pair. This
        sentence is left unchanged.

        Raises:
            RuleLookupError: if a rule produces a romanization with no jamo code.
        """
        logger.debug("applying %d rules to %d letters", len(rules), len(self._letters))
        if not self._letters:
            return KoreanSentence.from_letters((), context=self._context)

        out: list[Letter] = []
        current = self._letters[0]
        for index, nxt in enumerate(self._letters[1:]):
            if isinstance(current, HangulLetter) and isinstance(nxt, HangulLetter):
                left, right = apply_pair(current.syllable, nxt.syllable,
                                         index=index, rules=rules, context=self._context)
                current, nxt = HangulLetter(left), HangulLetter(right)
            out.append(current)
            current = nxt
        out.append(current)

        result = KoreanSentence.from_letters(out, context=self._context)
        logger.debug("rules applied: %r -> %r", self.hangul_string(), result.hangul_string())
        return result


# -----------------------------------------------------------------------------
# Module-level API
# -----------------------------------------------------------------------------

def roman(text: str) -> str:
    return KoreanSentence(text).roman()


def jamo(text: str) -> str:
    return KoreanSentence(text).jamo()


def hangul_string(text: str) -> str:
    return KoreanSentence(text).hangul_string()


def apply_rules(text: str) -> KoreanSentence:
    return KoreanSentence(text).apply_rules()
