from __future__ import annotations

"""Sound-change rules between two adjacent syllables (domain layer).

Each rule matches the romanized tail of the left syllable and the romanized lead of
the right syllable. Patterns are either a literal romanization or "*" (anything).
A matching rule's strategy maps (old_tail, old_lead) to (new_tail, new_lead).

For one pair, every rule is tried once, in order, against the pair as rewritten by
the rules before it. The rule list is not restarted after a match.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Final

from hangul_rules.domain.errors import RuleLookupError
from hangul_rules.domain.jamo_tables import DEFAULT_CONTEXT, JamoPosition, LookupContext
from hangul_rules.domain.syllable_codec import Syllable

logger = logging.getLogger(__name__)

WILDCARD: Final[str] = "*"

Strategy = Callable[[str, str], tuple[str, str]]


@dataclass(frozen=True)
class Rule:
    name: str
    tail: str
    lead: str
    strategy: Strategy

    def matches(self, tail: str, lead: str) -> bool:
        return (self.tail == WILDCARD or self.tail == tail) and (self.lead == WILDCARD or self.lead == lead)


def _bs_before_any(_tail: str, lead: str) -> tuple[str, str]:
    if lead == "":
        return "p", "s"
    return "p", lead


# Priority order matters: rule 1 must see "h" before liaison moves it.
RULES: Final[tuple[Rule, ...]] = (
    Rule("h-deletion", "h", "", lambda _t, _l: ("", "")),
    # 연음화
    Rule("liaison", WILDCARD, "", lambda t, _l: ("", t)),
    Rule("nasalization", "b", "n", lambda _t, l: ("m", l)),
    Rule("n-h-shift", "n", "h", lambda t, _l: ("", t)),
    Rule("bs-simplification", "bs", WILDCARD, _bs_before_any),
)


def _lookup(context: LookupContext, position: JamoPosition, roman: str, rule: Rule, index: int) -> int:
    code = context.code(position, roman)
    if code is None:
        raise RuleLookupError(position, roman, rule.name, index)
    return code


def apply_pair(left: Syllable,
               right: Syllable,
               *,
               index: int = 0,
               rules: tuple[Rule, ...] = RULES,
               context: LookupContext = DEFAULT_CONTEXT) -> tuple[Syllable, Syllable]:
    """Run the rule chain over one adjacent pair and return the rewritten pair.

    `index` is the position of `left` in its sentence; it is only used for
    logging and error reporting.

    Raises:
        RuleLookupError: if a rule produces a tail or lead with no jamo code.
    """
    for rule in rules:
        tail = left.tail.roman(context)
        lead = right.lead.roman(context)
        if not rule.matches(tail, lead):
            continue
        new_tail, new_lead = rule.strategy(tail, lead)
        logger.debug("rule %s fired at %d: (%r, %r) -> (%r, %r)",
                     rule.name, index, tail, lead, new_tail, new_lead)
        left = left.with_tail(_lookup(context, JamoPosition.Tail, new_tail, rule, index))
        right = right.with_lead(_lookup(context, JamoPosition.Lead, new_lead, rule, index + 1))
    return left, right
