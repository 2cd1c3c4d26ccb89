from __future__ import annotations

from hangul_rules.domain.jamo_tables import JamoPosition


class HangulRulesError(Exception):
    """Base class for errors raised by hangul_rules."""


class RuleLookupError(HangulRulesError, KeyError):
    """A rule produced a romanization that has no code in the target position's table."""

    def __init__(self, position: JamoPosition, value: str, rule: str, index: int) -> None:
        self.position = position
        self.value = value
        self.rule = rule
        self.index = index
        super().__init__(position, value, rule, index)

    def __str__(self) -> str:
        return "rule %s produced %s %r at letter %d, which has no jamo code" % (
            self.rule, self.position.name.lower(), self.value, self.index)
