"""
hangul_rules: Hangul syllable decomposition, romanization and sound-change rules.

Provides a stable import surface for the domain API.
"""

from .domain.errors import HangulRulesError, RuleLookupError  # noqa: F401
from .domain.jamo_tables import DEFAULT_CONTEXT, JamoPosition, LookupContext  # noqa: F401
from .domain.letter import HangulLetter, OtherLetter, make_letter  # noqa: F401
from .domain.rules import RULES, Rule  # noqa: F401
from .domain.sentence import KoreanSentence, apply_rules, hangul_string, jamo, roman  # noqa: F401
from .domain.syllable_codec import Jamo, Syllable  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONTEXT",
    "HangulLetter",
    "HangulRulesError",
    "Jamo",
    "JamoPosition",
    "KoreanSentence",
    "LookupContext",
    "OtherLetter",
    "RULES",
    "Rule",
    "RuleLookupError",
    "Syllable",
    "apply_rules",
    "hangul_string",
    "jamo",
    "make_letter",
    "roman",
]
