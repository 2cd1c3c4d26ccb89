import unicodedata

import pytest

from hangul_rules.domain.jamo_tables import JamoPosition
from hangul_rules.domain.letter import HANGUL_LIMIT
from hangul_rules.domain.syllable_codec import Jamo, Syllable


def test_decode_basic() -> None:
    assert Syllable.decode("가").codes == (0, 0, 0)
    assert Syllable.decode("좋").codes == (12, 8, 27)
    assert Syllable.decode("아").codes == (11, 0, 0)
    assert Syllable.decode("없").codes == (11, 4, 18)


def test_roman_string() -> None:
    assert Syllable.decode("좋").roman_string() == "joh"
    assert Syllable.decode("원").roman_string() == "weon"
    assert Syllable.decode("녕").roman_string() == "nyeong"


def test_jamo_string_has_empty_tail_slot() -> None:
    assert Syllable.decode("좋").jamo_string() == "[\u110c][\u1169][\u11c2]"
    assert Syllable.decode("아").jamo_string() == "[\u110b][\u1161][]"


def test_empty_tail_renders_as_nothing() -> None:
    tail = Jamo(JamoPosition.Tail, 0)
    assert tail.jamo_string() == ""
    assert tail.roman() == ""


@pytest.mark.parametrize("position,code", [
    (JamoPosition.Lead, 19), (JamoPosition.Vowel, 21), (JamoPosition.Tail, 28),
    (JamoPosition.Lead, -1),
])
def test_out_of_range_code_rejected(position: JamoPosition, code: int) -> None:
    with pytest.raises(ValueError):
        Jamo(position, code)


def test_decode_round_trips_over_hangul_range() -> None:
    for cp in range(0xAC00, HANGUL_LIMIT):
        ch = chr(cp)
        syllable = Syllable.decode(ch)
        parts = (syllable.lead.jamo_string(), syllable.vowel.jamo_string(), syllable.tail.jamo_string())
        if syllable.tail.code == 0:
            assert parts[2] == ""
        assert unicodedata.normalize("NFC", "".join(parts)) == ch
        assert syllable.to_char() == ch


def test_with_lead_and_tail_are_non_destructive() -> None:
    original = Syllable.decode("좋")
    rewritten = original.with_tail(0).with_lead(11)
    assert original.codes == (12, 8, 27)
    assert rewritten.codes == (11, 8, 0)
    assert rewritten.to_char() == "오"
