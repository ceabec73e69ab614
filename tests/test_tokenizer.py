import logging
import random

import pytest

from simplebcs.errors import IllegalCharacterError
from simplebcs.model import Token, TokenKind
from simplebcs.tokenizer import tokenize


def _kinds_texts(tokens):
    return [(t.kind, t.text) for t in tokens]


def test_empty_input():
    assert tokenize("") == []


def test_separators_only():
    assert tokenize(" ,\t\r\n,, ") == []


def test_none_header_and_reference():
    assert _kinds_texts(tokenize("none: , a::b")) == [
        (TokenKind.IDENTIFIER, "none"),
        (TokenKind.SINGLE_COLON, ":"),
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.DOUBLE_COLON, "::"),
        (TokenKind.IDENTIFIER, "b"),
    ]


def test_tokens_compare_by_kind_and_text():
    assert tokenize("flat:") == [Token(TokenKind.IDENTIFIER, "flat"), Token(TokenKind.SINGLE_COLON, ":")]


def test_offsets_point_at_first_character():
    offsets = [(t.text, t.offset) for t in tokenize("flat: aa::bb")]
    assert offsets == [("flat", 0), (":", 4), ("aa", 6), ("::", 8), ("bb", 10)]


def test_separator_breaks_identifier():
    assert [t.text for t in tokenize("ab cd,ef")] == ["ab", "cd", "ef"]


def test_separator_between_colons_gives_two_single_colons():
    assert _kinds_texts(tokenize("a : : b")) == [
        (TokenKind.IDENTIFIER, "a"),
        (TokenKind.SINGLE_COLON, ":"),
        (TokenKind.SINGLE_COLON, ":"),
        (TokenKind.IDENTIFIER, "b"),
    ]


def test_triple_colon_is_one_unusable_token():
    tokens = tokenize("a:::b")
    assert [t.text for t in tokens] == ["a", ":::", "b"]
    assert tokens[1].kind is TokenKind.IDENTIFIER
    assert not tokens[1].is_name


def test_digits_and_underscores_are_identifier_characters():
    assert [t.text for t in tokenize("ML_BSSN::At11 _x9")] == ["ML_BSSN", "::", "At11", "_x9"]


def test_case_is_preserved():
    assert [t.text for t in tokenize("Flat:ADMBase::Lapse")] == ["Flat", ":", "ADMBase", "::", "Lapse"]


def test_illegal_character():
    with pytest.raises(IllegalCharacterError) as exc:
        tokenize("flat: a@b")
    assert exc.value.char == "@"
    assert exc.value.position == 7
    assert "'@'" in str(exc.value)


@pytest.mark.parametrize("text", ["a-b", "x.y", "flat; a::b", "é", "a::b/c"])
def test_other_illegal_characters(text):
    with pytest.raises(IllegalCharacterError):
        tokenize(text)


def test_illegal_character_is_logged(caplog):
    caplog.set_level(logging.ERROR)
    with pytest.raises(IllegalCharacterError):
        tokenize("#")
    assert any("Illegal character" in r.getMessage() for r in caplog.records)


def test_total_on_legal_alphabet():
    alphabet = "abcXYZ019_:, \t\r\n"
    rng = random.Random(1234)
    for _ in range(300):
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
        tokens = tokenize(text)
        for t in tokens:
            assert t.text
            assert not (":" in t.text and any(c != ":" for c in t.text))
