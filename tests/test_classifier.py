import string

import pytest

from symbols.classifier import PUNCTUATION, Category, classify, classify_text


@pytest.mark.parametrize("char", string.ascii_lowercase)
def test_lowercase_index(char):
    sym = classify(char)
    assert sym.category is Category.LOWERCASE
    assert sym.index == ord(char) - ord("a") + 1


@pytest.mark.parametrize("char", string.ascii_uppercase)
def test_uppercase_index(char):
    sym = classify(char)
    assert sym.category is Category.UPPERCASE
    assert sym.index == ord(char) - ord("A") + 1


def test_punctuation_offsets():
    assert {c: classify(c).index for c in "!?.,"} == {"!": 30, "?": 40, ".": -3, ",": -4}
    assert all(classify(c).category is Category.PUNCTUATION for c in "!?.,")


@pytest.mark.parametrize("char", ["0", "7", " ", "\n", "\t", ";", "-", "é", "ß", "Ω", "'"])
def test_everything_else_is_unrecognized(char):
    sym = classify(char)
    assert sym.category is Category.UNRECOGNIZED
    assert sym.index == 0


def test_custom_punctuation_table():
    table = {";": 5}
    assert classify(";", table).index == 5
    assert classify("!", table).category is Category.UNRECOGNIZED


def test_punctuation_table_is_read_only():
    with pytest.raises(TypeError):
        PUNCTUATION["#"] = 1


def test_classify_text_keeps_one_symbol_per_character():
    syms = list(classify_text("aZ!9"))
    assert [s.category for s in syms] == [
        Category.LOWERCASE,
        Category.UPPERCASE,
        Category.PUNCTUATION,
        Category.UNRECOGNIZED,
    ]
    assert "".join(s.char for s in syms) == "aZ!9"
