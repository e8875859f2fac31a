# symbols/classifier.py
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

class Category(Enum):
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    PUNCTUATION = "punctuation"
    UNRECOGNIZED = "unrecognized"

# punctuation -> semitone offset from the root
PUNCTUATION: Mapping[str, int] = MappingProxyType({
    "!": 30,
    "?": 40,
    ".": -3,
    ",": -4,
})

@dataclass(frozen=True)
class Symbol:
    char: str
    category: Category
    index: int      # alphabet position (1-based) or punctuation offset; 0 when unrecognized

def classify(char: str, punctuation: Mapping[str, int] = PUNCTUATION) -> Symbol:
    """Map one character to its category and offset.

    Only ASCII letters count as letters; accented letters and every other
    character fall through to UNRECOGNIZED.
    """
    if len(char) == 1 and "a" <= char <= "z":
        return Symbol(char, Category.LOWERCASE, ord(char) - ord("a") + 1)
    if len(char) == 1 and "A" <= char <= "Z":
        return Symbol(char, Category.UPPERCASE, ord(char) - ord("A") + 1)
    if char in punctuation:
        return Symbol(char, Category.PUNCTUATION, punctuation[char])
    return Symbol(char, Category.UNRECOGNIZED, 0)

def classify_text(text: str, punctuation: Mapping[str, int] = PUNCTUATION):
    for c in text:
        yield classify(c, punctuation)
