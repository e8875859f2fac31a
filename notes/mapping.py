# notes/mapping.py
from typing import Tuple

from config import PitchConfig
from symbols.classifier import Category, Symbol

MINOR_THIRD = 3
MAJOR_THIRD = 4
SEMITONE = 1

def melody_note(sym: Symbol, pitches: PitchConfig) -> Tuple[int, int]:
    """Return (pitch, volume) for the melody voice."""
    if sym.category is Category.LOWERCASE:
        return pitches.melody_root + sym.index, pitches.normal_volume
    if sym.category is Category.UPPERCASE:
        return pitches.melody_root + sym.index, pitches.high_volume
    if sym.category is Category.PUNCTUATION:
        return pitches.melody_root + sym.index, pitches.low_volume
    return 0, 0

def harmony_notes(sym: Symbol, pitches: PitchConfig) -> Tuple[int, int, int]:
    """Return (pitch1, pitch2, volume) for the two-note harmony chord.

    Case picks the colour of the stacked third: minor for lowercase, major for
    uppercase. Punctuation gets a semitone cluster below the root note.
    """
    if sym.category is Category.LOWERCASE:
        p1 = pitches.root + sym.index
        return p1, p1 + MINOR_THIRD, pitches.high_volume
    if sym.category is Category.UPPERCASE:
        p1 = pitches.root + sym.index
        return p1, p1 + MAJOR_THIRD, pitches.high_volume
    if sym.category is Category.PUNCTUATION:
        p1 = pitches.root + sym.index
        return p1, p1 - SEMITONE, pitches.low_volume
    return 0, 0, 0
