# midi/timing.py
import mido

# note length in quarter notes
NOTE_LENGTHS = {
    "whole": 4.0,
    "half": 2.0,
    "quarter": 1.0,
    "eighth": 0.5,
    "8th": 0.5,
    "sixteenth": 0.25,
    "16th": 0.25,
    "thirtysecond": 0.125,
    "thirty second": 0.125,
    "32nd": 0.125,
    "sixtyfourth": 0.0625,
    "sixty fourth": 0.0625,
    "64th": 0.0625,
}

MODIFIERS = {
    "dotted": 1.5,
    "triplet": 2.0 / 3.0,
}

def note_to_ticks(name: str, ticks_per_beat: int) -> int:
    """'quarter' -> ticks_per_beat, 'dotted eighth' -> 0.75 * ticks_per_beat, ...

    Names are case-insensitive; modifiers ('dotted', 'triplet') go first and
    may be combined.
    """
    words = name.strip().lower().split()
    factor = 1.0
    while words and words[0] in MODIFIERS:
        factor *= MODIFIERS[words.pop(0)]
    base = " ".join(words)
    if base not in NOTE_LENGTHS:
        raise ValueError(f"Unknown note length: {name!r}")
    return int(round(NOTE_LENGTHS[base] * factor * ticks_per_beat))

def tempo_for(bpm: float) -> int:
    """Microseconds per quarter note, as stored in the set_tempo meta event."""
    return mido.bpm2tempo(bpm)
