# timeline/builder.py
"""Per-voice event timelines.

Every builder emits one step per input symbol, back to back: the step's first
note-on has delta 0 relative to the previous step's last note-off. Symbols
that do not classify still take their step as a pitch-0, velocity-0 pair so
all voices fed the same text stay aligned.
"""
import logging
from typing import Iterable, List

from config import DrumConfig, PitchConfig
from notes.mapping import harmony_notes, melody_note
from notes.model import NOTE_OFF, NOTE_ON, NoteEvent, Timeline, Voice
from symbols.classifier import classify_text
from utils.errors import PitchRangeError

log = logging.getLogger(__name__)

MIDI_MIN = 0
MIDI_MAX = 127

def _check(char: str, voice: Voice, *notes: int):
    for n in notes:
        if not MIDI_MIN <= n <= MIDI_MAX:
            raise PitchRangeError(char, voice.track_name, n)

def build_drum_timeline(bits: Iterable[str], drums: DrumConfig, eighth: int) -> Timeline:
    """'0' hits the low drum, any other bit the high drum; one eighth each."""
    events: List[NoteEvent] = []
    for b in bits:
        note = drums.low_note if b == "0" else drums.high_note
        _check(b, Voice.DRUM, note)
        events.append(NoteEvent(NOTE_ON, drums.channel, note, drums.velocity, 0))
        events.append(NoteEvent(NOTE_OFF, drums.channel, note, drums.velocity, eighth))
    tl = Timeline(Voice.DRUM, tuple(events))
    log.debug("drums: %d steps, %d ticks", tl.steps, tl.duration)
    return tl

def build_melody_timeline(text: str, pitches: PitchConfig, channel: int, eighth: int) -> Timeline:
    events: List[NoteEvent] = []
    for sym in classify_text(text):
        note, vol = melody_note(sym, pitches)
        _check(sym.char, Voice.MELODY, note)
        events.append(NoteEvent(NOTE_ON, channel, note, vol, 0))
        events.append(NoteEvent(NOTE_OFF, channel, note, vol, eighth))
    tl = Timeline(Voice.MELODY, tuple(events))
    log.debug("melody: %d steps, %d ticks", tl.steps, tl.duration)
    return tl

def build_harmony_timeline(text: str, pitches: PitchConfig, channel: int, quarter: int) -> Timeline:
    """Two-note chords; both tones start together and stop together.

    Delta pattern per step is (0, 0, quarter, 0): the second note-on and the
    second note-off land on the same tick as the event before them.
    """
    events: List[NoteEvent] = []
    for sym in classify_text(text):
        n1, n2, vol = harmony_notes(sym, pitches)
        _check(sym.char, Voice.HARMONY, n1, n2)
        events.append(NoteEvent(NOTE_ON, channel, n1, vol, 0))
        events.append(NoteEvent(NOTE_ON, channel, n2, vol, 0))
        events.append(NoteEvent(NOTE_OFF, channel, n1, vol, quarter))
        events.append(NoteEvent(NOTE_OFF, channel, n2, vol, 0))
    tl = Timeline(Voice.HARMONY, tuple(events))
    log.debug("harmony: %d steps, %d ticks", tl.steps, tl.duration)
    return tl

def build_bass_timeline(text: str, pitches: PitchConfig, channel: int, quarter: int) -> Timeline:
    """Lower chord tone of the harmony voice only."""
    events: List[NoteEvent] = []
    for sym in classify_text(text):
        n1, _, vol = harmony_notes(sym, pitches)
        _check(sym.char, Voice.BASS, n1)
        events.append(NoteEvent(NOTE_ON, channel, n1, vol, 0))
        events.append(NoteEvent(NOTE_OFF, channel, n1, vol, quarter))
    tl = Timeline(Voice.BASS, tuple(events))
    log.debug("bass: %d steps, %d ticks", tl.steps, tl.duration)
    return tl
