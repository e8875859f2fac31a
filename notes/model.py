# notes/model.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import mido

NOTE_ON = "note_on"
NOTE_OFF = "note_off"

class Voice(Enum):
    DRUM = "DRUMS"
    MELODY = "Melody"
    HARMONY = "Harmony"
    BASS = "Bass"

    @property
    def track_name(self) -> str:
        return self.value

# order of the voice tracks in the written file (after the meta track)
TRACK_ORDER: Tuple[Voice, ...] = (Voice.DRUM, Voice.MELODY, Voice.HARMONY, Voice.BASS)

@dataclass(frozen=True)
class NoteEvent:
    type: str       # NOTE_ON / NOTE_OFF
    channel: int
    note: int       # MIDI note number
    velocity: int
    delta: int      # ticks since the previous event on the same track

    @property
    def is_on(self) -> bool:
        return self.type == NOTE_ON

    def to_message(self) -> mido.Message:
        return mido.Message(self.type, channel=self.channel, note=self.note,
                            velocity=self.velocity, time=self.delta)

@dataclass(frozen=True)
class Timeline:
    """Ordered note events of one voice; times are deltas, not absolute."""
    voice: Voice
    events: Tuple[NoteEvent, ...]

    @property
    def duration(self) -> int:
        return sum(e.delta for e in self.events)

    @property
    def steps(self) -> int:
        # every step opens with a note-on at delta 0 after the previous step closed
        return sum(1 for i, e in enumerate(self.events)
                   if e.is_on and (i == 0 or not self.events[i - 1].is_on))

    def note_ons(self) -> List[NoteEvent]:
        return [e for e in self.events if e.is_on]

    def absolute_ticks(self) -> List[int]:
        out: List[int] = []
        t = 0
        for e in self.events:
            t += e.delta
            out.append(t)
        return out

    def to_messages(self) -> List[mido.Message]:
        return [e.to_message() for e in self.events]
