import pytest

from config import DrumConfig, PitchConfig
from notes.model import NOTE_OFF, NOTE_ON, Voice
from timeline.builder import (
    build_bass_timeline,
    build_drum_timeline,
    build_harmony_timeline,
    build_melody_timeline,
)
from utils.errors import PitchRangeError

E = 240  # eighth at 480 ticks/beat
Q = 480
PITCHES = PitchConfig()


def test_drum_pattern():
    drums = DrumConfig()
    tl = build_drum_timeline("0101", drums, E)
    assert tl.voice is Voice.DRUM
    assert tl.steps == 4
    assert [e.note for e in tl.note_ons()] == [36, 38, 36, 38]
    assert [(e.type, e.delta) for e in tl.events] == [(NOTE_ON, 0), (NOTE_OFF, E)] * 4
    assert all(e.channel == 9 and e.velocity == 127 for e in tl.events)
    assert tl.duration == 4 * E


def test_drum_any_non_zero_bit_is_high():
    tl = build_drum_timeline("0x1", DrumConfig(), E)
    assert [e.note for e in tl.note_ons()] == [36, 38, 38]


def test_melody_one_step_per_character():
    text = "Hi 9!"
    tl = build_melody_timeline(text, PITCHES, 0, E)
    assert len(tl.note_ons()) == len(text)
    assert tl.steps == len(text)
    assert tl.duration == len(text) * E
    assert [(e.note, e.velocity) for e in tl.note_ons()] == [
        (75 + 8, 127), (75 + 9, 100), (0, 0), (0, 0), (75 + 30, 60),
    ]


def test_melody_digit_is_a_silent_pair():
    tl = build_melody_timeline("7", PITCHES, 0, E)
    assert [(e.type, e.note, e.velocity, e.delta) for e in tl.events] == [
        (NOTE_ON, 0, 0, 0),
        (NOTE_OFF, 0, 0, E),
    ]


def test_harmony_zero_delta_chaining():
    tl = build_harmony_timeline("aA", PITCHES, 0, Q)
    assert [(e.type, e.note, e.delta) for e in tl.events] == [
        (NOTE_ON, 43, 0), (NOTE_ON, 46, 0), (NOTE_OFF, 43, Q), (NOTE_OFF, 46, 0),
        (NOTE_ON, 43, 0), (NOTE_ON, 47, 0), (NOTE_OFF, 43, Q), (NOTE_OFF, 47, 0),
    ]
    assert tl.steps == 2
    assert tl.duration == 2 * Q


def test_harmony_chord_tones_start_and_stop_together():
    tl = build_harmony_timeline("b,", PITCHES, 0, Q)
    ticks = tl.absolute_ticks()
    assert ticks == [0, 0, Q, Q, Q, Q, 2 * Q, 2 * Q]


def test_bass_is_lower_harmony_voice():
    text = "Hello, World?"
    harmony = build_harmony_timeline(text, PITCHES, 0, Q)
    bass = build_bass_timeline(text, PITCHES, 0, Q)
    lower = [e.note for i, e in enumerate(harmony.events) if i % 4 == 0]
    assert [e.note for e in bass.note_ons()] == lower
    assert [e.delta for e in bass.note_ons()] == [0] * len(text)
    assert [e.delta for e in bass.events if not e.is_on] == [Q] * len(text)
    assert bass.steps == harmony.steps == len(text)
    assert bass.duration == harmony.duration


def test_every_note_on_is_closed_before_reuse():
    tl = build_melody_timeline("aab", PITCHES, 0, E)
    open_notes = set()
    for e in tl.events:
        if e.is_on:
            assert e.note not in open_notes
            open_notes.add(e.note)
        else:
            open_notes.remove(e.note)
    assert not open_notes


def test_absolute_time_never_decreases():
    tl = build_harmony_timeline("Some text. 123", PITCHES, 0, Q)
    ticks = tl.absolute_ticks()
    assert ticks == sorted(ticks)


def test_empty_input_gives_empty_timeline():
    tl = build_melody_timeline("", PITCHES, 0, E)
    assert tl.events == ()
    assert tl.steps == 0
    assert tl.duration == 0


def test_out_of_range_pitch_is_rejected():
    high = PitchConfig(root=100)
    with pytest.raises(PitchRangeError) as exc:
        build_melody_timeline("ab", high, 0, E)
    assert exc.value.char == "a"
    assert exc.value.voice == "Melody"
    assert exc.value.pitch == 100 + 33 + 1


def test_out_of_range_low_pitch_is_rejected():
    with pytest.raises(PitchRangeError):
        build_harmony_timeline(",", PitchConfig(root=2), 0, Q)


def test_events_are_immutable():
    tl = build_melody_timeline("a", PITCHES, 0, E)
    with pytest.raises(AttributeError):
        tl.events[0].note = 1


def test_builders_classify_through_classify_text(monkeypatch):
    import timeline.builder as builder
    from symbols.classifier import classify_text

    seen = []

    def spy(text):
        seen.append(text)
        return classify_text(text)

    monkeypatch.setattr(builder, "classify_text", spy)
    build_melody_timeline("ab", PITCHES, 0, E)
    build_harmony_timeline("c", PITCHES, 0, Q)
    build_bass_timeline("d", PITCHES, 0, Q)
    assert seen == ["ab", "c", "d"]
