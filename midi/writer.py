# midi/writer.py
import logging
import os
import tempfile
from typing import Dict, Iterable

import mido

from config import AppConfig, TrackConfig
from midi.timing import tempo_for
from notes.model import TRACK_ORDER, Timeline, Voice
from utils.errors import MidiWriteError

log = logging.getLogger(__name__)

CC_VOLUME = 7

def _channel_for(voice: Voice, cfg: AppConfig) -> int:
    return {
        Voice.DRUM: cfg.drums.channel,
        Voice.MELODY: cfg.tracks.melody_channel,
        Voice.HARMONY: cfg.tracks.harmony_channel,
        Voice.BASS: cfg.tracks.bass_channel,
    }[voice]

def meta_track(cfg: AppConfig) -> mido.MidiTrack:
    track = mido.MidiTrack()
    track.append(mido.MetaMessage("set_tempo", tempo=tempo_for(cfg.timing.bpm), time=0))
    track.append(mido.MetaMessage("track_name", name=cfg.tracks.sequence_name, time=0))
    return track

def voice_track(tl: Timeline, channel: int, tracks: TrackConfig) -> mido.MidiTrack:
    track = mido.MidiTrack()
    track.append(mido.MetaMessage("track_name", name=tl.voice.track_name, time=0))
    track.append(mido.MetaMessage("instrument_name", name=tracks.instrument, time=0))
    track.append(mido.Message("control_change", channel=channel, control=CC_VOLUME,
                              value=tracks.volume, time=0))
    track.append(mido.Message("program_change", channel=channel, program=tracks.program, time=0))
    track.extend(tl.to_messages())
    return track

def assemble(timelines: Iterable[Timeline], cfg: AppConfig) -> mido.MidiFile:
    """Meta track first, then drums, melody, harmony, bass, whatever order the
    timelines come in."""
    by_voice: Dict[Voice, Timeline] = {}
    for tl in timelines:
        if tl.voice in by_voice:
            raise ValueError(f"Duplicate timeline for voice {tl.voice.track_name}")
        by_voice[tl.voice] = tl
    missing = [v.track_name for v in TRACK_ORDER if v not in by_voice]
    if missing:
        raise ValueError(f"Missing timelines: {', '.join(missing)}")

    mid = mido.MidiFile(type=1, ticks_per_beat=cfg.timing.ticks_per_beat)
    mid.tracks.append(meta_track(cfg))
    for voice in TRACK_ORDER:
        mid.tracks.append(voice_track(by_voice[voice], _channel_for(voice, cfg), cfg.tracks))
    log.info("Assembled %d tracks at %s BPM, %d ticks/beat",
             len(mid.tracks), cfg.timing.bpm, mid.ticks_per_beat)
    return mid

def save_midi(mid: mido.MidiFile, path: str):
    """Write to a temp file beside `path` and rename it into place.

    On any failure the temp file is removed and the destination is untouched.
    """
    target = os.path.abspath(path)
    directory = os.path.dirname(target)
    try:
        fd, tmp = tempfile.mkstemp(prefix=".tmp-", suffix=".mid", dir=directory)
    except OSError as e:
        raise MidiWriteError(path, e.strerror or str(e)) from e
    try:
        with os.fdopen(fd, "wb") as f:
            mid.save(file=f)
        os.chmod(tmp, 0o644)  # mkstemp creates 0600
        os.replace(tmp, target)
    except BaseException as e:
        try:
            os.remove(tmp)
        except FileNotFoundError:
            pass
        if isinstance(e, (OSError, ValueError)):
            raise MidiWriteError(path, str(e)) from e
        raise
    log.info("Wrote %s", target)
