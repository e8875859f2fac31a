# app.py
import logging
from dataclasses import dataclass
from typing import List

import mido

from config import AppConfig
from midi.timing import note_to_ticks
from midi.writer import assemble, save_midi
from notes.model import Timeline
from timeline.builder import (
    build_bass_timeline,
    build_drum_timeline,
    build_harmony_timeline,
    build_melody_timeline,
)
from utils.errors import InputFileError
from utils.path import read_bytes, read_text, resolve_path

log = logging.getLogger(__name__)

DRUM_MODES = ("bytes", "text")

def bits_from_bytes(data: bytes) -> str:
    """Every byte as eight '0'/'1' characters, most significant bit first."""
    return "".join(format(b, "08b") for b in data)

def drum_bits(data: bytes, mode: str = "bytes") -> str:
    """bytes: raw bit pattern of the file; text: one step per character."""
    if mode == "bytes":
        return bits_from_bytes(data)
    if mode == "text":
        return data.decode("utf-8").replace("\r", "").replace("\n", "")
    raise ValueError(f"Unknown drum mode: {mode!r} (expected one of {', '.join(DRUM_MODES)})")

@dataclass(frozen=True)
class Inputs:
    drums: str      # bit string
    melody: str
    harmony: str

class App:
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        tpb = cfg.timing.ticks_per_beat
        self.eighth = note_to_ticks("eighth", tpb)
        self.quarter = note_to_ticks("quarter", tpb)

    # ---------- Input ----------
    def read_inputs(self) -> Inputs:
        io = self.cfg.io
        drum_path = resolve_path(io.drum_path, io.base_dir)
        melody_path = resolve_path(io.melody_path, io.base_dir)
        harmony_path = resolve_path(io.harmony_path, io.base_dir)

        # all three are read before anything gets built
        raw_drums = read_bytes(drum_path)
        melody = read_text(melody_path)
        harmony = read_text(harmony_path)
        try:
            bits = drum_bits(raw_drums, self.cfg.drums.mode)
        except UnicodeDecodeError as e:
            raise InputFileError(drum_path, "not valid utf-8 text") from e

        log.info("Read %s (%d bytes -> %d drum steps)", drum_path, len(raw_drums), len(bits))
        log.info("Read %s (%d characters)", melody_path, len(melody))
        log.info("Read %s (%d characters)", harmony_path, len(harmony))
        return Inputs(drums=bits, melody=melody, harmony=harmony)

    # ---------- Build ----------
    def build_timelines(self, inputs: Inputs) -> List[Timeline]:
        cfg = self.cfg
        timelines = [
            build_drum_timeline(inputs.drums, cfg.drums, self.eighth),
            build_melody_timeline(inputs.melody, cfg.pitches, cfg.tracks.melody_channel, self.eighth),
            build_harmony_timeline(inputs.harmony, cfg.pitches, cfg.tracks.harmony_channel, self.quarter),
            build_bass_timeline(inputs.harmony, cfg.pitches, cfg.tracks.bass_channel, self.quarter),
        ]
        for tl in timelines:
            log.info("%-8s %5d steps, %7d ticks", tl.voice.track_name, tl.steps, tl.duration)
            if not tl.events:
                log.warning("%s track is empty", tl.voice.track_name)
        return timelines

    def build(self, inputs: Inputs) -> mido.MidiFile:
        return assemble(self.build_timelines(inputs), self.cfg)

    # ---------- Run ----------
    def run(self) -> str:
        inputs = self.read_inputs()
        mid = self.build(inputs)
        out = resolve_path(self.cfg.io.output_path, self.cfg.io.base_dir)
        save_midi(mid, out)
        return out
