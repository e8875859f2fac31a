# ========================= config.py =========================
from dataclasses import dataclass, field
from typing import Optional

@dataclass(frozen=True)
class PitchConfig:
    root: int = 42               # harmony / bass root note
    melody_offset: int = 33      # melody root sits this far above root
    high_volume: int = 127       # uppercase letters, accent
    normal_volume: int = 100     # lowercase letters
    low_volume: int = 60         # punctuation

    @property
    def melody_root(self) -> int:
        return self.root + self.melody_offset

@dataclass(frozen=True)
class DrumConfig:
    channel: int = 9             # GM percussion (ch10, index 9)
    lowest_note: int = 35        # GM drum map starts at Acoustic Bass Drum
    low_offset: int = 1          # bit 0 -> Bass Drum 1
    high_offset: int = 3         # other bits -> Acoustic Snare
    velocity: int = 127
    mode: str = "bytes"          # or "text"

    @property
    def low_note(self) -> int:
        return self.lowest_note + self.low_offset

    @property
    def high_note(self) -> int:
        return self.lowest_note + self.high_offset

@dataclass(frozen=True)
class TimingConfig:
    ticks_per_beat: int = 480
    bpm: float = 120.0

@dataclass(frozen=True)
class TrackConfig:
    melody_channel: int = 0
    harmony_channel: int = 0
    bass_channel: int = 0
    program: int = 1
    volume: int = 127
    instrument: str = "Acoustic Grand Piano"
    sequence_name: str = "GeneratedEvents"

@dataclass
class IOConfig:
    drum_path: str = "drum_part.txt"
    melody_path: str = "melody_part.txt"
    harmony_path: str = "harmony_part.txt"
    output_path: str = "netlenka.mid"
    base_dir: Optional[str] = None   # None -> current working directory

@dataclass
class AppConfig:
    pitches: PitchConfig = field(default_factory=PitchConfig)
    drums: DrumConfig = field(default_factory=DrumConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    tracks: TrackConfig = field(default_factory=TrackConfig)
    io: IOConfig = field(default_factory=IOConfig)
