# utils/errors.py

class ConversionError(Exception):
    """Base class for everything that aborts a conversion run."""

class InputFileError(ConversionError, OSError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Cannot read input file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)

class MidiWriteError(ConversionError, OSError):
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Cannot write MIDI file: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)

class PitchRangeError(ConversionError, ValueError):
    def __init__(self, char: str, voice: str, pitch: int):
        self.char = char
        self.voice = voice
        self.pitch = pitch
        super().__init__(f"{voice}: character {char!r} maps to pitch {pitch}, outside 0..127")
