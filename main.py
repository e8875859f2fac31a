# main.py
import sys, os
sys.path.append(os.path.dirname(__file__))  # so config.py and the packages resolve when run as a script

import argparse
import logging
from logging.handlers import RotatingFileHandler

from config import AppConfig, DrumConfig, IOConfig, PitchConfig, TimingConfig
from app import App, DRUM_MODES
from utils.crashlog import close_crashlog, log_dir, log_exception, set_log_dir, setup_crashlog
from utils.errors import ConversionError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

def _init_logging(console_level: int = logging.INFO):
    root = logging.getLogger()
    if root.handlers:
        return

    # root passes everything; each handler filters on its own level
    root.setLevel(logging.DEBUG)
    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console)
    try:
        fh = RotatingFileHandler(os.path.join(log_dir(), "text2midi.log"),
                                 maxBytes=2*1024*1024, backupCount=3, encoding="utf-8")
    except OSError as e:
        logging.warning("File logging disabled: %s", e)
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

def build_parser() -> argparse.ArgumentParser:
    io, pitches, drums, timing = IOConfig(), PitchConfig(), DrumConfig(), TimingConfig()
    ap = argparse.ArgumentParser(prog="text2midi",
                                 description="Turn three text files into a four-voice MIDI file.")
    ap.add_argument('--drum', default=io.drum_path, help="drum source file")
    ap.add_argument('--melody', default=io.melody_path, help="melody source file")
    ap.add_argument('--harmony', default=io.harmony_path, help="harmony/bass source file")
    ap.add_argument('-o', '--output', default=io.output_path, help="MIDI file to write")
    ap.add_argument('--base-dir', default=None, help="directory relative paths resolve against")
    ap.add_argument('--root', type=int, default=pitches.root, help="harmony root note")
    ap.add_argument('--bpm', type=float, default=timing.bpm)
    ap.add_argument('--ticks-per-beat', type=int, default=timing.ticks_per_beat)
    ap.add_argument('--drum-mode', default=drums.mode, choices=DRUM_MODES)
    ap.add_argument('--drum-channel', type=int, default=drums.channel, choices=range(16),
                    metavar="0-15")
    ap.add_argument('--log-dir', default=None)
    level = ap.add_mutually_exclusive_group()
    level.add_argument('-v', '--verbose', action='store_true')
    level.add_argument('-q', '--quiet', action='store_true')
    return ap

def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        pitches=PitchConfig(root=args.root),
        drums=DrumConfig(channel=args.drum_channel, mode=args.drum_mode),
        timing=TimingConfig(ticks_per_beat=args.ticks_per_beat, bpm=args.bpm),
        io=IOConfig(
            drum_path=args.drum,
            melody_path=args.melody,
            harmony_path=args.harmony,
            output_path=args.output,
            base_dir=args.base_dir,
        ),
    )

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    set_log_dir(args.log_dir)
    setup_crashlog()
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    _init_logging(level)

    try:
        out = App(config_from_args(args)).run()
    except ConversionError as e:
        logging.error("%s", e)
        log_exception("conversion failed", e)
        return 1
    except Exception as e:
        logging.error("Unexpected error: %s", e, exc_info=True)
        print(f"Crash report written to {log_exception('Top-level exception', e)}", file=sys.stderr)
        return 2
    finally:
        close_crashlog()
    logging.info("Done: %s", out)
    return 0

if __name__ == '__main__':
    sys.exit(main())
