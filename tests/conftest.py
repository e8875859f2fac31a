import pytest

from config import AppConfig, IOConfig


@pytest.fixture
def cfg():
    return AppConfig()


@pytest.fixture
def sources(tmp_path):
    """Write the three default input files into tmp_path and return a config pointing at them."""
    (tmp_path / "drum_part.txt").write_bytes(b"0")
    (tmp_path / "melody_part.txt").write_text("Hi, there!", encoding="utf-8")
    (tmp_path / "harmony_part.txt").write_text("aB.", encoding="utf-8")
    return AppConfig(io=IOConfig(base_dir=str(tmp_path)))
