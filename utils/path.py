# utils/path.py
import os
from typing import Optional

from utils.errors import InputFileError

def resolve_path(rel: str, base_dir: Optional[str] = None) -> str:
    """
    Absolute paths pass through; relative ones resolve against base_dir
    (or the current working directory when base_dir is None).
    """
    rel = os.path.expanduser(rel)
    if os.path.isabs(rel):
        return rel
    base = os.path.abspath(base_dir) if base_dir else os.getcwd()
    return os.path.join(base, rel)

def read_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputFileError(path, "no such file") from e
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e)) from e

def read_text(path: str, encoding: str = "utf-8") -> str:
    data = read_bytes(path)
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise InputFileError(path, f"not valid {encoding} text") from e
