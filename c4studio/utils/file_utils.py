"""File utilities."""
from __future__ import annotations

from pathlib import Path


def ensure_dir(path: str) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def read_text_file(path: str) -> str:
    """Read a model file as UTF-8.

    A leading byte-order mark is dropped; undecodable bytes raise ValueError
    so callers can report a readable message.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    try:
        return p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Unable to read text file: {p.name}") from exc


def write_text_file(path: str, text: str) -> str:
    p = Path(path)
    if p.parent != Path("."):
        ensure_dir(str(p.parent))
    p.write_text(text, encoding="utf-8")
    return str(p)
