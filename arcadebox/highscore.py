"""Reading and writing high-score files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

PathLike = str | os.PathLike


def find_highscore_path(candidates: Iterable[PathLike]) -> PathLike:
    """Return the first candidate that can be read, else the first candidate."""
    candidates = list(candidates)
    if not candidates:
        raise ValueError("no high-score locations given")
    for candidate in candidates:
        try:
            with open(candidate, "rb"):
                return candidate
        except OSError:
            continue
    return candidates[0]


def load_highscore(path: PathLike) -> int:
    """Read the score stored at path; 0 if missing or unreadable."""
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError):
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_highscore(path: PathLike, score: int) -> None:
    """Store score at path; a file that cannot be written is skipped."""
    try:
        Path(path).write_text(str(score))
    except OSError:
        pass