"""Score records and the text and binary files they are kept in."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

MAX_RECORDS = 10
TEXT_FILE = "output.txt"
BINARY_FILE = "output.bin"
SEPARATOR = "----------------------"
TIMESTAMP_FORMAT = "%Y-%m-%d  %H:%M:%S"

_LENGTH = struct.Struct("<Q")
_SCORE = struct.Struct("<i")


@dataclass(frozen=True)
class ScoreRecord:
    """One finished game: who played, what they scored and when."""

    name: str
    score: int
    time_string: str


def format_timestamp(moment: datetime) -> str:
    """Format a moment the way records store it."""
    return moment.strftime(TIMESTAMP_FORMAT)


def append_text(path: str | os.PathLike, record: ScoreRecord) -> None:
    """Append a human-readable entry for ``record`` to ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"Name: {record.name}\n")
        handle.write(f"Score: {record.score}\n")
        handle.write(f"{record.time_string}\n")
        handle.write(f"{SEPARATOR}\n")


def _encode_string(text: str) -> bytes:
    data = text.encode("utf-8") + b"\0"
    return _LENGTH.pack(len(data)) + data


def append_binary(path: str | os.PathLike, record: ScoreRecord) -> None:
    """Append ``record`` to ``path`` as length-prefixed, NUL-terminated fields."""
    payload = (
        _encode_string(record.name)
        + _SCORE.pack(record.score)
        + _encode_string(record.time_string)
    )
    with open(path, "ab") as handle:
        handle.write(payload)


def save_record(record: ScoreRecord, directory: str | os.PathLike = ".") -> None:
    """Append ``record`` to both record files in ``directory``."""
    base = Path(directory)
    append_text(base / TEXT_FILE, record)
    append_binary(base / BINARY_FILE, record)


def _read_exact(handle, size: int) -> bytes | None:
    data = handle.read(size)
    return data if len(data) == size else None


def _read_string(handle) -> str | None:
    header = _read_exact(handle, _LENGTH.size)
    if header is None:
        return None
    (length,) = _LENGTH.unpack(header)
    raw = _read_exact(handle, length)
    if raw is None:
        return None
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _read_one(handle) -> ScoreRecord | None:
    name = _read_string(handle)
    if name is None:
        return None
    raw_score = _read_exact(handle, _SCORE.size)
    if raw_score is None:
        return None
    (score,) = _SCORE.unpack(raw_score)
    time_string = _read_string(handle)
    if time_string is None:
        return None
    return ScoreRecord(name, score, time_string)


def read_records(path: str | os.PathLike, limit: int = MAX_RECORDS) -> list[ScoreRecord]:
    """Read up to ``limit`` records from the start of a binary record file.

    Reading stops quietly at the first incomplete record.
    """
    records: list[ScoreRecord] = []
    with open(path, "rb") as handle:
        while len(records) < limit:
            record = _read_one(handle)
            if record is None:
                break
            records.append(record)
    return records