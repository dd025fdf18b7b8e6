import struct
from datetime import datetime

import pytest

from pacmaze.records import (
    BINARY_FILE,
    MAX_RECORDS,
    SEPARATOR,
    TEXT_FILE,
    ScoreRecord,
    append_binary,
    append_text,
    format_timestamp,
    read_records,
    save_record,
)


def _record(index=0):
    return ScoreRecord(f"player{index}", index * 10, f"2024-01-01  00:00:{index:02d}")


def test_format_timestamp_uses_double_space():
    assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02  03:04:05"


def test_append_text_writes_four_lines(tmp_path):
    path = tmp_path / "out.txt"
    record = ScoreRecord("ava", 120, "2024-01-02  03:04:05")
    append_text(path, record)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines == [f"Name: {record.name}", f"Score: {record.score}", record.time_string, SEPARATOR]


def test_append_text_appends(tmp_path):
    path = tmp_path / "out.txt"
    append_text(path, _record(1))
    append_text(path, _record(2))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 8
    assert lines[4] == "Name: player2"


def test_binary_layout_starts_with_length_including_terminator(tmp_path):
    path = tmp_path / "out.bin"
    append_binary(path, ScoreRecord("ab", 7, "t"))
    data = path.read_bytes()
    assert data[:8] == bytes([3, 0, 0, 0, 0, 0, 0, 0])
    assert data[8:11] == b"ab\0"
    assert struct.unpack("<i", data[11:15]) == (7,)


def test_binary_round_trip(tmp_path):
    path = tmp_path / "out.bin"
    records = [_record(1), ScoreRecord("név", -5, "2024-12-31  23:59:59")]
    for record in records:
        append_binary(path, record)
    assert read_records(path) == records


def test_read_records_stops_at_limit(tmp_path):
    path = tmp_path / "out.bin"
    records = [_record(i) for i in range(MAX_RECORDS + 2)]
    for record in records:
        append_binary(path, record)
    assert read_records(path) == records[:MAX_RECORDS]
    assert read_records(path, limit=3) == records[:3]


def test_read_records_ignores_truncated_tail(tmp_path):
    path = tmp_path / "out.bin"
    append_binary(path, _record(1))
    append_binary(path, _record(2))
    data = path.read_bytes()
    path.write_bytes(data[:-4])
    assert read_records(path) == [_record(1)]


def test_read_records_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_records(tmp_path / "absent.bin")


def test_save_record_writes_both_files(tmp_path):
    record = _record(3)
    save_record(record, tmp_path)
    assert read_records(tmp_path / BINARY_FILE) == [record]
    text = (tmp_path / TEXT_FILE).read_text(encoding="utf-8")
    assert text.splitlines()[0] == f"Name: {record.name}"


def test_save_record_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_record(_record(1), tmp_path / "nowhere")