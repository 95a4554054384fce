from __future__ import annotations

import json
import re
from pathlib import Path

from tokenmeta.logging.error_log import ErrorLogBuffer
from tokenmeta.models.error_record import ErrorRecord


def test_error_record_create_and_json_line():
    record = ErrorRecord.create("data/final.csv", 3, "image", "PARSE_ERROR", "missing field")
    assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$", record.timestamp)
    data = json.loads(record.to_json_line())
    assert list(data) == ["timestamp", "file", "row", "column", "error_type", "message"]
    assert data["row"] == 3
    assert data["column"] == "image"


def test_error_record_unknown_row():
    record = ErrorRecord.create("out/1", -1, "", "IO_ERROR", "cannot write")
    assert json.loads(record.to_json_line())["row"] == -1


def test_error_record_keeps_unicode():
    record = ErrorRecord.create("ポケモン.csv", 1, "", "PARSE_ERROR", "x")
    assert "ポケモン" in record.to_json_line()


def test_buffer_flush_writes_json_lines(tmp_path: Path):
    buf = ErrorLogBuffer(logs_dir=tmp_path / "logs")
    buf.append(ErrorRecord.create("a.csv", 1, "", "PARSE_ERROR", "one"))
    buf.append(ErrorRecord.create("a.csv", 2, "", "PARSE_ERROR", "two"))
    path = buf.flush()
    assert path is not None
    assert re.match(r"errors-\d{8}-\d{6}\.log$", path.name)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["message"] for line in lines] == ["one", "two"]
    assert len(buf) == 0


def test_buffer_flush_empty_creates_nothing(tmp_path: Path):
    buf = ErrorLogBuffer(logs_dir=tmp_path / "logs")
    assert buf.flush() is None
    assert not (tmp_path / "logs").exists()
