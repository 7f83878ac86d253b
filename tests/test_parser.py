# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Tests for the high-level reader and file entry points."""

import io
import logging

import pytest

from nvme_pel import EventType, PathError, parse_log, parse_log_file

from .conftest import build_event, build_log


@pytest.fixture
def log_bytes() -> bytes:
    return build_log([
        build_event(EventType.ThermalExcursion, b"\x01\x50"),
        build_event(EventType.NvmHwError, b"\x08\x00\x00\x00"),
    ], serial_num=b"SERIAL42")


class TestParseLog:
    def test_from_reader(self, log_bytes: bytes):
        pel = parse_log(io.BytesIO(log_bytes))
        assert pel.header.serial_num == "SERIAL42"
        assert [event.event_type for event in pel.events] == [
            EventType.ThermalExcursion, EventType.NvmHwError,
        ]

    def test_headers_only(self, log_bytes: bytes):
        pel = parse_log(io.BytesIO(log_bytes), headers_only=True)
        assert all(event.is_unknown for event in pel.events)


class TestParseLogFile:
    def test_from_file(self, tmp_path, log_bytes: bytes, caplog):
        path = tmp_path / "pel.bin"
        path.write_bytes(log_bytes)

        with caplog.at_level(logging.INFO):
            pel = parse_log_file(path)

        assert len(pel.events) == 2
        assert "Parsed 2 events" in caplog.text
        assert all(record.getMessage().startswith("[nvme-pel]") for record in caplog.records)

    def test_str_path(self, tmp_path, log_bytes: bytes):
        path = tmp_path / "pel.bin"
        path.write_bytes(log_bytes)
        assert parse_log_file(str(path)) == parse_log(io.BytesIO(log_bytes))

    def test_missing_file(self, tmp_path):
        with pytest.raises(PathError):
            parse_log_file(tmp_path / "missing.bin")
