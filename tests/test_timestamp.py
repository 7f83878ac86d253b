# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Unit tests for timestamp parsing."""

from datetime import timedelta

import pytest

from nvme_pel.cursor import ByteCursor
from nvme_pel.error import TruncatedError
from nvme_pel.timestamp import Timestamp, TimestampOrigin, TimestampSynch


class TestMilliseconds:
    """Test the 48-bit millisecond counter."""

    def test_zero(self):
        cursor = ByteCursor(bytes(6))
        assert Timestamp.parse_milliseconds(cursor) == 0
        assert cursor.remaining == 0

    def test_little_endian(self):
        cursor = ByteCursor(bytes([0, 0xa, 0xb, 0xc, 0xd, 0xe, 0xf]))
        assert Timestamp.parse_milliseconds(cursor) == 0x0e0d0c0b0a00
        assert cursor.take(1) == b"\x0f"

    def test_reversed(self):
        cursor = ByteCursor(bytes([0xf, 0xe, 0xd, 0xc, 0xb, 0xa, 0]))
        assert Timestamp.parse_milliseconds(cursor) == 0x0a0b0c0d0e0f
        assert cursor.take(1) == b"\x00"

    def test_fits_in_48_bits(self):
        cursor = ByteCursor(b"\xff" * 8)
        assert Timestamp.parse_milliseconds(cursor) == (1 << 48) - 1


class TestTimestamp:
    """Test Timestamp parsing."""

    def test_all_zero(self):
        cursor = ByteCursor(bytes(8))
        timestamp = Timestamp.parse_timestamp(cursor)
        assert cursor.remaining == 0
        assert timestamp == Timestamp(
            milliseconds=0,
            synch=TimestampSynch.Continuous,
            origin=TimestampOrigin.Reset,
        )

    def test_skipped_set_feature(self):
        cursor = ByteCursor(bytes([0x0, 0x11, 0x22, 0x33, 0x44, 0x55, 0b00000011, 0xff]))
        timestamp = Timestamp.parse_timestamp(cursor)
        assert cursor.remaining == 0
        assert timestamp.milliseconds == 0x554433221100
        assert timestamp.synch == TimestampSynch.Skipped
        assert timestamp.origin == TimestampOrigin.SetFeature

    def test_unknown_origin_kept(self):
        """Test an unrecognized origin is kept as its raw code."""
        cursor = ByteCursor(bytes([0x0, 0x11, 0x22, 0x33, 0x44, 0x55, 0b00000101, 0xff]))
        timestamp = Timestamp.parse_timestamp(cursor)
        assert timestamp.synch == TimestampSynch.Skipped
        assert timestamp.origin == 2
        assert not isinstance(timestamp.origin, TimestampOrigin)

    def test_reserved_bits_ignored(self):
        cursor = ByteCursor(bytes(6) + bytes([0b11110000, 0]))
        timestamp = Timestamp.parse_timestamp(cursor)
        assert timestamp.synch == TimestampSynch.Continuous
        assert timestamp.origin == TimestampOrigin.Reset

    @pytest.mark.parametrize("code", range(8))
    def test_every_origin_code_decodes(self, code: int):
        cursor = ByteCursor(bytes(6) + bytes([code << 1, 0]))
        timestamp = Timestamp.parse_timestamp(cursor)
        if code < 2:
            assert timestamp.origin == TimestampOrigin(code)
        else:
            assert timestamp.origin == code

    def test_truncated(self):
        """Test fewer than 8 bytes fails without consuming anything."""
        cursor = ByteCursor(bytes(7))
        with pytest.raises(TruncatedError):
            Timestamp.parse_timestamp(cursor)
        assert cursor.position == 0

    def test_duration(self):
        assert Timestamp(milliseconds=1500).duration == timedelta(seconds=1.5)

    def test_from_code(self):
        assert TimestampSynch.from_code(1) == TimestampSynch.Skipped
        assert TimestampSynch.from_code(3) == 3
        assert TimestampOrigin.from_code(0) == TimestampOrigin.Reset
        assert TimestampOrigin.from_code(7) == 7
