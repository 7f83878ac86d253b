# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Unit tests for the byte cursor."""

import pytest

from nvme_pel.cursor import ByteCursor
from nvme_pel.error import PelError, TruncatedError


class TestByteCursor:
    """Test ByteCursor reads."""

    def test_take_advances(self):
        cursor = ByteCursor(b"\x01\x02\x03\x04")
        assert cursor.take(3) == b"\x01\x02\x03"
        assert cursor.position == 3
        assert cursor.remaining == 1

    def test_take_zero(self):
        cursor = ByteCursor(b"")
        assert cursor.take(0) == b""
        assert cursor.position == 0

    @pytest.mark.parametrize("method,data,expected", [
        ("take_u8", b"\xfe", 0xfe),
        ("take_u16", b"\x34\x12", 0x1234),
        ("take_u32", b"\x78\x56\x34\x12", 0x12345678),
        ("take_u64", bytes(range(1, 9)), 0x0807060504030201),
        ("take_u128", bytes(range(16)), int.from_bytes(bytes(range(16)), 'little')),
    ])
    def test_little_endian_integers(self, method: str, data: bytes, expected: int):
        """Test fixed-width integers are read little-endian."""
        cursor = ByteCursor(data)
        assert getattr(cursor, method)() == expected
        assert cursor.remaining == 0

    def test_take_uint_zero_extends(self):
        cursor = ByteCursor(bytes([0, 0x0a, 0x0b, 0x0c, 0x0d, 0x0e]))
        assert cursor.take_uint(6) == 0x0e0d0c0b0a00

    def test_truncated_take(self):
        """Test reading past the end raises TruncatedError and keeps the position."""
        cursor = ByteCursor(b"\x01\x02\x03")
        cursor.take(1)
        with pytest.raises(TruncatedError) as exc_info:
            cursor.take_u32("power cycle count")

        err = exc_info.value
        assert err.field == "power cycle count"
        assert err.offset == 1
        assert err.needed == 4
        assert err.available == 2
        assert "power cycle count" in str(err)
        assert "0x1" in str(err)
        assert cursor.position == 1

    def test_truncated_is_pel_error(self):
        with pytest.raises(PelError):
            ByteCursor(b"").take_u8()

    def test_skip(self):
        cursor = ByteCursor(bytes(8))
        cursor.skip(6)
        assert cursor.position == 6
        with pytest.raises(TruncatedError):
            cursor.skip(3)

    def test_seek(self):
        cursor = ByteCursor(bytes(8))
        cursor.seek(8)
        assert cursor.remaining == 0
        cursor.seek(2)
        assert cursor.position == 2
        with pytest.raises(TruncatedError):
            cursor.seek(9)
        with pytest.raises(ValueError):
            cursor.seek(-1)

    def test_copies_input(self):
        """Test the cursor keeps its own copy of mutable input."""
        source = bytearray(b"\x01\x02")
        cursor = ByteCursor(source)
        source[0] = 0xff
        assert cursor.take_u8() == 0x01
        assert isinstance(cursor.data, bytes)

    def test_starting_position(self):
        cursor = ByteCursor(b"\x00\x01\x02", 2)
        assert cursor.take_u8() == 2
        with pytest.raises(ValueError):
            ByteCursor(b"\x00", 5)
