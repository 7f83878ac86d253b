# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Read-only byte cursor used by every decoder in the package."""

import struct

from .error import TruncatedError


class ByteCursor:
    """Position over an immutable byte buffer.

    Every read consumes bytes and advances the position. A read that would run
    past the end of the buffer raises TruncatedError and leaves the position
    where it was.
    """

    def __init__(self, data: bytes, position: int = 0):
        """Initialize the cursor.

        Args:
            data: Raw bytes to decode (copied if not already bytes)
            position: Starting offset into data
        """
        self._data = bytes(data)
        if position < 0 or position > len(self._data):
            raise ValueError(f"Cursor position {position} outside buffer of {len(self._data)} bytes")
        self._position = position

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    def __len__(self) -> int:
        return len(self._data)

    def require(self, size: int, field: str = "data") -> None:
        """Raise TruncatedError unless size bytes remain."""
        if size < 0:
            raise ValueError(f"Negative read size {size} for {field}")
        if self.remaining < size:
            raise TruncatedError(field, self._position, size, self.remaining)

    def take(self, size: int, field: str = "data") -> bytes:
        """Return the next size bytes and advance."""
        self.require(size, field)
        start = self._position
        self._position += size
        return self._data[start:self._position]

    def skip(self, size: int, field: str = "reserved") -> None:
        """Advance past size bytes without returning them."""
        self.require(size, field)
        self._position += size

    def seek(self, position: int, field: str = "data") -> None:
        """Move to an absolute offset. Seeking to the end of the buffer is allowed."""
        if position < 0:
            raise ValueError(f"Negative cursor position {position} for {field}")
        if position > len(self._data):
            raise TruncatedError(field, self._position, position - self._position, self.remaining)
        self._position = position

    def _unpack(self, fmt: str, size: int, field: str) -> int:
        self.require(size, field)
        value = struct.unpack_from(fmt, self._data, self._position)[0]
        self._position += size
        return value

    def take_u8(self, field: str = "u8") -> int:
        return self._unpack('<B', 1, field)

    def take_u16(self, field: str = "u16") -> int:
        return self._unpack('<H', 2, field)

    def take_u32(self, field: str = "u32") -> int:
        return self._unpack('<I', 4, field)

    def take_u64(self, field: str = "u64") -> int:
        return self._unpack('<Q', 8, field)

    def take_u128(self, field: str = "u128") -> int:
        # struct has no 128-bit format
        return int.from_bytes(self.take(16, field), 'little')

    def take_uint(self, size: int, field: str = "uint") -> int:
        """Read an arbitrary-width little-endian unsigned integer, zero-extended."""
        return int.from_bytes(self.take(size, field), 'little')
