# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Supported events bitmap from the log header."""

from dataclasses import dataclass
from typing import List

from .cursor import ByteCursor

BITMAP_SIZE = 32


@dataclass
class SupportedEventsBitmap:
    """256-bit set with one bit per event type tag."""
    raw: bytes = bytes(BITMAP_SIZE)

    def __post_init__(self):
        if len(self.raw) != BITMAP_SIZE:
            raise ValueError(f"Supported events bitmap must be {BITMAP_SIZE} bytes, got {len(self.raw)}")
        self.raw = bytes(self.raw)

    @staticmethod
    def parse_bitmap(cursor: ByteCursor) -> 'SupportedEventsBitmap':
        return SupportedEventsBitmap(cursor.take(BITMAP_SIZE, "supported events bitmap"))

    def is_supported(self, tag: int) -> bool:
        """Return True if the log may contain events with this tag.

        Tag n is bit n % 8 of byte n // 8.
        """
        tag = int(tag)
        if not 0 <= tag <= 0xff:
            raise ValueError(f"Event type tag out of range: {tag}")
        return (self.raw[tag // 8] >> (tag % 8)) & 0x1 == 1

    def supported_tags(self) -> List[int]:
        return [tag for tag in range(BITMAP_SIZE * 8) if self.is_supported(tag)]

    def __contains__(self, tag) -> bool:
        return self.is_supported(tag)
