# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse the 8-byte controller timestamp used by log and event headers."""

import logging
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Union

from .bits import extract_bits
from .cursor import ByteCursor

logger = logging.getLogger(__name__)

TIMESTAMP_SIZE = 8
MILLISECONDS_SIZE = 6


class TimestampSynch(Enum):
    """Whether the controller timestamp ran continuously since it was last set."""
    Continuous = 0
    Skipped = 1

    @staticmethod
    def from_code(code: int) -> Union['TimestampSynch', int]:
        """Return the synch value for code, or the raw code if not recognized."""
        try:
            return TimestampSynch(code)
        except ValueError:
            return code


class TimestampOrigin(Enum):
    """How the controller timestamp was last initialized."""
    Reset = 0
    SetFeature = 1

    @staticmethod
    def from_code(code: int) -> Union['TimestampOrigin', int]:
        """Return the origin value for code, or the raw code if not recognized."""
        try:
            return TimestampOrigin(code)
        except ValueError:
            return code


@dataclass
class Timestamp:
    """Controller timestamp.

    synch and origin hold a raw int when the attribute bits carry a value newer
    revisions may define.
    """
    milliseconds: int = 0  # 48 bits
    synch: Union[TimestampSynch, int] = TimestampSynch.Continuous
    origin: Union[TimestampOrigin, int] = TimestampOrigin.Reset

    @property
    def duration(self) -> timedelta:
        return timedelta(milliseconds=self.milliseconds)

    @staticmethod
    def parse_milliseconds(cursor: ByteCursor) -> int:
        """Read the 48-bit little-endian millisecond counter."""
        return cursor.take_uint(MILLISECONDS_SIZE, "timestamp milliseconds")

    @staticmethod
    def parse_timestamp(cursor: ByteCursor) -> 'Timestamp':
        """Parse a timestamp and consume 8 bytes.

        Layout:
            05:00 - milliseconds since the timestamp origin
            06    - attributes: bits 07:04 reserved, bits 03:01 origin, bit 00 synch
            07    - reserved

        Args:
            cursor: Cursor positioned at the timestamp

        Returns:
            Timestamp
        """
        cursor.require(TIMESTAMP_SIZE, "timestamp")
        milliseconds = Timestamp.parse_milliseconds(cursor)
        attributes = cursor.take_u8("timestamp attributes")
        cursor.skip(1, "timestamp reserved")

        origin_code = extract_bits(attributes, 1, 3)
        synch_code = extract_bits(attributes, 0, 1)

        timestamp = Timestamp(
            milliseconds=milliseconds,
            synch=TimestampSynch.from_code(synch_code),
            origin=TimestampOrigin.from_code(origin_code),
        )
        if isinstance(timestamp.origin, int):
            logger.debug(f"[nvme-pel] Unrecognized timestamp origin: {origin_code}")
        return timestamp
