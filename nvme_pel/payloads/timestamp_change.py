# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse timestamp change (0x3) events."""

import struct
from dataclasses import dataclass, field
from typing import Tuple

from ..cursor import ByteCursor
from ..timestamp import Timestamp
from ..util import require_payload


@dataclass
class TimestampChangeInfo:
    """Host changed the controller timestamp."""
    previous_timestamp: Timestamp = field(default_factory=Timestamp)
    ms_since_reset: int = 0

    @staticmethod
    def parse_timestamp_change(data: bytes, revision: int, length: int) -> Tuple[bytes, 'TimestampChangeInfo']:
        """Parse the timestamp change event data.

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, TimestampChangeInfo)
        """
        require_payload(data, 16, "Timestamp change")
        info = TimestampChangeInfo()
        info.previous_timestamp = Timestamp.parse_timestamp(ByteCursor(data[:8]))
        info.ms_since_reset = struct.unpack_from('<Q', data, 8)[0]
        return (data[16:], info)
