# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse telemetry log created (0xc) events."""

import struct
from dataclasses import dataclass
from typing import Tuple

from ..util import require_payload

TELEMETRY_HEADER_SIZE = 512
TELEMETRY_FIELDS_SIZE = 14


@dataclass
class TelemetryLogCreatedInfo:
    """Telemetry host-initiated log created. Holds the telemetry log header."""
    log_id: int = 0
    ieee_oui: int = 0
    data_area_1_last_block: int = 0
    data_area_2_last_block: int = 0
    data_area_3_last_block: int = 0
    telemetry_header: bytes = b''

    @staticmethod
    def parse_telemetry_log_created(
        data: bytes, revision: int, length: int
    ) -> Tuple[bytes, 'TelemetryLogCreatedInfo']:
        """Parse the telemetry log created event data.

        Layout of the leading telemetry log header fields:
            00    - log identifier
            04:01 - reserved
            07:05 - IEEE OUI identifier
            09:08 - data area 1 last block
            11:10 - data area 2 last block
            13:12 - data area 3 last block
        """
        require_payload(data, TELEMETRY_FIELDS_SIZE, "Telemetry log created")
        info = TelemetryLogCreatedInfo()
        info.log_id = data[0]
        info.ieee_oui = int.from_bytes(data[5:8], 'little')
        (
            info.data_area_1_last_block,
            info.data_area_2_last_block,
            info.data_area_3_last_block,
        ) = struct.unpack_from('<HHH', data, 8)

        size = min(len(data), TELEMETRY_HEADER_SIZE)
        info.telemetry_header = bytes(data[:size])
        return (data[size:], info)
