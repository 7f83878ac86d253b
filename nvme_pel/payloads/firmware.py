# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse firmware commit (0x2) and power-on or reset (0x4) events."""

import logging
import struct
from dataclasses import dataclass, field
from typing import List, Tuple

from ..cursor import ByteCursor
from ..timestamp import Timestamp
from ..util import firmware_revision, require_payload

logger = logging.getLogger(__name__)

FIRMWARE_REVISION_SIZE = 8
FW_COMMIT_SIZE = 22
RESET_DESCRIPTOR_SIZE = 36


@dataclass
class FwCommitInfo:
    """Firmware commit command processed by the controller."""
    old_fw_rev: str = ""
    new_fw_rev: str = ""
    fw_commit_action: int = 0
    fw_slot: int = 0
    status_code_type: int = 0
    status_code: int = 0
    vendor_status_code: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status_code_type == 0 and self.status_code == 0

    @staticmethod
    def parse_fw_commit(data: bytes, revision: int, length: int) -> Tuple[bytes, 'FwCommitInfo']:
        """Parse the firmware commit event data.

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, FwCommitInfo)
        """
        require_payload(data, FW_COMMIT_SIZE, "Firmware commit")
        info = FwCommitInfo()
        offset = 0

        info.old_fw_rev = firmware_revision(data[offset:offset + FIRMWARE_REVISION_SIZE])
        offset += FIRMWARE_REVISION_SIZE
        info.new_fw_rev = firmware_revision(data[offset:offset + FIRMWARE_REVISION_SIZE])
        offset += FIRMWARE_REVISION_SIZE
        info.fw_commit_action = struct.unpack_from('<B', data, offset)[0]
        offset += 1
        info.fw_slot = struct.unpack_from('<B', data, offset)[0]
        offset += 1
        info.status_code_type = struct.unpack_from('<B', data, offset)[0]
        offset += 1
        info.status_code = struct.unpack_from('<B', data, offset)[0]
        offset += 1
        info.vendor_status_code = struct.unpack_from('<H', data, offset)[0]
        offset += 2

        return (data[offset:], info)


@dataclass
class ControllerResetInfo:
    """Reset information for one controller."""
    controller_id: int = 0
    fw_activation: int = 0
    operation_in_progress: int = 0
    controller_power_cycle: int = 0
    power_on_ms: int = 0
    controller_timestamp: Timestamp = field(default_factory=Timestamp)

    @staticmethod
    def parse_reset_descriptor(data: bytes) -> Tuple[bytes, 'ControllerResetInfo']:
        """Parse one 36 byte reset information descriptor."""
        info = ControllerResetInfo()
        offset = 0

        info.controller_id = struct.unpack_from('<H', data, offset)[0]
        offset += 2
        info.fw_activation = struct.unpack_from('<B', data, offset)[0]
        offset += 1
        info.operation_in_progress = struct.unpack_from('<B', data, offset)[0]
        offset += 1
        # 15:04 - reserved
        offset += 12
        info.controller_power_cycle = struct.unpack_from('<I', data, offset)[0]
        offset += 4
        info.power_on_ms = struct.unpack_from('<Q', data, offset)[0]
        offset += 8
        info.controller_timestamp = Timestamp.parse_timestamp(ByteCursor(data[offset:offset + 8]))
        offset += 8

        return (data[offset:], info)


@dataclass
class PowerOnResetInfo:
    """Power-on or reset event: firmware revision plus one entry per controller."""
    fw_rev: str = ""
    controllers: List[ControllerResetInfo] = field(default_factory=list)

    @staticmethod
    def parse_power_on_reset(data: bytes, revision: int, length: int) -> Tuple[bytes, 'PowerOnResetInfo']:
        """Parse the power-on or reset event data.

        Any trailing bytes too short for a full descriptor are left unconsumed.

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, PowerOnResetInfo)
        """
        require_payload(data, FIRMWARE_REVISION_SIZE, "Power-on or reset")
        info = PowerOnResetInfo(fw_rev=firmware_revision(data[:FIRMWARE_REVISION_SIZE]))
        remaining = data[FIRMWARE_REVISION_SIZE:]

        while len(remaining) >= RESET_DESCRIPTOR_SIZE:
            remaining, controller = ControllerResetInfo.parse_reset_descriptor(remaining)
            info.controllers.append(controller)

        if remaining:
            logger.debug(f"[nvme-pel] {len(remaining)} trailing bytes after reset descriptors")
        return (remaining, info)
