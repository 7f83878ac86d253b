# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse set feature (0xb) events."""

import logging
import struct
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..bits import bit_is_set, extract_bits
from ..error import PayloadDecodeError
from ..util import require_payload

logger = logging.getLogger(__name__)


@dataclass
class SetFeatureInfo:
    """Set Features command logged by the controller."""
    layout: int = 0
    command_dwords: List[int] = field(default_factory=list)  # starting at CDW10
    completion_dw0: Optional[int] = None
    memory_buffer: bytes = b''

    @property
    def feature_id(self) -> Optional[int]:
        """Feature identifier from CDW10 bits 7:0, if CDW10 was logged."""
        if not self.command_dwords:
            return None
        return extract_bits(self.command_dwords[0], 0, 8, 32)

    @property
    def save(self) -> Optional[bool]:
        if not self.command_dwords:
            return None
        return bit_is_set(self.command_dwords[0], 31, 32)

    @staticmethod
    def parse_set_feature(data: bytes, revision: int, length: int) -> Tuple[bytes, 'SetFeatureInfo']:
        """Parse the set feature event data.

        The 4 byte layout field describes what follows:
            bits 02:00 - number of command dwords logged, starting at CDW10
            bit  03    - completion queue entry dword 0 logged
            bits 31:16 - memory buffer size in bytes

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, SetFeatureInfo)
        """
        require_payload(data, 4, "Set feature")
        info = SetFeatureInfo()
        offset = 0

        info.layout = struct.unpack_from('<I', data, offset)[0]
        offset += 4

        dword_count = extract_bits(info.layout, 0, 3, 32)
        has_completion = bit_is_set(info.layout, 3, 32)
        buffer_size = extract_bits(info.layout, 16, 16, 32)

        needed = offset + dword_count * 4 + (4 if has_completion else 0) + buffer_size
        if needed > len(data):
            raise PayloadDecodeError(
                f"Set feature layout {info.layout:#x} needs {needed} bytes, got {len(data)}"
            )

        info.command_dwords = list(struct.unpack_from(f'<{dword_count}I', data, offset))
        offset += dword_count * 4

        if has_completion:
            info.completion_dw0 = struct.unpack_from('<I', data, offset)[0]
            offset += 4

        info.memory_buffer = bytes(data[offset:offset + buffer_size])
        offset += buffer_size

        logger.debug(f"[nvme-pel] Set feature event for feature {info.feature_id}")
        return (data[offset:], info)
