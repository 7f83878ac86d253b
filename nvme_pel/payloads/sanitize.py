# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse sanitize start (0x9) and sanitize completion (0xa) events."""

import struct
from dataclasses import dataclass
from typing import Tuple

from ..bits import extract_bits
from ..util import require_payload


@dataclass
class SanitizeStartInfo:
    """Sanitize operation started."""
    sanicap: int = 0
    sanitize_cdw10: int = 0
    sanitize_cdw11: int = 0

    @property
    def action(self) -> int:
        """Sanitize action: 1 exit failure mode, 2 block erase, 3 overwrite, 4 crypto erase."""
        return extract_bits(self.sanitize_cdw10, 0, 3, 32)

    @staticmethod
    def parse_sanitize_start(data: bytes, revision: int, length: int) -> Tuple[bytes, 'SanitizeStartInfo']:
        """Parse the sanitize start event data.

        Layout:
            03:00 - sanitize capabilities (SANICAP)
            07:04 - sanitize command dword 10
            11:08 - sanitize command dword 11
        """
        require_payload(data, 12, "Sanitize start")
        info = SanitizeStartInfo()
        info.sanicap, info.sanitize_cdw10, info.sanitize_cdw11 = struct.unpack_from('<III', data, 0)
        return (data[12:], info)


@dataclass
class SanitizeCompleteInfo:
    """Sanitize operation completed."""
    sanitize_progress: int = 0
    sanitize_status: int = 0
    completion_info: int = 0

    @property
    def most_recent_status(self) -> int:
        """Status of the most recent sanitize operation (SSTAT bits 2:0)."""
        return extract_bits(self.sanitize_status, 0, 3, 16)

    @staticmethod
    def parse_sanitize_complete(data: bytes, revision: int, length: int) -> Tuple[bytes, 'SanitizeCompleteInfo']:
        """Parse the sanitize completion event data.

        Layout:
            01:00 - sanitize progress (SPROG)
            03:02 - sanitize status (SSTAT)
            05:04 - completion information
            07:06 - reserved
        """
        require_payload(data, 8, "Sanitize completion")
        info = SanitizeCompleteInfo()
        info.sanitize_progress, info.sanitize_status, info.completion_info = struct.unpack_from('<HHH', data, 0)
        return (data[8:], info)
