# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse change namespace (0x6), format NVM start (0x7) and format NVM completion (0x8) events."""

import struct
from dataclasses import dataclass
from typing import Tuple

from ..bits import extract_bits
from ..util import require_payload

CHANGE_NAMESPACE_SIZE = 56
FORMAT_NVM_SIZE = 12


@dataclass
class ChangeNamespaceInfo:
    """Namespace created or deleted through namespace management."""
    ns_mgmt_cdw10: int = 0
    nsze: int = 0  # namespace size, logical blocks
    ncap: int = 0  # namespace capacity, logical blocks
    flbas: int = 0
    dps: int = 0
    nmic: int = 0
    ana_group_id: int = 0
    nvm_set_id: int = 0
    nsid: int = 0

    @property
    def select(self) -> int:
        """Namespace management select field: 0 create, 1 delete."""
        return extract_bits(self.ns_mgmt_cdw10, 0, 4, 32)

    @staticmethod
    def parse_change_namespace(data: bytes, revision: int, length: int) -> Tuple[bytes, 'ChangeNamespaceInfo']:
        """Parse the change namespace event data.

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, ChangeNamespaceInfo)
        """
        require_payload(data, CHANGE_NAMESPACE_SIZE, "Change namespace")
        info = ChangeNamespaceInfo()
        offset = 0

        info.ns_mgmt_cdw10 = struct.unpack_from('<I', data, offset)[0]
        offset += 4
        offset += 4  # reserved
        info.nsze = struct.unpack_from('<Q', data, offset)[0]
        offset += 8
        offset += 8  # reserved
        info.ncap = struct.unpack_from('<Q', data, offset)[0]
        offset += 8
        offset += 8  # reserved
        info.flbas, info.dps, info.nmic = struct.unpack_from('<BBB', data, offset)
        offset += 3
        offset += 1  # reserved
        info.ana_group_id = struct.unpack_from('<I', data, offset)[0]
        offset += 4
        info.nvm_set_id = struct.unpack_from('<H', data, offset)[0]
        offset += 2
        offset += 2  # reserved
        info.nsid = struct.unpack_from('<I', data, offset)[0]
        offset += 4

        return (data[offset:], info)


@dataclass
class FormatNvmStartInfo:
    """Format NVM command started."""
    nsid: int = 0
    fna: int = 0  # format NVM attributes
    format_nvm_cdw10: int = 0

    @property
    def lba_format(self) -> int:
        return extract_bits(self.format_nvm_cdw10, 0, 4, 32)

    @property
    def secure_erase_settings(self) -> int:
        return extract_bits(self.format_nvm_cdw10, 9, 3, 32)

    @staticmethod
    def parse_format_nvm_start(data: bytes, revision: int, length: int) -> Tuple[bytes, 'FormatNvmStartInfo']:
        """Parse the format NVM start event data.

        Layout:
            03:00 - namespace identifier
            04    - format NVM attributes
            07:05 - reserved
            11:08 - format NVM command dword 10
        """
        require_payload(data, FORMAT_NVM_SIZE, "Format NVM start")
        info = FormatNvmStartInfo()
        info.nsid = struct.unpack_from('<I', data, 0)[0]
        info.fna = data[4]
        info.format_nvm_cdw10 = struct.unpack_from('<I', data, 8)[0]
        return (data[FORMAT_NVM_SIZE:], info)


@dataclass
class FormatNvmCompleteInfo:
    """Format NVM command completed."""
    nsid: int = 0
    smallest_fpi: int = 0  # smallest format progress indicator
    format_nvm_status: int = 0
    completion_info: int = 0
    status_field: int = 0

    @staticmethod
    def parse_format_nvm_complete(data: bytes, revision: int, length: int) -> Tuple[bytes, 'FormatNvmCompleteInfo']:
        """Parse the format NVM completion event data.

        Layout:
            03:00 - namespace identifier
            04    - smallest format progress indicator
            05    - format NVM status
            07:06 - completion information
            11:08 - status field
        """
        require_payload(data, FORMAT_NVM_SIZE, "Format NVM completion")
        info = FormatNvmCompleteInfo()
        info.nsid = struct.unpack_from('<I', data, 0)[0]
        info.smallest_fpi = data[4]
        info.format_nvm_status = data[5]
        info.completion_info = struct.unpack_from('<H', data, 6)[0]
        info.status_field = struct.unpack_from('<I', data, 8)[0]
        return (data[FORMAT_NVM_SIZE:], info)
