# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse NVM subsystem hardware error (0x5) events."""

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

from ..util import require_payload


class HwErrorCode(IntEnum):
    """NVM subsystem hardware error event codes."""
    PcieCorrectableError = 0x01
    PcieUncorrectableNonFatalError = 0x02
    PcieUncorrectableFatalError = 0x03
    PcieLinkStatusChange = 0x04
    PcieLinkNotActive = 0x05
    CriticalWarningCondition = 0x06
    EnduranceGroupCriticalWarning = 0x07
    UnsafeShutdown = 0x08
    ControllerFatalStatus = 0x09
    MediaAndDataIntegrityStatus = 0x0a

    @staticmethod
    def from_code(code: int) -> Union['HwErrorCode', int]:
        try:
            return HwErrorCode(code)
        except ValueError:
            return code


@dataclass
class NvmHwErrorInfo:
    """Hardware error with optional code specific information."""
    error_code: Union[HwErrorCode, int] = 0
    additional_info: bytes = b''

    @staticmethod
    def parse_nvm_hw_error(data: bytes, revision: int, length: int) -> Tuple[bytes, 'NvmHwErrorInfo']:
        """Parse the hardware error event data.

        Layout:
            01:00 - hardware error event code
            03:02 - reserved
            rest  - additional hardware error information
        """
        require_payload(data, 4, "NVM subsystem hardware error")
        code = struct.unpack_from('<H', data, 0)[0]
        info = NvmHwErrorInfo(
            error_code=HwErrorCode.from_code(code),
            additional_info=bytes(data[4:]),
        )
        return (b'', info)
