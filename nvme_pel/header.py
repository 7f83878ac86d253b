# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse the Persistent Event Log header."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .bitmap import SupportedEventsBitmap
from .bits import extract_bits, bit_is_set
from .cursor import ByteCursor
from .timestamp import Timestamp
from .util import extract_string_size

logger = logging.getLogger(__name__)

LOG_HEADER_SIZE = 512
EXTENDED_HEADER_SIZE = 6
EXTENDED_HEADER_REVISION = 2


class ReportingContextType(Enum):
    """Port type that reported the log."""
    DoesNotExist = 0
    NvmPort = 1
    MiPort = 2


@dataclass
class ReportingContext:
    """Reporting context information from a revision 2 log header."""
    kind: Union[ReportingContextType, int] = ReportingContextType.DoesNotExist
    port: int = 0

    @staticmethod
    def from_raw(value: int) -> 'ReportingContext':
        """Decode the 32-bit reporting context information field.

        Bits:
            15:00 - port identifier
            17:16 - port identifier type
            18    - reporting context exists
        """
        port = extract_bits(value, 0, 16, 32)
        port_type = extract_bits(value, 16, 2, 32)

        if not bit_is_set(value, 18, 32):
            return ReportingContext(kind=ReportingContextType.DoesNotExist, port=0)

        try:
            kind = ReportingContextType(port_type)
        except ValueError:
            logger.debug(f"[nvme-pel] Unrecognized reporting context port type: {port_type}")
            kind = port_type
        if kind == ReportingContextType.DoesNotExist:
            port = 0
        return ReportingContext(kind=kind, port=port)


@dataclass
class LogHeader:
    """Persistent Event Log header."""
    log_id: int = 0
    num_events: int = 0
    log_len: int = 0
    log_rev: int = 0
    header_len: int = 0
    timestamp: Timestamp = field(default_factory=Timestamp)
    power_on_hours: int = 0
    power_cycle_count: int = 0
    vid: int = 0
    ssvid: int = 0
    serial_num: str = ""
    model_num: str = ""
    name: str = ""  # NVM subsystem NVMe qualified name
    supp_events: SupportedEventsBitmap = field(default_factory=SupportedEventsBitmap)
    generation_number: Optional[int] = None
    reporting_context: Optional[ReportingContext] = None
    size: int = LOG_HEADER_SIZE  # bytes occupied in the log

    @property
    def is_extended(self) -> bool:
        return self.log_rev >= EXTENDED_HEADER_REVISION

    @staticmethod
    def parse_log_header(cursor: ByteCursor) -> 'LogHeader':
        """Parse the Persistent Event Log header.

        Args:
            cursor: Cursor positioned at the start of the log

        Returns:
            LogHeader
        """
        start = cursor.position
        cursor.require(LOG_HEADER_SIZE, "log header")
        header = LogHeader()

        # 00 - log identifier
        # 03:01 - reserved
        header.log_id = cursor.take_u8("log identifier")
        cursor.skip(3, "log header reserved")
        # 07:04 - total number of events (TNEV)
        header.num_events = cursor.take_u32("total number of events")
        # 15:08 - total log length (TLL)
        header.log_len = cursor.take_u64("total log length")
        # 16 - log revision
        # 17 - reserved
        header.log_rev = cursor.take_u8("log revision")
        cursor.skip(1, "log header reserved")
        # 19:18 - log header length
        header.header_len = cursor.take_u16("log header length")
        # 27:20 - timestamp
        header.timestamp = Timestamp.parse_timestamp(cursor)
        # 43:28 - power on hours (POH)
        header.power_on_hours = cursor.take_u128("power on hours")
        # 51:44 - power cycle count
        header.power_cycle_count = cursor.take_u64("power cycle count")
        # 53:52 - PCI vendor id (VID)
        header.vid = cursor.take_u16("PCI vendor id")
        # 55:54 - PCI subsystem vendor id (SSVID)
        header.ssvid = cursor.take_u16("PCI subsystem vendor id")
        # 75:56 - serial number (SN)
        header.serial_num = extract_string_size(cursor, 20, "serial number")
        # 115:76 - model number (MN)
        header.model_num = extract_string_size(cursor, 40, "model number")
        # 371:116 - NVM subsystem NVMe qualified name (SUBNQN)
        # 479:372 - reserved
        header.name = extract_string_size(cursor, 256, "NVM subsystem NVMe qualified name")
        cursor.skip(108, "log header reserved")
        # 511:480 - supported events bitmap
        header.supp_events = SupportedEventsBitmap.parse_bitmap(cursor)

        if header.is_extended:
            logger.debug(f"[nvme-pel] Log revision {header.log_rev}, parsing extended header")
            cursor.require(EXTENDED_HEADER_SIZE, "extended log header")
            # 513:512 - generation number
            header.generation_number = cursor.take_u16("generation number")
            # 517:514 - reporting context information
            header.reporting_context = ReportingContext.from_raw(
                cursor.take_u32("reporting context information")
            )

        header.size = cursor.position - start
        logger.debug(
            f"[nvme-pel] Log header: {header.num_events} events, log length {header.log_len}, "
            f"model {header.model_num!r}, serial {header.serial_num!r}"
        )
        return header
