# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse SMART / Health snapshot (0x1) and thermal excursion (0xd) events."""

import logging
import struct
from dataclasses import dataclass, field
from typing import List, Tuple

from ..util import require_payload

logger = logging.getLogger(__name__)

SMART_LOG_SIZE = 512
SMART_FIELDS_SIZE = 232
KELVIN_OFFSET = 273


def _le_u128(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset:offset + 16], 'little')


@dataclass
class SmartHealthInfo:
    """SMART / Health Information log page captured when the event was recorded."""
    critical_warning: int = 0
    composite_temperature: int = 0  # Kelvin
    available_spare: int = 0  # percent
    available_spare_threshold: int = 0  # percent
    percentage_used: int = 0
    endurance_group_critical_warning: int = 0
    data_units_read: int = 0  # thousands of 512 byte units
    data_units_written: int = 0
    host_read_commands: int = 0
    host_write_commands: int = 0
    controller_busy_time: int = 0  # minutes
    power_cycles: int = 0
    power_on_hours: int = 0
    unsafe_shutdowns: int = 0
    media_errors: int = 0
    error_log_entries: int = 0
    warning_temperature_time: int = 0  # minutes
    critical_temperature_time: int = 0  # minutes
    temperature_sensors: List[int] = field(default_factory=list)  # Kelvin, 0 if not implemented
    thermal_mgmt_t1_transitions: int = 0
    thermal_mgmt_t2_transitions: int = 0
    thermal_mgmt_t1_total_time: int = 0  # seconds
    thermal_mgmt_t2_total_time: int = 0

    @property
    def composite_temperature_celsius(self) -> int:
        return self.composite_temperature - KELVIN_OFFSET

    @staticmethod
    def parse_smart_health(data: bytes, revision: int, length: int) -> Tuple[bytes, 'SmartHealthInfo']:
        """Parse the SMART / Health Information snapshot.

        Only the first 232 bytes of the 512 byte log page hold defined fields,
        the rest is reserved and skipped.

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, SmartHealthInfo)
        """
        require_payload(data, SMART_FIELDS_SIZE, "SMART / Health")
        smart = SmartHealthInfo()

        smart.critical_warning = data[0]
        smart.composite_temperature = struct.unpack_from('<H', data, 1)[0]
        smart.available_spare = data[3]
        smart.available_spare_threshold = data[4]
        smart.percentage_used = data[5]
        smart.endurance_group_critical_warning = data[6]
        # 31:7 - reserved

        counters = []
        for offset in range(32, 192, 16):
            counters.append(_le_u128(data, offset))
        (
            smart.data_units_read,
            smart.data_units_written,
            smart.host_read_commands,
            smart.host_write_commands,
            smart.controller_busy_time,
            smart.power_cycles,
            smart.power_on_hours,
            smart.unsafe_shutdowns,
            smart.media_errors,
            smart.error_log_entries,
        ) = counters

        smart.warning_temperature_time, smart.critical_temperature_time = struct.unpack_from('<II', data, 192)
        smart.temperature_sensors = list(struct.unpack_from('<8H', data, 200))
        (
            smart.thermal_mgmt_t1_transitions,
            smart.thermal_mgmt_t2_transitions,
            smart.thermal_mgmt_t1_total_time,
            smart.thermal_mgmt_t2_total_time,
        ) = struct.unpack_from('<IIII', data, 216)

        offset = min(len(data), SMART_LOG_SIZE)
        if offset < SMART_LOG_SIZE:
            logger.debug(f"[nvme-pel] Short SMART / Health snapshot: {len(data)} bytes")
        return (data[offset:], smart)


@dataclass
class ThermalExcursionInfo:
    """Composite temperature crossed or returned from a temperature threshold."""
    over_temperature: int = 0  # degrees over the threshold, 0 when back under
    threshold: int = 0

    @property
    def is_excursion_start(self) -> bool:
        return self.over_temperature != 0

    @staticmethod
    def parse_thermal_excursion(data: bytes, revision: int, length: int) -> Tuple[bytes, 'ThermalExcursionInfo']:
        """Parse the thermal excursion event data.

        Args:
            data: Event data following the vendor specific information
            revision: Event type revision
            length: Declared event data length

        Returns:
            Tuple of (remaining data, ThermalExcursionInfo)
        """
        require_payload(data, 2, "Thermal excursion")
        info = ThermalExcursionInfo(over_temperature=data[0], threshold=data[1])
        return (data[2:], info)
