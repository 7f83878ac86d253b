# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Built-in payload decoders for the standard persistent event types.

Vendor specific (0xde) and TCG defined (0xdf) events are not registered and
are always kept as raw bytes.
"""

from typing import Dict

from ..event import EventType
from ..registry import PayloadDecoder
from .firmware import ControllerResetInfo, FwCommitInfo, PowerOnResetInfo
from .health import SmartHealthInfo, ThermalExcursionInfo
from .hw_error import HwErrorCode, NvmHwErrorInfo
from .namespace import ChangeNamespaceInfo, FormatNvmCompleteInfo, FormatNvmStartInfo
from .sanitize import SanitizeCompleteInfo, SanitizeStartInfo
from .set_feature import SetFeatureInfo
from .telemetry import TelemetryLogCreatedInfo
from .timestamp_change import TimestampChangeInfo


def builtin_decoders() -> Dict[int, PayloadDecoder]:
    """Return a new tag -> decoder mapping for the built-in payload decoders."""
    return {
        EventType.SmartHealth: SmartHealthInfo.parse_smart_health,
        EventType.FwCommit: FwCommitInfo.parse_fw_commit,
        EventType.TimestampChange: TimestampChangeInfo.parse_timestamp_change,
        EventType.PowerOnReset: PowerOnResetInfo.parse_power_on_reset,
        EventType.NvmHwError: NvmHwErrorInfo.parse_nvm_hw_error,
        EventType.ChangeNamespace: ChangeNamespaceInfo.parse_change_namespace,
        EventType.FormatNvmStart: FormatNvmStartInfo.parse_format_nvm_start,
        EventType.FormatNvmComplete: FormatNvmCompleteInfo.parse_format_nvm_complete,
        EventType.SanitizeStart: SanitizeStartInfo.parse_sanitize_start,
        EventType.SanitizeComplete: SanitizeCompleteInfo.parse_sanitize_complete,
        EventType.SetFeature: SetFeatureInfo.parse_set_feature,
        EventType.TelemetryLogCreated: TelemetryLogCreatedInfo.parse_telemetry_log_created,
        EventType.ThermalExcursion: ThermalExcursionInfo.parse_thermal_excursion,
    }


__all__ = [
    'builtin_decoders',
    'ChangeNamespaceInfo',
    'ControllerResetInfo',
    'FormatNvmCompleteInfo',
    'FormatNvmStartInfo',
    'FwCommitInfo',
    'HwErrorCode',
    'NvmHwErrorInfo',
    'PowerOnResetInfo',
    'SanitizeCompleteInfo',
    'SanitizeStartInfo',
    'SetFeatureInfo',
    'SmartHealthInfo',
    'TelemetryLogCreatedInfo',
    'ThermalExcursionInfo',
    'TimestampChangeInfo',
]
