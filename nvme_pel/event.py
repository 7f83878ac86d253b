# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Event types and the decoded event record."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, List, Tuple, Union, TYPE_CHECKING

from .util import encode_standard

if TYPE_CHECKING:
    from .event_header import EventHeader


class EventType(IntEnum):
    """Persistent event type tags."""
    SmartHealth = 0x01
    FwCommit = 0x02
    TimestampChange = 0x03
    PowerOnReset = 0x04
    NvmHwError = 0x05
    ChangeNamespace = 0x06
    FormatNvmStart = 0x07
    FormatNvmComplete = 0x08
    SanitizeStart = 0x09
    SanitizeComplete = 0x0a
    SetFeature = 0x0b
    TelemetryLogCreated = 0x0c
    ThermalExcursion = 0x0d
    VendorSpecific = 0xde
    TcgDefined = 0xdf

    @staticmethod
    def from_tag(tag: int) -> Union['EventType', int]:
        """Return the event type for tag, or the raw tag if it is not a known type."""
        try:
            return EventType(tag)
        except ValueError:
            return tag


class WarningKind(Enum):
    """Recoverable anomalies recorded against a single event."""
    PayloadLengthMismatch = "PayloadLengthMismatch"
    PayloadDecodeFailed = "PayloadDecodeFailed"
    EventLengthInvalid = "EventLengthInvalid"
    LogLengthExceeded = "LogLengthExceeded"


@dataclass
class DecodeWarning:
    """A recovered problem found while decoding an event."""
    kind: WarningKind
    offset: int = 0
    message: str = ""


@dataclass
class RawPayload:
    """Payload bytes kept verbatim.

    Used for tags with no registered decoder, vendor specific and TCG defined
    events, and payloads whose decoder failed.
    """
    data: bytes = b''

    @property
    def encoded(self) -> str:
        return encode_standard(self.data)

    @staticmethod
    def parse_raw_payload(data: bytes, revision: int, length: int) -> Tuple[bytes, 'RawPayload']:
        """Fallback payload decoder. Consumes everything it is given."""
        return (b'', RawPayload(data=bytes(data)))


@dataclass
class Event:
    """One decoded event record: header, vendor information and payload."""
    header: 'EventHeader'
    vendor_info: bytes = b''
    payload: Any = field(default_factory=RawPayload)
    warnings: List[DecodeWarning] = field(default_factory=list)

    @property
    def event_type(self) -> Union[EventType, int]:
        return self.header.event_type

    @property
    def tag(self) -> int:
        return self.header.tag

    @property
    def is_unknown(self) -> bool:
        """True when the payload was kept as raw bytes."""
        return isinstance(self.payload, RawPayload)

    @property
    def offset(self) -> int:
        return self.header.offset
