# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""
NVMe Persistent Event Log Parser

A Python library for decoding NVMe Persistent Event Log (PEL) captures.

Example usage:

    from nvme_pel import parse_log_file, EventType

    pel = parse_log_file("/path/to/pel.bin")
    print(f"{pel.header.model_num} {pel.header.serial_num}")
    for event in pel.events:
        print(f"{event.header.timestamp.duration} {event.event_type!r} {event.payload}")

    # Custom payload decoders
    from nvme_pel import default_registry, parse_pel

    registry = default_registry()
    registry.register(EventType.VendorSpecific, my_vendor_decoder)
    pel = parse_pel(data, registry=registry)
"""

__version__ = "0.1.0"

# Core data structures
from .pel import Pel, parse_pel, parse_log_header, iter_events
from .header import LogHeader, ReportingContext, ReportingContextType
from .event_header import EventHeader
from .event import Event, EventType, RawPayload, DecodeWarning, WarningKind
from .timestamp import Timestamp, TimestampOrigin, TimestampSynch
from .bitmap import SupportedEventsBitmap
from .cursor import ByteCursor

# Payload dispatch
from .registry import PayloadRegistry, default_registry, decode_raw_payload
from .dispatch import decode_event

# High-level API
from .parser import parse_log, parse_log_file

# Exceptions
from .error import (
    PelError,
    TruncatedError,
    PayloadDecodeError,
    PathError,
)

__all__ = [
    # Version
    '__version__',

    # Core data structures
    'Pel',
    'parse_pel',
    'parse_log_header',
    'iter_events',
    'LogHeader',
    'ReportingContext',
    'ReportingContextType',
    'EventHeader',
    'Event',
    'EventType',
    'RawPayload',
    'DecodeWarning',
    'WarningKind',
    'Timestamp',
    'TimestampOrigin',
    'TimestampSynch',
    'SupportedEventsBitmap',
    'ByteCursor',

    # Payload dispatch
    'PayloadRegistry',
    'default_registry',
    'decode_raw_payload',
    'decode_event',

    # High-level API
    'parse_log',
    'parse_log_file',

    # Exceptions
    'PelError',
    'TruncatedError',
    'PayloadDecodeError',
    'PathError',
]
