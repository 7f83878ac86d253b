# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Assemble a complete Persistent Event Log from its header and event records."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .cursor import ByteCursor
from .dispatch import decode_event
from .event import DecodeWarning, Event, EventType, WarningKind
from .header import LogHeader
from .registry import PayloadRegistry, default_registry

logger = logging.getLogger(__name__)


@dataclass
class Pel:
    """Decoded Persistent Event Log. Events are in on-wire (chronological) order."""
    header: LogHeader = field(default_factory=LogHeader)
    events: List[Event] = field(default_factory=list)

    @property
    def warnings(self) -> List[DecodeWarning]:
        return [warning for event in self.events for warning in event.warnings]

    def events_of_type(self, event_type: EventType) -> List[Event]:
        return [event for event in self.events if event.tag == int(event_type)]


def parse_log_header(data: bytes) -> LogHeader:
    """Decode only the log header."""
    return LogHeader.parse_log_header(ByteCursor(data))


def iter_events(
    data: bytes,
    registry: Optional[PayloadRegistry] = None,
    headers_only: bool = False,
) -> Iterator[Event]:
    """Yield the events of a Persistent Event Log one at a time.

    Stops after the header's total number of events. Bytes after the last
    event are ignored.

    Args:
        data: Raw bytes of the complete log
        registry: Payload decoders to use, default_registry() if None
        headers_only: If True, keep every payload as raw bytes

    Raises:
        TruncatedError: If the header or an event record runs past the end of data
    """
    if registry is None:
        registry = default_registry()

    cursor = ByteCursor(data)
    header = LogHeader.parse_log_header(cursor)
    yield from _iter_events(cursor, header, registry, headers_only)


def _iter_events(
    cursor: ByteCursor,
    header: LogHeader,
    registry: PayloadRegistry,
    headers_only: bool,
) -> Iterator[Event]:
    for index in range(header.num_events):
        event = decode_event(cursor, registry, headers_only)

        if cursor.position > header.log_len:
            message = (
                f"Event {index} ends at offset {cursor.position:#x}, past the total "
                f"log length {header.log_len:#x}"
            )
            logger.warning(f"[nvme-pel] {message}")
            event.warnings.append(DecodeWarning(WarningKind.LogLengthExceeded, event.offset, message))

        yield event

    if cursor.remaining:
        logger.debug(f"[nvme-pel] Ignoring {cursor.remaining} bytes after the last event")


def parse_pel(
    data: bytes,
    registry: Optional[PayloadRegistry] = None,
    headers_only: bool = False,
) -> Pel:
    """Parse a complete Persistent Event Log.

    Args:
        data: Raw bytes of the complete log
        registry: Payload decoders to use, default_registry() if None
        headers_only: If True, keep every payload as raw bytes

    Returns:
        Pel

    Raises:
        TruncatedError: If the header or an event record runs past the end of data
    """
    if registry is None:
        registry = default_registry()

    cursor = ByteCursor(data)
    header = LogHeader.parse_log_header(cursor)
    events = list(_iter_events(cursor, header, registry, headers_only))

    logger.info(f"[nvme-pel] Parsed {len(events)} events from {cursor.position} bytes")
    return Pel(header=header, events=events)
