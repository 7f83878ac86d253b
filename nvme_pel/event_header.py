# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Parse the header at the start of each persistent event record."""

import logging
from dataclasses import dataclass, field
from typing import Union

from .cursor import ByteCursor
from .event import EventType
from .timestamp import Timestamp

logger = logging.getLogger(__name__)

EVENT_HEADER_SIZE = 24
# Tag, revision and EHL are not counted by either on-wire length field
LENGTH_BIAS = 3


@dataclass
class EventHeader:
    """Persistent event header with corrected lengths."""
    tag: int = 0
    event_type: Union[EventType, int] = 0
    revision: int = 0
    header_len: int = EVENT_HEADER_SIZE  # total header length (EHL + 3)
    controller_id: int = 0
    timestamp: Timestamp = field(default_factory=Timestamp)
    vendor_info_len: int = 0
    event_len: int = EVENT_HEADER_SIZE  # total event length (EL + EHL + 3)
    offset: int = 0

    @property
    def payload_len(self) -> int:
        """Bytes of event data after the header and vendor specific information."""
        return self.event_len - self.header_len - self.vendor_info_len

    @staticmethod
    def parse_event_header(cursor: ByteCursor) -> 'EventHeader':
        """Parse a persistent event header.

        The tag is kept raw so an unrecognized type never fails here.

        Args:
            cursor: Cursor positioned at the first byte of the event record

        Returns:
            EventHeader
        """
        header = EventHeader(offset=cursor.position)

        # 00 - event type
        header.tag = cursor.take_u8("event type")
        header.event_type = EventType.from_tag(header.tag)
        # 01 - event type revision
        header.revision = cursor.take_u8("event type revision")
        # 02 - event header length (EHL)
        # 03 - reserved
        raw_header_len = cursor.take_u8("event header length")
        cursor.skip(1, "event header reserved")
        # 05:04 - controller identifier
        header.controller_id = cursor.take_u16("controller identifier")
        # 13:06 - event timestamp
        # 19:14 - reserved
        header.timestamp = Timestamp.parse_timestamp(cursor)
        cursor.skip(6, "event header reserved")
        # 21:20 - vendor specific information length (VSIL)
        header.vendor_info_len = cursor.take_u16("vendor specific information length")
        # 23:22 - event length (EL)
        raw_event_len = cursor.take_u16("event length")

        header.header_len = raw_header_len + LENGTH_BIAS
        header.event_len = raw_event_len + raw_header_len + LENGTH_BIAS

        logger.debug(
            f"[nvme-pel] Event header at {header.offset:#x}: type {header.tag:#x}, "
            f"revision {header.revision}, header length {header.header_len}, "
            f"event length {header.event_len}"
        )
        return header
