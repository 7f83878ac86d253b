# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Decode one event record and route its payload to a decoder by tag."""

import logging
from typing import Any, List, Tuple

from .cursor import ByteCursor
from .error import PayloadDecodeError, TruncatedError
from .event import DecodeWarning, Event, WarningKind
from .event_header import EVENT_HEADER_SIZE, EventHeader
from .registry import PayloadDecoder, PayloadRegistry, decode_raw_payload

logger = logging.getLogger(__name__)


def decode_event(
    cursor: ByteCursor,
    registry: PayloadRegistry,
    headers_only: bool = False,
) -> Event:
    """Decode the event record at the cursor.

    The cursor always ends exactly event_len bytes after the start of the
    record, whatever the payload decoder consumed.

    Args:
        cursor: Cursor positioned at the first byte of the event record
        registry: Payload decoders keyed by tag
        headers_only: If True, keep every payload as raw bytes

    Returns:
        Event

    Raises:
        TruncatedError: If the header or the declared record does not fit in the buffer
    """
    start = cursor.position
    header = EventHeader.parse_event_header(cursor)
    warnings: List[DecodeWarning] = []

    end = start + header.event_len
    if end > len(cursor):
        raise TruncatedError("event record", start, header.event_len, len(cursor) - start)

    if header.header_len < EVENT_HEADER_SIZE:
        message = (
            f"Event header length {header.header_len} is shorter than the "
            f"{EVENT_HEADER_SIZE} byte fixed header"
        )
        logger.warning(f"[nvme-pel] {message} at offset {start:#x}")
        warnings.append(DecodeWarning(WarningKind.EventLengthInvalid, start, message))

    variable_start = start + max(header.header_len, EVENT_HEADER_SIZE)
    if variable_start > end:
        message = f"Event length {header.event_len} is shorter than its header"
        logger.warning(f"[nvme-pel] {message} at offset {start:#x}")
        warnings.append(DecodeWarning(WarningKind.EventLengthInvalid, start, message))
        variable_start = end

    vendor_info_len = header.vendor_info_len
    if variable_start + vendor_info_len > end:
        message = (
            f"Vendor specific information length {vendor_info_len} exceeds event length "
            f"{header.event_len}"
        )
        logger.warning(f"[nvme-pel] {message} at offset {start:#x}")
        warnings.append(DecodeWarning(WarningKind.EventLengthInvalid, start, message))
        vendor_info_len = end - variable_start

    cursor.seek(variable_start, "event vendor specific information")
    vendor_info = cursor.take(vendor_info_len, "event vendor specific information")

    payload_len = end - cursor.position
    payload_data = cursor.take(payload_len, "event data")

    if headers_only:
        decoder = decode_raw_payload
    else:
        decoder = registry.resolve(header.tag)
        if decoder is decode_raw_payload:
            logger.debug(f"[nvme-pel] No payload decoder for event type {header.tag:#x}, keeping raw bytes")

    payload = _decode_payload(decoder, payload_data, header, warnings)

    cursor.seek(end, "event record")
    return Event(header=header, vendor_info=vendor_info, payload=payload, warnings=warnings)


def _decode_payload(
    decoder: PayloadDecoder,
    data: bytes,
    header: EventHeader,
    warnings: List[DecodeWarning],
) -> Any:
    """Run a payload decoder, recovering from failures with the raw fallback."""
    length = len(data)
    try:
        remaining, payload = _check_result(decoder(data, header.revision, length), length)
    except Exception as err:
        logger.error(
            f"[nvme-pel] Failed to decode payload for event type {header.tag:#x} "
            f"at offset {header.offset:#x}: {err!r}"
        )
        warnings.append(DecodeWarning(
            WarningKind.PayloadDecodeFailed,
            header.offset,
            f"Payload decoder for event type {header.tag:#x} failed: {err}",
        ))
        _, payload = decode_raw_payload(data, header.revision, length)
        return payload

    consumed = length - len(remaining)
    if consumed != length:
        message = (
            f"Payload decoder for event type {header.tag:#x} consumed {consumed} bytes, "
            f"event declares {length}"
        )
        logger.warning(f"[nvme-pel] {message} at offset {header.offset:#x}")
        warnings.append(DecodeWarning(WarningKind.PayloadLengthMismatch, header.offset, message))

    return payload


def _check_result(result: Any, length: int) -> Tuple[bytes, Any]:
    """Validate a decoder result is (remaining data, payload) with remaining no longer than its input."""
    if not isinstance(result, tuple) or len(result) != 2:
        raise PayloadDecodeError(
            f"Payload decoder returned {type(result).__name__}, expected (remaining data, payload)"
        )
    remaining, payload = result
    if not isinstance(remaining, (bytes, bytearray, memoryview)):
        raise PayloadDecodeError(
            f"Payload decoder returned {type(remaining).__name__} as remaining data, expected bytes"
        )
    if len(remaining) > length:
        raise PayloadDecodeError(
            f"Payload decoder returned {len(remaining)} remaining bytes from {length} bytes of data"
        )
    return (bytes(remaining), payload)
