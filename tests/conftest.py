# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Pytest fixtures and byte builders for Persistent Event Log tests."""

import struct
from typing import List, Optional

import pytest

from nvme_pel import PayloadRegistry, default_registry

LOG_HEADER_SIZE = 512
DEFAULT_EHL = 21  # total header length 24


def build_timestamp(milliseconds: int = 0, synch: int = 0, origin: int = 0) -> bytes:
    """Build an 8 byte timestamp: 6 byte counter, attributes, reserved."""
    attributes = ((origin & 0x7) << 1) | (synch & 0x1)
    return milliseconds.to_bytes(6, 'little') + bytes([attributes, 0])


def _text(value: bytes, size: int) -> bytes:
    return value.ljust(size, b'\x00')[:size]


def build_log_header(
    num_events: int = 0,
    log_len: int = LOG_HEADER_SIZE,
    log_rev: int = 1,
    header_len: int = LOG_HEADER_SIZE,
    timestamp: bytes = b'',
    power_on_hours: int = 0,
    power_cycle_count: int = 0,
    vid: int = 0,
    ssvid: int = 0,
    serial_num: bytes = b'',
    model_num: bytes = b'',
    name: bytes = b'',
    supp_events: bytes = bytes(32),
    log_id: int = 0x0d,
    extension: bytes = b'',
) -> bytes:
    """Build a log header. extension is appended after the 512 byte fixed region."""
    data = bytearray()
    data += bytes([log_id, 0, 0, 0])
    data += struct.pack('<I', num_events)
    data += struct.pack('<Q', log_len)
    data += bytes([log_rev, 0])
    data += struct.pack('<H', header_len)
    data += timestamp or build_timestamp()
    data += power_on_hours.to_bytes(16, 'little')
    data += struct.pack('<Q', power_cycle_count)
    data += struct.pack('<HH', vid, ssvid)
    data += _text(serial_num, 20)
    data += _text(model_num, 40)
    data += _text(name, 256)
    data += bytes(108)
    data += supp_events
    assert len(data) == LOG_HEADER_SIZE
    return bytes(data) + extension


def build_event(
    tag: int,
    payload: bytes = b'',
    vendor_info: bytes = b'',
    revision: int = 1,
    controller_id: int = 1,
    timestamp: bytes = b'',
    ehl: int = DEFAULT_EHL,
    el: Optional[int] = None,
) -> bytes:
    """Build an event record. el defaults to the vendor info plus payload length."""
    if el is None:
        el = len(vendor_info) + len(payload)
    data = bytearray()
    data += bytes([tag, revision, ehl, 0])
    data += struct.pack('<H', controller_id)
    data += timestamp or build_timestamp()
    data += bytes(6)
    data += struct.pack('<HH', len(vendor_info), el)
    # header bytes beyond the fixed 24 when EHL is larger
    data += bytes(max(0, ehl + 3 - len(data)))
    data += vendor_info
    data += payload
    return bytes(data)


def build_log(events: List[bytes], trailing: bytes = b'', **header_kwargs) -> bytes:
    """Build a complete log with a header describing the given event records."""
    body = b''.join(events)
    header_kwargs.setdefault('num_events', len(events))
    extension = header_kwargs.get('extension', b'')
    header_kwargs.setdefault('log_len', LOG_HEADER_SIZE + len(extension) + len(body))
    return build_log_header(**header_kwargs) + body + trailing


@pytest.fixture
def registry() -> PayloadRegistry:
    """Fixture providing a fresh registry with the built-in decoders."""
    return default_registry()


@pytest.fixture
def empty_registry() -> PayloadRegistry:
    """Fixture providing a registry with no decoders."""
    return PayloadRegistry()
