# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Utility functions for decoding Persistent Event Log fields."""

import base64
import logging

from .cursor import ByteCursor
from .error import PayloadDecodeError

logger = logging.getLogger(__name__)


def require_payload(data: bytes, size: int, event_name: str) -> None:
    """Raise PayloadDecodeError if an event payload is shorter than its fixed layout."""
    if len(data) < size:
        raise PayloadDecodeError(
            f"{event_name} event data needs {size} bytes, got {len(data)}"
        )


def clean_string(data: bytes) -> str:
    """Decode a fixed-length text field.

    Invalid UTF-8 is replaced, surrounding whitespace trimmed, then any
    embedded NUL characters removed.
    """
    return data.decode('utf-8', errors='replace').strip().replace('\x00', '')


def extract_string_size(cursor: ByteCursor, size: int, field: str) -> str:
    """Take a fixed-length text field from the cursor and clean it.

    Args:
        cursor: Cursor positioned at the field
        size: Field width in bytes
        field: Field name used in error messages

    Returns:
        The cleaned string
    """
    raw = cursor.take(size, field)
    result = clean_string(raw)
    if '\ufffd' in result:
        logger.warning(f"[nvme-pel] Invalid UTF-8 in {field}, replaced undecodable bytes")
    return result


def firmware_revision(data: bytes) -> str:
    """Firmware revisions are 8 ASCII characters, space padded."""
    return clean_string(data)


def encode_standard(data: bytes) -> str:
    """Base64 encode data using the STANDARD engine (alphabet along with "+" and "/")."""
    return base64.b64encode(data).decode('ascii')
