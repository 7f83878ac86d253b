# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Custom exceptions for the nvme-pel library."""


class PelError(Exception):
    """Base exception for Persistent Event Log decode errors."""
    pass


class TruncatedError(PelError):
    """Fewer bytes remain than a field or declared length requires."""
    def __init__(self, field: str, offset: int, needed: int, available: int):
        self.field = field
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated data while decoding {field} at offset {offset:#x}. "
            f"Need {needed} bytes, have {available}"
        )


class PayloadDecodeError(PelError):
    """An event payload could not be decoded."""
    def __init__(self, message: str = "Failed to decode event payload"):
        super().__init__(message)


class PathError(PelError):
    """Failed to open file path."""
    def __init__(self, message: str = "Failed to open file path"):
        super().__init__(message)
