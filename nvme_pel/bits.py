# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Sub-byte field extraction with explicit shift/mask arithmetic."""


def extract_bits(value: int, offset: int, width: int, total_bits: int = 8) -> int:
    """Extract an unsigned field from an already-fetched integer.

    Bit 0 is the least significant bit. The field occupies bits
    offset + width - 1 down to offset.

    Args:
        value: Integer holding the packed field
        offset: Bit position of the field's least significant bit
        width: Number of bits in the field
        total_bits: Number of bits available in value

    Returns:
        The field value

    Raises:
        ValueError: If the field does not fit within total_bits
    """
    if offset < 0 or width <= 0 or offset + width > total_bits:
        raise ValueError(
            f"Bit field offset {offset} width {width} does not fit in {total_bits} bits"
        )
    return (value >> offset) & ((1 << width) - 1)


def read_bits(data: bytes, offset: int, width: int) -> int:
    """Extract an unsigned field from a short little-endian byte run."""
    return extract_bits(int.from_bytes(data, 'little'), offset, width, len(data) * 8)


def bit_is_set(value: int, bit: int, total_bits: int = 8) -> bool:
    """Return True if a single bit is set."""
    return extract_bits(value, bit, 1, total_bits) == 1
