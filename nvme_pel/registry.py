# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""Mapping from event type tag to payload decoder."""

from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from .event import RawPayload

# (data, revision, length) -> (remaining data, payload)
PayloadDecoder = Callable[[bytes, int, int], Tuple[bytes, Any]]


def decode_raw_payload(data: bytes, revision: int, length: int) -> Tuple[bytes, RawPayload]:
    """Fallback decoder used for every tag without a registered decoder."""
    return RawPayload.parse_raw_payload(data, revision, length)


class PayloadRegistry:
    """Payload decoders keyed by event type tag.

    Tags without a registered decoder resolve to decode_raw_payload, so every
    one of the 256 possible tags has a decoder.
    """

    def __init__(self, decoders: Optional[Dict[int, PayloadDecoder]] = None):
        self._decoders: Dict[int, PayloadDecoder] = {}
        for tag, decoder in (decoders or {}).items():
            self.register(tag, decoder)

    def register(self, tag: int, decoder: PayloadDecoder) -> None:
        tag = int(tag)
        if not 0 <= tag <= 0xff:
            raise ValueError(f"Event type tag out of range: {tag}")
        self._decoders[tag] = decoder

    def unregister(self, tag: int) -> None:
        self._decoders.pop(int(tag), None)

    def get(self, tag: int) -> Optional[PayloadDecoder]:
        return self._decoders.get(int(tag))

    def resolve(self, tag: int) -> PayloadDecoder:
        """Return the decoder for tag, falling back to raw bytes."""
        return self._decoders.get(int(tag), decode_raw_payload)

    def copy(self) -> 'PayloadRegistry':
        return PayloadRegistry(dict(self._decoders))

    def __contains__(self, tag) -> bool:
        return int(tag) in self._decoders

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._decoders))

    def __len__(self) -> int:
        return len(self._decoders)


def default_registry() -> PayloadRegistry:
    """Build a new registry holding the built-in payload decoders."""
    from .payloads import builtin_decoders

    return PayloadRegistry(builtin_decoders())
