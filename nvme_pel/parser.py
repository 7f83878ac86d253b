# Copyright 2026 Aria Akhavan
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except in compliance with the License. You may obtain a copy of the License at
# http://www.apache.org/licenses/LICENSE-2.0
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and limitations under the License.

"""High-level API for parsing Persistent Event Log captures."""

import logging
from os import PathLike
from typing import BinaryIO, Optional, Union

from .error import PathError
from .pel import Pel, parse_pel
from .registry import PayloadRegistry

logger = logging.getLogger(__name__)


def parse_log(
    reader: BinaryIO,
    registry: Optional[PayloadRegistry] = None,
    headers_only: bool = False,
) -> Pel:
    """Parse a Persistent Event Log read from a binary stream.

    Args:
        reader: Binary reader positioned at the start of the log
        registry: Payload decoders to use, the built-in decoders if None
        headers_only: If True, keep every payload as raw bytes

    Returns:
        Pel
    """
    data = reader.read()
    return parse_pel(data, registry=registry, headers_only=headers_only)


def parse_log_file(
    path: Union[str, PathLike],
    registry: Optional[PayloadRegistry] = None,
    headers_only: bool = False,
) -> Pel:
    """Parse a Persistent Event Log capture file.

    Args:
        path: Path to a raw log capture
        registry: Payload decoders to use, the built-in decoders if None
        headers_only: If True, keep every payload as raw bytes

    Returns:
        Pel

    Raises:
        PathError: If the file cannot be opened
    """
    logger.info(f"[nvme-pel] Parsing {path}...")
    try:
        reader = open(path, 'rb')
    except OSError as err:
        logger.error(f"[nvme-pel] Failed to open {path}: {err}")
        raise PathError(f"Failed to open file path {path}: {err}") from err

    with reader:
        return parse_log(reader, registry=registry, headers_only=headers_only)
