"""Options that control how a file is written."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Hashable


class Version(IntEnum):
    """Version of the file format written into the file metadata."""

    V1 = 1
    V2 = 2


@dataclass(frozen=True)
class WriteOptions:
    """Whether to write statistics, the compression codec and the format version."""

    write_statistics: bool
    compression: Hashable
    version: Version