"""Information shared by every node of a schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from parquetry.format import Repetition


@dataclass(frozen=True)
class BasicTypeInfo:
    """Name, repetition, optional field id and whether the node is the root.

    The root of a schema has no repetition of its own; it is stored as
    ``Repetition.OPTIONAL`` and flagged with ``is_root``.
    """

    name: str
    repetition: Repetition = Repetition.OPTIONAL
    id: Optional[int] = None
    is_root: bool = False