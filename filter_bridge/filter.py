"""Filter handle returned by attribute comparisons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filter_bridge.namespace import Namespace
    from filter_bridge.query import Query


@dataclass(frozen=True, eq=False)
class FilterHandle:
    """Pairs a built query with the namespace it came from.

    Example:
        handle = ns.age > 30
        handle.query.build()  # "age in (30, 2147483647]"
    """

    namespace: Namespace
    query: Query

    def __str__(self) -> str:
        return self.query.build()
