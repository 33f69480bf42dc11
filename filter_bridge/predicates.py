"""Filter predicates that form the nodes of a query tree.

A predicate describes one filtering step. Range and equality predicates
test a single attribute column; operator predicates (negation) combine the
results of their subqueries.
"""

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict

from filter_bridge.range import Range
from filter_bridge.value_types import ValueType

Scope = Literal["node", "edge"]


class Predicate(BaseModel):
    """Base class for filter predicates.

    Subclasses set ``kind`` and, for operators, ``max_subqueries``.
    """

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[str] = "predicate"
    max_subqueries: ClassVar[int] = 0

    scope: Scope

    @property
    def is_operator(self) -> bool:
        """Check if this predicate combines subqueries."""
        return self.max_subqueries > 0

    def describe(self) -> dict[str, Any]:
        """Get a plain dict description of the predicate."""
        return {"kind": self.kind, **self.model_dump()}


class RangePredicate(Predicate):
    """Matches elements whose column value lies inside a range."""

    kind: ClassVar[str] = "range"

    column: str
    range: Range


class EqualsPredicate(Predicate):
    """Matches elements whose column value equals a given value."""

    kind: ClassVar[str] = "equals"

    column: str
    value_type: ValueType
    value: Any


class NotPredicate(Predicate):
    """Matches every element its single subquery does not match."""

    kind: ClassVar[str] = "not"
    max_subqueries: ClassVar[int] = 1


class NodeNotPredicate(NotPredicate):
    """Negation over nodes."""

    scope: Literal["node"] = "node"


class EdgeNotPredicate(NotPredicate):
    """Negation over edges."""

    scope: Literal["edge"] = "edge"


def negation_for(node: bool) -> NotPredicate:
    """Create the negation predicate for node or edge attributes."""
    if node:
        return NodeNotPredicate()
    return EdgeNotPredicate()
