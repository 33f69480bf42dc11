"""Query trees and the filter engine that assembles them."""

import logging
from typing import Any

from filter_bridge.exceptions import EngineMisuseError
from filter_bridge.predicates import EqualsPredicate, NotPredicate, Predicate, RangePredicate

logger = logging.getLogger(__name__)


class Query:
    """A predicate plus the subqueries it operates on.

    Queries are created through ``FilterEngine.create_query`` and linked
    with ``FilterEngine.set_sub_query``; they are not meant to be built by
    hand.
    """

    def __init__(self, predicate: Predicate):
        """Initialize query.

        Args:
            predicate: Root predicate of this query
        """
        self.predicate = predicate
        self.parent: Query | None = None
        self._subqueries: list[Query] = []

    @property
    def subqueries(self) -> tuple["Query", ...]:
        """Subqueries attached to this query, in attachment order."""
        return tuple(self._subqueries)

    def to_dict(self) -> dict[str, Any]:
        """Get a structural description of the query tree.

        Two queries built from the same comparison give equal dicts even
        though they are distinct objects.
        """
        return {
            "predicate": self.predicate.describe(),
            "subqueries": [sub.to_dict() for sub in self._subqueries],
        }

    def build(self) -> str:
        """Build a readable expression for the query tree.

        Returns:
            Expression string, e.g. ``not (age == 30)``
        """
        predicate = self.predicate
        if isinstance(predicate, RangePredicate):
            return f"{predicate.column} in {predicate.range}"
        if isinstance(predicate, EqualsPredicate):
            return f"{predicate.column} == {_format_value(predicate.value)}"
        if isinstance(predicate, NotPredicate):
            inner = ", ".join(sub.build() for sub in self._subqueries)
            return f"not ({inner})"
        return predicate.kind

    def __str__(self) -> str:
        """String representation of query."""
        return self.build()

    def __repr__(self) -> str:
        return f"Query({self.build()!r}, scope={self.predicate.scope!r})"


class FilterEngine:
    """Creates queries and links them into trees."""

    def create_query(self, predicate: Predicate) -> Query:
        """Create a new query rooted at a predicate.

        Args:
            predicate: Root predicate

        Returns:
            A new, unattached Query
        """
        if not isinstance(predicate, Predicate):
            raise EngineMisuseError(f"cannot create a query from {predicate!r}")
        query = Query(predicate)
        logger.debug(f"Created {predicate.kind} query on {predicate.scope}s")
        return query

    def set_sub_query(self, parent: Query, child: Query) -> None:
        """Attach a query as a subquery of an operator query.

        Args:
            parent: Query whose predicate is an operator
            child: Query to attach

        Raises:
            EngineMisuseError: If the parent cannot take the child
        """
        if parent is child:
            raise EngineMisuseError("a query cannot be its own subquery")
        if not parent.predicate.is_operator:
            raise EngineMisuseError(
                f"{parent.predicate.kind} queries do not accept subqueries"
            )
        if len(parent._subqueries) >= parent.predicate.max_subqueries:
            raise EngineMisuseError(
                f"{parent.predicate.kind} queries accept at most "
                f"{parent.predicate.max_subqueries} subquery"
            )
        if child.parent is not None:
            raise EngineMisuseError("query is already attached to another query")

        parent._subqueries.append(child)
        child.parent = parent
        logger.debug(f"Attached {child.predicate.kind} query under {parent.predicate.kind} query")


def _format_value(value: Any) -> str:
    """Format a Python value for display in a query expression."""
    if isinstance(value, str):
        return f'"{value}"'
    elif isinstance(value, bool):
        return "true" if value else "false"
    elif isinstance(value, (int, float)):
        return str(value)
    else:
        return f'"{str(value)}"'
