"""Attribute handles that turn comparison operators into filter queries."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from filter_bridge.exceptions import DomainBoundsError, TypeCompatibilityError
from filter_bridge.filter import FilterHandle
from filter_bridge.predicates import EqualsPredicate, RangePredicate, negation_for
from filter_bridge.range import Range
from filter_bridge.value_types import ValueType, coerce_operand, domain_bounds

if TYPE_CHECKING:
    from filter_bridge.namespace import Namespace
    from filter_bridge.query import FilterEngine, Query

logger = logging.getLogger(__name__)


class AttributeComparisonBuilder(ABC):
    """Base class for handles that wrap a node or edge attribute column.

    Subclasses implement ``get_value_type``, ``is_node_attribute``,
    ``build_range_query`` and ``build_equals_query``. The comparison
    operators are implemented here: ``>``, ``>=``, ``<`` and ``<=`` build a
    Range from the operand and the column type's domain bounds and hand it
    to ``build_range_query``; ``==`` delegates to ``build_equals_query``;
    ``!=`` wraps the equality query in a negation query.

    Example:
        ns.age > 30        # range query (30, max]
        ns.name == "Alice" # equality query
        ns.age != 30       # not (age == 30)
    """

    # Handles override __eq__, so they cannot be dict keys or set members
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, namespace: Namespace, engine: FilterEngine):
        """Initialize attribute handle.

        Args:
            namespace: Namespace this attribute is inserted in
            engine: Filter engine used to create and link queries
        """
        self.namespace = namespace
        self.engine = engine

    @abstractmethod
    def get_value_type(self) -> ValueType:
        """Get the value type of the attribute column's data."""

    @abstractmethod
    def is_node_attribute(self) -> bool:
        """Check if this attribute belongs to nodes (False for edges)."""

    @abstractmethod
    def build_range_query(self, range: Range) -> Query:
        """Build a range query for this attribute.

        Args:
            range: Range the column value must fall in

        Returns:
            Query containing the range predicate
        """

    @abstractmethod
    def build_equals_query(self, match: Any) -> Query:
        """Build an equality query for this attribute.

        Args:
            match: Value to match

        Returns:
            Query containing the equality predicate
        """

    def _ordering_range(self, operand: Any, *, from_operand: bool, strict: bool) -> Range:
        """Build the range for an ordering comparison.

        With ``from_operand`` the operand is the lower bound and the range
        runs up to the type's maximum (``>``, ``>=``); otherwise it runs from
        the type's minimum up to the operand (``<``, ``<=``). ``strict``
        excludes the operand itself.
        """
        value_type = self.get_value_type()
        if not value_type.is_numeric:
            raise TypeCompatibilityError(value_type)

        try:
            minimum, maximum = domain_bounds(value_type)
        except DomainBoundsError as exc:
            raise TypeCompatibilityError(value_type) from exc
        value = coerce_operand(value_type, operand)

        if from_operand:
            filter_range = Range(
                lower_bound=value,
                upper_bound=maximum,
                lower_inclusive=not strict,
                upper_inclusive=True,
            )
        else:
            filter_range = Range(
                lower_bound=minimum,
                upper_bound=value,
                lower_inclusive=True,
                upper_inclusive=not strict,
            )
        logger.debug(f"Built range {filter_range} for {value_type} attribute {self}")
        return filter_range

    def _range_filter(self, operand: Any, *, from_operand: bool, strict: bool) -> FilterHandle:
        filter_range = self._ordering_range(operand, from_operand=from_operand, strict=strict)
        query = self.build_range_query(filter_range)
        return FilterHandle(self.namespace, query)

    def __gt__(self, other: Any) -> FilterHandle:
        return self._range_filter(other, from_operand=True, strict=True)

    def __ge__(self, other: Any) -> FilterHandle:
        return self._range_filter(other, from_operand=True, strict=False)

    def __lt__(self, other: Any) -> FilterHandle:
        return self._range_filter(other, from_operand=False, strict=True)

    def __le__(self, other: Any) -> FilterHandle:
        return self._range_filter(other, from_operand=False, strict=False)

    def __eq__(self, other: Any) -> FilterHandle:  # type: ignore[override]
        query = self.build_equals_query(other)
        return FilterHandle(self.namespace, query)

    def __ne__(self, other: Any) -> FilterHandle:  # type: ignore[override]
        equals_query = self.build_equals_query(other)
        not_query = self.engine.create_query(negation_for(self.is_node_attribute()))
        self.engine.set_sub_query(not_query, equals_query)
        return FilterHandle(self.namespace, not_query)


class ColumnAttribute(AttributeComparisonBuilder):
    """Handle for a named attribute column of nodes or edges.

    Example:
        age = ColumnAttribute(ns, engine, "age", ValueType.INTEGER)
        weight = ColumnAttribute(ns, engine, "weight", ValueType.DOUBLE, node=False)
    """

    def __init__(
        self,
        namespace: Namespace,
        engine: FilterEngine,
        name: str,
        value_type: ValueType,
        node: bool = True,
    ):
        """Initialize column attribute.

        Args:
            namespace: Namespace this attribute is inserted in
            engine: Filter engine used to create and link queries
            name: Column name
            value_type: Value type of the column's data
            node: True for a node column, False for an edge column
        """
        super().__init__(namespace, engine)
        self.name = name
        self.value_type = ValueType(value_type)
        self.node = node

    @property
    def scope(self) -> str:
        return "node" if self.node else "edge"

    def get_value_type(self) -> ValueType:
        return self.value_type

    def is_node_attribute(self) -> bool:
        return self.node

    def build_range_query(self, range: Range) -> Query:
        predicate = RangePredicate(scope=self.scope, column=self.name, range=range)
        return self.engine.create_query(predicate)

    def build_equals_query(self, match: Any) -> Query:
        # Text columns are matched against the operand's string form
        if self.value_type in (ValueType.STRING, ValueType.CHAR):
            match = str(match)
        predicate = EqualsPredicate(
            scope=self.scope,
            column=self.name,
            value_type=self.value_type,
            value=match,
        )
        return self.engine.create_query(predicate)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ColumnAttribute({self.name!r}, {self.value_type.value!r}, {self.scope})"
