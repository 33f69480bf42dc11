"""filter_bridge - Build graph filter queries from attribute comparisons."""

from filter_bridge.attribute import AttributeComparisonBuilder, ColumnAttribute
from filter_bridge.exceptions import (
    DomainBoundsError,
    EngineMisuseError,
    FilterBridgeError,
    TypeCompatibilityError,
)
from filter_bridge.filter import FilterHandle
from filter_bridge.namespace import Namespace
from filter_bridge.predicates import (
    EdgeNotPredicate,
    EqualsPredicate,
    NodeNotPredicate,
    NotPredicate,
    Predicate,
    RangePredicate,
)
from filter_bridge.query import FilterEngine, Query
from filter_bridge.range import Range
from filter_bridge.value_types import ValueType, domain_bounds

__version__ = "0.1.0"

__all__ = [
    # Attributes
    "AttributeComparisonBuilder",
    "ColumnAttribute",
    "Namespace",
    # Values
    "ValueType",
    "Range",
    "domain_bounds",
    # Queries
    "FilterEngine",
    "FilterHandle",
    "Query",
    # Predicates
    "Predicate",
    "RangePredicate",
    "EqualsPredicate",
    "NotPredicate",
    "NodeNotPredicate",
    "EdgeNotPredicate",
    # Errors
    "FilterBridgeError",
    "TypeCompatibilityError",
    "DomainBoundsError",
    "EngineMisuseError",
]
