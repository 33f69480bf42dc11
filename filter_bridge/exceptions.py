"""Exceptions raised while building filter queries.

This module provides exception classes for attribute comparisons so that
the scripting console can tell user errors (comparing the wrong kind of
attribute) apart from misuse of the filter engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filter_bridge.value_types import ValueType


class FilterBridgeError(Exception):
    """Base class for all filter_bridge errors."""

    pass


class TypeCompatibilityError(FilterBridgeError, TypeError):
    """Raised when a comparison is not supported for an attribute's value type.

    This exception is raised by the ordering operators (``>``, ``>=``, ``<``,
    ``<=``) when the attribute column is not numeric, when its numeric type
    has no known domain bounds, or when the operand cannot be converted to
    the column's type.

    Example:
        try:
            ns.name > "Alice"
        except TypeCompatibilityError as exc:
            print(exc.value_type)  # ValueType.STRING
    """

    def __init__(self, value_type: ValueType):
        self.value_type = value_type
        super().__init__(f"unsupported operator for attribute type '{value_type}'")


class DomainBoundsError(FilterBridgeError, LookupError):
    """Raised when a value type has no registered minimum and maximum."""

    def __init__(self, value_type: ValueType):
        self.value_type = value_type
        super().__init__(f"no domain bounds registered for value type '{value_type}'")


class EngineMisuseError(FilterBridgeError, RuntimeError):
    """Raised when the filter engine rejects a query construction request.

    Not expected in normal operation: it means a query tree was assembled
    in a way the engine does not allow, e.g. attaching a subquery to a
    predicate that is not an operator.
    """

    pass
