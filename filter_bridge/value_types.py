"""Value types of attribute columns and their numeric domains."""

import sys
from enum import StrEnum
from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError

from filter_bridge.exceptions import DomainBoundsError, TypeCompatibilityError

# Largest finite single precision value
FLOAT_MAX = 3.4028234663852886e38


class ValueType(StrEnum):
    """Semantic type of the values stored in an attribute column."""

    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BIG_INTEGER = "big_integer"
    BIG_DECIMAL = "big_decimal"
    STRING = "string"
    CHAR = "char"
    BOOLEAN = "boolean"
    DATETIME = "datetime"

    @property
    def is_numeric(self) -> bool:
        """Check if values of this type are numbers."""
        return self in NUMERIC_TYPES

    @property
    def is_integral(self) -> bool:
        """Check if values of this type are whole numbers."""
        return self in INTEGRAL_TYPES


INTEGRAL_TYPES = frozenset(
    {
        ValueType.BYTE,
        ValueType.SHORT,
        ValueType.INTEGER,
        ValueType.LONG,
        ValueType.BIG_INTEGER,
    }
)

NUMERIC_TYPES = INTEGRAL_TYPES | {
    ValueType.FLOAT,
    ValueType.DOUBLE,
    ValueType.BIG_DECIMAL,
}

# Unbounded types (big_integer, big_decimal) have no entry
DOMAIN_BOUNDS: dict[ValueType, tuple[int | float, int | float]] = {
    ValueType.BYTE: (-(2**7), 2**7 - 1),
    ValueType.SHORT: (-(2**15), 2**15 - 1),
    ValueType.INTEGER: (-(2**31), 2**31 - 1),
    ValueType.LONG: (-(2**63), 2**63 - 1),
    ValueType.FLOAT: (-FLOAT_MAX, FLOAT_MAX),
    ValueType.DOUBLE: (-sys.float_info.max, sys.float_info.max),
}


def domain_bounds(value_type: ValueType) -> tuple[int | float, int | float]:
    """Get the minimum and maximum representable values of a numeric type.

    Args:
        value_type: Numeric value type

    Returns:
        (min, max) tuple

    Raises:
        DomainBoundsError: If the type has no registered bounds
    """
    try:
        return DOMAIN_BOUNDS[value_type]
    except KeyError:
        raise DomainBoundsError(value_type) from None


def _build_adapter(value_type: ValueType) -> TypeAdapter:
    """Build a validator accepting operands that fit in the type's domain."""
    lower, upper = DOMAIN_BOUNDS[value_type]
    if value_type.is_integral:
        return TypeAdapter(Annotated[int, Field(strict=True, ge=lower, le=upper)])
    return TypeAdapter(
        Annotated[float, Field(strict=True, ge=lower, le=upper, allow_inf_nan=False)]
    )


_OPERAND_ADAPTERS: dict[ValueType, TypeAdapter] = {
    value_type: _build_adapter(value_type) for value_type in DOMAIN_BOUNDS
}


def coerce_operand(value_type: ValueType, value: Any) -> int | float:
    """Convert a comparison operand to a value of the column's type.

    Integral columns take ints only (no bools, floats or strings); floating
    columns take ints or finite floats. Either way the result lies within
    the type's domain bounds.

    Args:
        value_type: Numeric value type of the column
        value: Operand supplied by the user

    Returns:
        The operand as an int or float

    Raises:
        TypeCompatibilityError: If the operand cannot be represented
    """
    adapter = _OPERAND_ADAPTERS.get(value_type)
    if adapter is None:
        raise TypeCompatibilityError(value_type)
    try:
        return adapter.validate_python(value)
    except ValidationError as exc:
        raise TypeCompatibilityError(value_type) from exc
