"""Tests for building queries from attribute comparison operators."""

import logging
import sys

import pytest

from filter_bridge import (
    AttributeComparisonBuilder,
    DomainBoundsError,
    EqualsPredicate,
    FilterHandle,
    Range,
    RangePredicate,
    TypeCompatibilityError,
    ValueType,
)
from filter_bridge.value_types import FLOAT_MAX

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def range_of(handle):
    predicate = handle.query.predicate
    assert isinstance(predicate, RangePredicate)
    return predicate.range


def test_greater_than(ns):
    """Test that > builds (x, max] on the column's domain."""
    handle = ns.age > 30

    assert isinstance(handle, FilterHandle)
    assert handle.namespace is ns
    assert range_of(handle) == Range(
        lower_bound=30, upper_bound=INT_MAX, lower_inclusive=False, upper_inclusive=True
    )


def test_greater_or_equal(ns):
    """Test that >= builds [x, max]."""
    assert range_of(ns.age >= 30) == Range(
        lower_bound=30, upper_bound=INT_MAX, lower_inclusive=True, upper_inclusive=True
    )


def test_less_than(ns):
    """Test that < builds [min, x)."""
    assert range_of(ns.age < 30) == Range(
        lower_bound=INT_MIN, upper_bound=30, lower_inclusive=True, upper_inclusive=False
    )


def test_less_or_equal(ns):
    """Test that <= builds [min, x]."""
    assert range_of(ns.age <= 30) == Range(
        lower_bound=INT_MIN, upper_bound=30, lower_inclusive=True, upper_inclusive=True
    )


def test_range_query_carries_column_and_scope(ns):
    """Test the predicate fields of a range query."""
    node_predicate = (ns.age > 30).query.predicate
    assert node_predicate.column == "age"
    assert node_predicate.scope == "node"

    edge_predicate = (ns.weight <= 2.5).query.predicate
    assert edge_predicate.column == "weight"
    assert edge_predicate.scope == "edge"
    assert edge_predicate.range == Range(
        lower_bound=-sys.float_info.max, upper_bound=2.5, lower_inclusive=True, upper_inclusive=True
    )


def test_float_column_uses_single_precision_domain(ns):
    """Test that float columns are bounded by the single precision maximum."""
    assert range_of(ns.score > 1.5).upper_bound == FLOAT_MAX
    assert range_of(ns.score < 1.5).lower_bound == -FLOAT_MAX


def test_reflected_comparison(ns):
    """Test that 30 < age builds the same query as age > 30."""
    reflected = 30 < ns.age
    direct = ns.age > 30
    assert reflected.query.to_dict() == direct.query.to_dict()

    assert range_of(30 >= ns.age) == range_of(ns.age <= 30)


@pytest.mark.parametrize(
    ("build", "expected"),
    [
        (lambda a: a > 127, Range(lower_bound=127, upper_bound=127, lower_inclusive=False)),
        (lambda a: a >= 127, Range(lower_bound=127, upper_bound=127)),
        (lambda a: a < -128, Range(lower_bound=-128, upper_bound=-128, upper_inclusive=False)),
        (lambda a: a <= -128, Range(lower_bound=-128, upper_bound=-128)),
        (lambda a: a < 127, Range(lower_bound=-128, upper_bound=127, upper_inclusive=False)),
        (lambda a: a > -128, Range(lower_bound=-128, upper_bound=127, lower_inclusive=False)),
    ],
)
def test_domain_boundary_operands(ns, build, expected):
    """Test that operands at the domain edges still give well-formed ranges."""
    r = range_of(build(ns.rank))
    assert r == expected
    assert r.lower_bound <= r.upper_bound


@pytest.mark.parametrize(
    "build",
    [
        lambda a: a > "Alice",
        lambda a: a >= "Alice",
        lambda a: a < "Alice",
        lambda a: a <= "Alice",
    ],
)
def test_ordering_on_string_is_incompatible(ns, build):
    """Test that ordering operators reject non-numeric attributes."""
    with pytest.raises(TypeCompatibilityError) as exc_info:
        build(ns.name)

    assert exc_info.value.value_type is ValueType.STRING
    assert "string" in str(exc_info.value)
    assert isinstance(exc_info.value, TypeError)


def test_ordering_on_boolean_is_incompatible(ns):
    """Test that booleans are not ordered."""
    with pytest.raises(TypeCompatibilityError):
        ns.active > False


def test_ordering_on_unbounded_numeric_is_incompatible(ns):
    """Test that numeric types without domain bounds fail loudly."""
    with pytest.raises(TypeCompatibilityError) as exc_info:
        ns.population > 5

    assert exc_info.value.value_type is ValueType.BIG_INTEGER
    assert isinstance(exc_info.value.__cause__, DomainBoundsError)


@pytest.mark.parametrize("operand", ["30", 30.5, 2**31, None])
def test_ordering_with_unconvertible_operand(ns, operand):
    """Test that operands not representable in the column type are rejected."""
    with pytest.raises(TypeCompatibilityError):
        ns.age > operand


def test_failed_comparison_builds_nothing(engine, ns):
    """Test that a rejected comparison never reaches the query hooks."""
    calls = []
    original = engine.create_query

    def recording_create_query(predicate):
        calls.append(predicate)
        return original(predicate)

    engine.create_query = recording_create_query

    with pytest.raises(TypeCompatibilityError):
        ns.name > "Alice"
    with pytest.raises(TypeCompatibilityError):
        ns.age > "30"

    assert calls == []


def test_equals(ns):
    """Test that == builds an equality query and no range."""
    handle = ns.name == "Alice"

    predicate = handle.query.predicate
    assert isinstance(predicate, EqualsPredicate)
    assert predicate.column == "name"
    assert predicate.value == "Alice"
    assert predicate.value_type is ValueType.STRING
    assert handle.query.subqueries == ()
    assert handle.namespace is ns


@pytest.mark.parametrize(
    ("column", "operand"),
    [
        ("age", 30),
        ("age", "thirty"),
        ("name", 5),
        ("active", True),
        ("population", 10**30),
        ("weight", 2.5),
    ],
)
def test_equals_accepts_any_value_type(ns, column, operand):
    """Test that equality never raises a type compatibility error."""
    handle = ns[column] == operand
    assert isinstance(handle.query.predicate, EqualsPredicate)


def test_equals_on_string_column_matches_string_form(ns):
    """Test that text columns compare against the operand's string form."""
    assert (ns.name == 5).query.predicate.value == "5"
    assert (ns.age == 5).query.predicate.value == 5


def test_repeated_comparison_gives_independent_queries(ns):
    """Test that the same comparison twice yields equivalent but distinct queries."""
    first = ns.age > 30
    second = ns.age > 30

    assert first is not second
    assert first.query is not second.query
    assert first.query.to_dict() == second.query.to_dict()


def test_query_build_strings(ns):
    """Test the readable form of built queries."""
    assert str(ns.age > 30) == f"age in (30, {INT_MAX}]"
    assert str(ns.age <= 30) == f"age in [{INT_MIN}, 30]"
    assert str(ns.name == "Alice") == 'name == "Alice"'
    assert str(ns.active == True) == "active == true"  # noqa: E712


def test_predicate_describe(ns):
    """Test the plain dict description of a range predicate."""
    description = (ns.age > 30).query.predicate.describe()
    assert description == {
        "kind": "range",
        "scope": "node",
        "column": "age",
        "range": {
            "lower_bound": 30,
            "upper_bound": INT_MAX,
            "lower_inclusive": False,
            "upper_inclusive": True,
        },
    }


def test_attribute_handles_are_unhashable(ns):
    """Test that handles cannot be used as dict keys."""
    with pytest.raises(TypeError):
        hash(ns.age)


def test_comparison_logs_built_range(ns, caplog):
    """Test that built ranges are logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="filter_bridge")

    ns.age > 30

    assert any("Built range (30, 2147483647]" in record.message for record in caplog.records)


class RecordingAttribute(AttributeComparisonBuilder):
    """Attribute variant that records the values handed to its hooks."""

    def __init__(self, namespace, engine, value_type, node=True):
        super().__init__(namespace, engine)
        self.value_type = value_type
        self.node = node
        self.ranges = []
        self.matches = []

    def get_value_type(self):
        return self.value_type

    def is_node_attribute(self):
        return self.node

    def build_range_query(self, range):
        self.ranges.append(range)
        return self.engine.create_query(RangePredicate(scope="node", column="x", range=range))

    def build_equals_query(self, match):
        self.matches.append(match)
        return self.engine.create_query(
            EqualsPredicate(scope="node", column="x", value_type=self.value_type, value=match)
        )


def test_custom_variant_receives_ranges(ns, engine):
    """Test that subclasses only supply the hooks and get ranges built for them."""
    attr = RecordingAttribute(ns, engine, ValueType.SHORT)

    attr > 10
    attr <= 10

    assert attr.ranges == [
        Range(lower_bound=10, upper_bound=32767, lower_inclusive=False),
        Range(lower_bound=-32768, upper_bound=10),
    ]


def test_custom_variant_negation_calls_equals_hook(ns, engine):
    """Test that != goes through the equality hook."""
    attr = RecordingAttribute(ns, engine, ValueType.STRING, node=False)

    handle = attr != "x"

    assert attr.matches == ["x"]
    assert handle.query.predicate.scope == "edge"


def test_abstract_builder_cannot_be_instantiated(ns, engine):
    """Test that the base class requires the hooks."""
    with pytest.raises(TypeError):
        AttributeComparisonBuilder(ns, engine)
