"""Shared fixtures for filter_bridge tests."""

import pytest

from filter_bridge import FilterEngine, Namespace, ValueType


@pytest.fixture
def engine():
    return FilterEngine()


@pytest.fixture
def ns(engine):
    """Namespace with a mix of node and edge columns."""
    namespace = Namespace(engine)
    namespace.add_column("age", ValueType.INTEGER)
    namespace.add_column("name", ValueType.STRING)
    namespace.add_column("active", ValueType.BOOLEAN)
    namespace.add_column("rank", ValueType.BYTE)
    namespace.add_column("score", ValueType.FLOAT)
    namespace.add_column("population", ValueType.BIG_INTEGER)
    namespace.add_column("weight", ValueType.DOUBLE, node=False)
    namespace.add_column("label", ValueType.STRING, node=False)
    return namespace
