"""Namespace holding the attribute handles exposed to the scripting console."""

import logging
from typing import Any

from filter_bridge.attribute import ColumnAttribute
from filter_bridge.query import FilterEngine
from filter_bridge.value_types import ValueType

logger = logging.getLogger(__name__)


class Namespace:
    """Binding context for attribute handles.

    Columns are registered once when the namespace is populated and can be
    looked up by name, either by indexing or as attributes.

    Example:
        ns = Namespace()
        ns.add_column("age", ValueType.INTEGER)
        ns.add_column("weight", ValueType.DOUBLE, node=False)
        handle = ns.age > 30
    """

    engine: FilterEngine
    _attributes: dict[str, ColumnAttribute]

    def __init__(self, engine: FilterEngine | None = None):
        """Initialize namespace.

        Args:
            engine: Filter engine shared by every attribute handle
        """
        self.engine = engine or FilterEngine()
        self._attributes = {}

    def add_column(
        self, name: str, value_type: ValueType | str, node: bool = True
    ) -> ColumnAttribute:
        """Register an attribute column and create its handle.

        Args:
            name: Column name
            value_type: Value type of the column's data
            node: True for a node column, False for an edge column

        Returns:
            The new attribute handle

        Raises:
            ValueError: If the name is taken or the value type is unknown
        """
        if name in self._attributes:
            raise ValueError(f"Attribute '{name}' is already registered")
        attribute = ColumnAttribute(self, self.engine, name, ValueType(value_type), node=node)
        self._attributes[name] = attribute
        logger.debug(f"Registered {attribute.scope} attribute {name} ({attribute.value_type})")
        return attribute

    def names(self) -> list[str]:
        """Get the registered attribute names in registration order."""
        return list(self._attributes)

    def __getitem__(self, name: str) -> ColumnAttribute:
        return self._attributes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails
        attributes = self.__dict__.get("_attributes", {})
        if name in attributes:
            return attributes[name]
        raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
