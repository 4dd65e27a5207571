# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Node Module

This module contains the Node class, an immutable bag of named attributes used
for both plan operators and expressions.

Noteworthy features and design choices:

1. Dynamic Attributes: attributes are passed as keyword arguments and stored in an
   internal dictionary, attributes which were never set read as None.
2. Immutability: nodes are read-only once built, `evolve` returns a modified copy.
3. Property Access: the `properties` method exposes a read-only view of the attributes.
4. JSON Representation: the `__str__` method returns a JSON representation of the
   attributes, which is helpful when debugging.
"""

from types import MappingProxyType
from typing import Any
from typing import Mapping
from typing import Union

import orjson

# attributes holding child nodes, these are left out of the JSON representation
CHILD_ATTRIBUTES = ("sources",)


def _serializable(value: Any) -> Any:
    """
    Prepare a value for orjson: nested nodes become dictionaries and dictionary
    keys become strings.
    """
    if isinstance(value, Node):
        return {
            key: _serializable(item)
            for key, item in value.properties.items()
            if key not in CHILD_ATTRIBUTES
        }
    if isinstance(value, dict):
        return {str(key): _serializable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serializable(item) for item in value]
    return value


class Node:

    __slots__ = ("_internal", "node_type")

    def __init__(self, node_type: Union[str, int, None] = None, **kwargs: Any):
        """
        Initialize a Node with attributes.

        Parameters:
            node_type: str, optional
                The type of the node.
            **kwargs: Any
                Attributes for the node, attributes set to None are not stored.
        """
        object.__setattr__(
            self, "_internal", {key: value for key, value in kwargs.items() if value is not None}
        )
        object.__setattr__(self, "node_type", node_type)

    @property
    def properties(self) -> Mapping[str, Any]:
        """
        Get a read-only view of the attributes of the Node.
        """
        return MappingProxyType(self._internal)

    def __getattr__(self, name: str) -> Any:
        """
        Retrieve attribute from the internal dictionary, unset attributes are None.
        """
        if name.startswith("_"):
            raise AttributeError(name)
        return self._internal.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(
            f"'{type(self).__name__}' is immutable, use 'evolve' to derive a changed copy"
        )

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' is immutable")

    def __str__(self) -> str:
        """
        Return a string representation of the Node using JSON serialization.
        """
        return orjson.dumps(_serializable(self), default=str).decode()

    def __repr__(self) -> str:
        node_type = getattr(self.node_type, "name", self.node_type)
        return f"<{type(self).__name__} type={node_type}>"

    def evolve(self, **changes: Any) -> "Node":
        """
        Create a new node of the same class with some attributes replaced.

        Parameters:
            **changes: Any
                Attributes to replace, setting an attribute to None removes it.

        Returns:
            Node: The new node, the original is unchanged.
        """
        return type(self)(self.node_type, **{**self._internal, **changes})
