# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Plan nodes are the operators of a query execution plan.

Each node carries its children in `sources` and the columns it produces in
`outputs`, the remaining attributes depend on the kind of node:

    Limit        count
    Aggregation  group_by, aggregations
    TableScan    catalog_name, schema_name, table_name, attributes
    Filter       predicate
    Project      output_map
    Output       column_names, assignments
    TopN         order_by, orderings, count
"""

from enum import Enum
from enum import auto
from typing import Tuple

from planprinter.models.node import Node
from planprinter.models.slot import Slot


class PlanNodeType(int, Enum):
    Limit = auto()  # row count limit
    Aggregation = auto()  # aggregates, optionally grouped
    TableScan = auto()  # read a table
    Filter = auto()  # tuple filtering
    Project = auto()  # computed columns
    Output = auto()  # final named result columns
    TopN = auto()  # ordered limit


class PlanNode(Node):

    __slots__ = ()

    @property
    def sources(self) -> Tuple["PlanNode", ...]:
        return tuple(self._internal.get("sources", ()))

    @property
    def outputs(self) -> Tuple[Slot, ...]:
        return tuple(self._internal.get("outputs", ()))
