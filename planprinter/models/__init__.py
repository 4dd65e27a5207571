# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from planprinter.models.node import Node
from planprinter.models.plan_node import PlanNode
from planprinter.models.plan_node import PlanNodeType
from planprinter.models.slot import Slot
from planprinter.models.slot import SortOrder

__all__ = (
    "Node",
    "PlanNode",
    "PlanNodeType",
    "Slot",
    "SortOrder",
)
