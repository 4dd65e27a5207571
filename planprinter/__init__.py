# isort: skip_file
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
planprinter renders query execution plans as indented text.

To get started:
    import planprinter
    planprinter.print_plan(plan)

Plans are trees of `PlanNode` objects, each printed as a header line followed
by its details, with its children nested beneath it.
"""

from planprinter.__version__ import __version__

from planprinter import config
from planprinter.exceptions import Error
from planprinter.exceptions import OutputWriteFailureError
from planprinter.exceptions import UnsupportedNodeKindError
from planprinter.models import Node
from planprinter.models import PlanNode
from planprinter.models import PlanNodeType
from planprinter.models import Slot
from planprinter.models import SortOrder
from planprinter.expression import ExpressionType
from planprinter.expression import format_expression
from planprinter.printer import PlanPrinter
from planprinter.printer import print_plan
from planprinter.printer import render_plan

__all__ = (
    "__version__",
    "config",
    "Error",
    "ExpressionType",
    "format_expression",
    "Node",
    "OutputWriteFailureError",
    "PlanNode",
    "PlanNodeType",
    "PlanPrinter",
    "print_plan",
    "render_plan",
    "Slot",
    "SortOrder",
    "UnsupportedNodeKindError",
)
