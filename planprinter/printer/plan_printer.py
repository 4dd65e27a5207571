# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Plan Printer

Writes a plan tree out as indented text, one header line per node followed by
the node's detail lines, for example:

    - Output[x]
            x := a
        - Filter => [a:int]
                predicate = a > 1
            - TableScan[catalog.schema.t] => [a:int]
                    a := a

Nodes are visited depth-first, parents before children and children in the
order they are held by their parent. Details sit two levels in from their
header, children one level in.

The walk uses an explicit stack rather than recursion so very deep plans do not
exhaust the interpreter's recursion limit.
"""

import io
import logging
from typing import Any
from typing import List
from typing import Optional
from typing import TextIO
from typing import Tuple

from planprinter.exceptions import UnsupportedNodeKindError
from planprinter.expression import format_expression
from planprinter.models import PlanNode
from planprinter.printer.renderers import Formatter
from planprinter.printer.renderers import Rendered
from planprinter.printer.renderers import get_renderer
from planprinter.printer.writer import PlanWriter

logger = logging.getLogger(__name__)

CHILD_INDENT = 1
DETAIL_INDENT = 2


class PlanPrinter:
    """
    Prints plan trees.

    Parameters:
        stream: TextIO, optional
            Where the plan is written, defaults to standard out.
        formatter: Callable, optional
            Converts expressions to strings, defaults to `format_expression`.
        indent_width: int, optional
            Spaces per indent level, defaults to `config.INDENT_WIDTH`.
    """

    __slots__ = ("_writer", "_formatter")

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        formatter: Formatter = format_expression,
        indent_width: Optional[int] = None,
    ):
        self._writer = PlanWriter(stream, indent_width)
        self._formatter = formatter

    def _render(self, node: Any) -> Rendered:
        node_kind = getattr(node, "node_type", None)
        render_fn = get_renderer(node_kind)
        if render_fn is None:
            logger.error("Unable to print plan, no rendering rule for %r", node)
            raise UnsupportedNodeKindError(node_kind)
        return render_fn(node, self._formatter)

    def print(self, plan: PlanNode) -> None:
        """
        Write the plan, starting from its root node, to the output stream.

        Raises:
            UnsupportedNodeKindError: a node has a kind with no rendering rule,
                nothing is written for it or anything below it.
            OutputWriteFailureError: the stream rejected a line.
        """
        logger.debug("Printing plan rooted at %r", plan)

        node_count = 0
        stack: List[Tuple[Any, int]] = [(plan, 0)]
        while stack:
            node, indent = stack.pop()
            header, details = self._render(node)

            self._writer.write(indent, header)
            for detail in details:
                self._writer.write(indent + DETAIL_INDENT, detail)
            node_count += 1

            # reversed so the first child is the next one popped
            stack.extend((child, indent + CHILD_INDENT) for child in reversed(node.sources or ()))

        logger.debug("Printed plan with %d nodes", node_count)


def print_plan(
    plan: PlanNode,
    stream: Optional[TextIO] = None,
    formatter: Formatter = format_expression,
    indent_width: Optional[int] = None,
) -> None:
    """
    Write a plan to a stream, standard out unless another stream is given.
    """
    PlanPrinter(stream, formatter, indent_width).print(plan)


def render_plan(
    plan: PlanNode,
    formatter: Formatter = format_expression,
    indent_width: Optional[int] = None,
) -> str:
    """
    Render a plan to a string rather than writing it to a stream.
    """
    buffer = io.StringIO()
    PlanPrinter(buffer, formatter, indent_width).print(plan)
    return buffer.getvalue()
