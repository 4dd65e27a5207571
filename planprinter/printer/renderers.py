# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Rendering rules for each kind of plan node.

A rule turns a node into a header line and a list of detail lines, the printer
decides where the lines go and how far they are indented. The registry is the
complete set of node kinds which can be printed.
"""

from enum import Enum
from typing import Any
from typing import Callable
from typing import Iterable
from typing import List
from typing import Tuple

from planprinter.models import PlanNode
from planprinter.models import PlanNodeType
from planprinter.models import Slot

Formatter = Callable[[Any], str]
Rendered = Tuple[str, List[str]]

_render_registry: dict[PlanNodeType, Callable[[PlanNode, Formatter], Rendered]] = {}


def register_render(step_type: PlanNodeType):
    """
    Decorator to register a rendering function for a given PlanNodeType
    """

    def wrapper(func: Callable[[PlanNode, Formatter], Rendered]):
        _render_registry[step_type] = func
        return func

    return wrapper


def get_renderer(step_type: Any):
    # kinds from other int enums, or bare ints, compare equal to PlanNodeType members
    if not isinstance(step_type, PlanNodeType):
        return None
    return _render_registry.get(step_type)


def _value(value: Any) -> str:
    return "null" if value is None else str(value)


def format_outputs(slots: Iterable[Slot]) -> str:
    return ", ".join(slot.described for slot in slots)


@register_render(PlanNodeType.Limit)
def render_limit(node: PlanNode, _: Formatter) -> Rendered:
    return f"- Limit => [{format_outputs(node.outputs)}]", [f"count = {_value(node.count)}"]


@register_render(PlanNodeType.Aggregation)
def render_aggregation(node: PlanNode, format_expression: Formatter) -> Rendered:
    details = []
    if node.group_by:
        details.append(f"key = {', '.join(map(str, node.group_by))}")
    for slot, call in (node.aggregations or {}).items():
        details.append(f"{slot} := {format_expression(call)}")
    return f"- Aggregate => [{format_outputs(node.outputs)}]", details


@register_render(PlanNodeType.TableScan)
def render_table_scan(node: PlanNode, _: Formatter) -> Rendered:
    table = ".".join(
        _value(part) for part in (node.catalog_name, node.schema_name, node.table_name)
    )
    details = [f"{name} := {_value(slot)}" for name, slot in (node.attributes or {}).items()]
    return f"- TableScan[{table}] => [{format_outputs(node.outputs)}]", details


@register_render(PlanNodeType.Filter)
def render_filter(node: PlanNode, format_expression: Formatter) -> Rendered:
    return f"- Filter => [{format_outputs(node.outputs)}]", [
        f"predicate = {format_expression(node.predicate)}"
    ]


@register_render(PlanNodeType.Project)
def render_project(node: PlanNode, format_expression: Formatter) -> Rendered:
    details = [
        f"{slot} := {format_expression(expression)}"
        for slot, expression in (node.output_map or {}).items()
    ]
    return f"- Project => [{format_outputs(node.outputs)}]", details


@register_render(PlanNodeType.Output)
def render_output(node: PlanNode, _: Formatter) -> Rendered:
    names = node.column_names or []
    assignments = node.assignments or {}
    details = [f"{name} := {_value(assignments.get(name))}" for name in names]
    return f"- Output[{', '.join(names)}]", details


@register_render(PlanNodeType.TopN)
def render_top_n(node: PlanNode, _: Formatter) -> Rendered:
    key = ", ".join(map(str, node.order_by or []))
    order = ", ".join(
        f"{slot}={ordering.name if isinstance(ordering, Enum) else _value(ordering)}"
        for slot, ordering in (node.orderings or {}).items()
    )
    return f"- TopN => [{format_outputs(node.outputs)}]", [
        f"key = [{key}]",
        f"order = {{{order}}}",
        f"count = {_value(node.count)}",
    ]
