import os
import sys
from enum import Enum

sys.path.insert(1, os.path.join(sys.path[0], "../.."))

from planprinter import ExpressionType
from planprinter import Node
from planprinter import PlanNode
from planprinter import PlanNodeType
from planprinter import Slot
from planprinter import SortOrder
from planprinter import format_expression
from planprinter.printer.renderers import format_outputs
from planprinter.printer.renderers import get_renderer

NAME = Slot("name", "VARCHAR")
MASS = Slot("mass", "DECIMAL")
MOONS = Slot("moons", "BIGINT")


class OtherKind(int, Enum):
    Window = 1


def render(node):
    return get_renderer(node.node_type)(node, format_expression)


def test_every_node_kind_has_a_renderer():
    for kind in PlanNodeType:
        assert get_renderer(kind) is not None, kind


def test_unknown_kinds_have_no_renderer():
    assert get_renderer("Join") is None
    assert get_renderer(None) is None
    assert get_renderer(int(PlanNodeType.Limit)) is None
    assert get_renderer(OtherKind.Window) is None


def test_format_outputs():
    assert format_outputs([NAME, MASS]) == "name:VARCHAR, mass:DECIMAL"
    assert format_outputs([]) == ""


def test_render_limit():
    header, details = render(PlanNode(PlanNodeType.Limit, count=10, outputs=[NAME, MASS]))
    assert header == "- Limit => [name:VARCHAR, mass:DECIMAL]"
    assert details == ["count = 10"]


def test_render_limit_of_zero():
    _, details = render(PlanNode(PlanNodeType.Limit, count=0, outputs=[NAME]))
    assert details == ["count = 0"]


def test_render_limit_without_count():
    _, details = render(PlanNode(PlanNodeType.Limit, outputs=[NAME]))
    assert details == ["count = null"]


def test_render_grouped_aggregation():
    count_star = Node(
        ExpressionType.AGGREGATOR, value="count", parameters=[Node(ExpressionType.WILDCARD)]
    )
    max_mass = Node(
        ExpressionType.AGGREGATOR,
        value="max",
        parameters=[Node(ExpressionType.IDENTIFIER, value="mass")],
    )
    node = PlanNode(
        PlanNodeType.Aggregation,
        group_by=[NAME],
        aggregations={MOONS: count_star, MASS: max_mass},
        outputs=[NAME, MOONS, MASS],
    )
    header, details = render(node)
    assert header == "- Aggregate => [name:VARCHAR, moons:BIGINT, mass:DECIMAL]"
    assert details == ["key = name", "moons := COUNT(*)", "mass := MAX(mass)"], details


def test_render_aggregation_without_groups():
    count_star = Node(
        ExpressionType.AGGREGATOR, value="count", parameters=[Node(ExpressionType.WILDCARD)]
    )
    node = PlanNode(
        PlanNodeType.Aggregation, group_by=[], aggregations={MOONS: count_star}, outputs=[MOONS]
    )
    _, details = render(node)
    assert details == ["moons := COUNT(*)"], details


def test_render_aggregation_keeps_insertion_order():
    first = Slot("zeta", "BIGINT")
    second = Slot("alpha", "BIGINT")
    node = PlanNode(
        PlanNodeType.Aggregation,
        group_by=[NAME, MASS],
        aggregations={first: "SUM(a)", second: "SUM(b)"},
        outputs=[first, second],
    )
    _, details = render(node)
    assert details == ["key = name, mass", "zeta := SUM(a)", "alpha := SUM(b)"], details


def test_render_table_scan():
    node = PlanNode(
        PlanNodeType.TableScan,
        catalog_name="default",
        schema_name="astronomy",
        table_name="planets",
        outputs=[NAME, MASS],
        attributes={"name": NAME, "planet_mass": MASS},
    )
    header, details = render(node)
    assert header == "- TableScan[default.astronomy.planets] => [name:VARCHAR, mass:DECIMAL]"
    assert details == ["name := name", "planet_mass := mass"], details


def test_render_table_scan_with_missing_parts():
    header, details = render(PlanNode(PlanNodeType.TableScan, table_name="planets"))
    assert header == "- TableScan[null.null.planets] => []", header
    assert details == []


def test_render_filter():
    predicate = Node(
        ExpressionType.COMPARISON_OPERATOR,
        value="Eq",
        left=Node(ExpressionType.IDENTIFIER, value="name"),
        right=Node(ExpressionType.LITERAL, value="Earth", type="VARCHAR"),
    )
    header, details = render(PlanNode(PlanNodeType.Filter, predicate=predicate, outputs=[NAME]))
    assert header == "- Filter => [name:VARCHAR]"
    assert details == ["predicate = name = 'Earth'"], details


def test_render_filter_without_predicate():
    _, details = render(PlanNode(PlanNodeType.Filter, outputs=[NAME]))
    assert details == ["predicate = null"]


def test_render_project():
    heavy = Slot("heavy", "BOOLEAN")
    expression = Node(
        ExpressionType.COMPARISON_OPERATOR,
        value="GtEq",
        left=Node(ExpressionType.IDENTIFIER, value="mass"),
        right=Node(ExpressionType.LITERAL, value=10),
    )
    node = PlanNode(
        PlanNodeType.Project, output_map={NAME: NAME, heavy: expression}, outputs=[NAME, heavy]
    )
    header, details = render(node)
    assert header == "- Project => [name:VARCHAR, heavy:BOOLEAN]"
    assert details == ["name := name", "heavy := mass >= 10"], details


def test_render_output():
    node = PlanNode(
        PlanNodeType.Output,
        column_names=["planet", "weight"],
        assignments={"weight": MASS, "planet": NAME},
        outputs=[NAME, MASS],
    )
    header, details = render(node)
    assert header == "- Output[planet, weight]"
    assert details == ["planet := name", "weight := mass"], details


def test_render_output_with_unassigned_column():
    node = PlanNode(PlanNodeType.Output, column_names=["planet", "moons"], assignments={"planet": NAME})
    _, details = render(node)
    assert details == ["planet := name", "moons := null"], details


def test_render_top_n():
    node = PlanNode(
        PlanNodeType.TopN,
        order_by=[MASS, NAME],
        orderings={MASS: SortOrder.DESCENDING, NAME: SortOrder.ASCENDING},
        count=3,
        outputs=[NAME, MASS],
    )
    header, details = render(node)
    assert header == "- TopN => [name:VARCHAR, mass:DECIMAL]"
    assert details == [
        "key = [mass, name]",
        "order = {mass=DESCENDING, name=ASCENDING}",
        "count = 3",
    ], details


def test_render_top_n_with_unusual_orderings():
    node = PlanNode(
        PlanNodeType.TopN,
        order_by=[MASS, NAME, MOONS],
        orderings={MASS: None, NAME: "asc", MOONS: Node("Ordering")},
        count=3,
    )
    _, details = render(node)
    assert details[1] == "order = {mass=null, name=asc, moons={}}", details


if __name__ == "__main__":  # pragma: no cover
    from tests import run_tests

    run_tests()
