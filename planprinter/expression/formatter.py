# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from typing import Any

from planprinter.models import Node

COMPARISON_SYMBOLS = {
    "Eq": "=",
    "Lt": "<",
    "Gt": ">",
    "NotEq": "!=",
    "LtEq": "<=",
    "GtEq": ">=",
}

BINARY_SYMBOLS = {
    "StringConcat": "||",
    "Plus": "+",
    "Minus": "-",
    "Multiply": "*",
    "Divide": "/",
    "Modulo": "%",
}

UNARY_TEMPLATES = {"IsNull": "{} IS NULL", "IsNotNull": "{} IS NOT NULL"}


def format_expression(root: Any) -> str:
    """
    Render an expression tree as a string.

    Anything which isn't an expression Node, such as a Slot, is rendered with
    `str`, missing expressions are rendered as `null`.
    """
    # circular imports
    from . import ExpressionType

    if root is None:
        return "null"
    if not isinstance(root, Node):
        return str(root)

    node_type = root.node_type

    if node_type == ExpressionType.LITERAL:
        if root.value is None:
            return "null"
        if root.type == "VARCHAR":
            return "'" + str(root.value) + "'"
        return str(root.value)
    if node_type == ExpressionType.IDENTIFIER:
        return str(root.alias or root.value)
    if node_type == ExpressionType.WILDCARD:
        if root.value:
            return f"{root.value}.*"
        return "*"
    if node_type in (ExpressionType.FUNCTION, ExpressionType.AGGREGATOR):
        distinct = "DISTINCT " if root.distinct else ""
        parameters = ", ".join(format_expression(param) for param in root.parameters or [])
        return f"{str(root.value).upper()}({distinct}{parameters})"
    if node_type == ExpressionType.COMPARISON_OPERATOR:
        symbol = COMPARISON_SYMBOLS.get(root.value, str(root.value).upper())
        return f"{format_expression(root.left)} {symbol} {format_expression(root.right)}"
    if node_type == ExpressionType.BINARY_OPERATOR:
        symbol = BINARY_SYMBOLS.get(root.value, str(root.value).upper())
        return f"{format_expression(root.left)} {symbol} {format_expression(root.right)}"
    if node_type == ExpressionType.UNARY_OPERATOR:
        template = UNARY_TEMPLATES.get(root.value, str(root.value).upper() + "({})")
        return template.format(format_expression(root.centre))
    if node_type == ExpressionType.NOT:
        return f"NOT {format_expression(root.centre)}"
    if node_type in (ExpressionType.AND, ExpressionType.OR, ExpressionType.XOR):
        return f"{format_expression(root.left)} {node_type.name} {format_expression(root.right)}"
    if node_type == ExpressionType.NESTED:
        return f"({format_expression(root.centre)})"
    return str(root.value)
