# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Expressions are trees of `Node` objects tagged with an `ExpressionType`.

The printer never looks inside an expression, it only hands it to a formatter
and writes out whatever string comes back.
"""

from enum import Enum


class ExpressionType(int, Enum):
    """
    The types of expression Nodes we will see.

    The high nibble groups the values into categories, the low nibble numbers
    the values within a category.
    """

    # fmt:off

    # 00000000
    UNKNOWN = 0

    # LOGICAL OPERATORS
    # 0001 nnnn
    AND = 17  # 0001 0001
    OR = 18  # 0001 0010
    XOR = 19  # 0001 0011
    NOT = 20  # 0001 0100

    # EXPRESSION ELEMENTS
    # 0010 nnnn
    WILDCARD = 33  # 0010 0001
    COMPARISON_OPERATOR = 34  # 0010 0010
    BINARY_OPERATOR = 35  # 0010 0011
    UNARY_OPERATOR = 36  # 0010 0100
    FUNCTION = 37  # 0010 0101
    IDENTIFIER = 38  # 0010 0110
    NESTED = 40  # 0010 1000
    AGGREGATOR = 41  # 0010 1001
    LITERAL = 42  # 0010 1010

    # fmt:on


from planprinter.expression.formatter import format_expression  # isort: skip

__all__ = ("ExpressionType", "format_expression")
