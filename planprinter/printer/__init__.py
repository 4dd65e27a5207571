# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from planprinter.printer.plan_printer import PlanPrinter
from planprinter.printer.plan_printer import print_plan
from planprinter.printer.plan_printer import render_plan
from planprinter.printer.writer import PlanWriter

__all__ = (
    "PlanPrinter",
    "PlanWriter",
    "print_plan",
    "render_plan",
)
