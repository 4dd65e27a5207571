# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

import sys
from typing import Any
from typing import Optional
from typing import TextIO

from planprinter import config
from planprinter.exceptions import OutputWriteFailureError


class PlanWriter:
    """
    Writes indented lines to a text stream, one line per call.

    Parameters:
        stream: TextIO, optional
            Where lines are written, defaults to whatever `sys.stdout` is at the
            time of each write.
        indent_width: int, optional
            Spaces per indent level, defaults to `config.INDENT_WIDTH`.
    """

    __slots__ = ("_stream", "indent_width")

    def __init__(self, stream: Optional[TextIO] = None, indent_width: Optional[int] = None):
        if indent_width is None:
            indent_width = config.INDENT_WIDTH
        if indent_width < 0:
            raise ValueError("Indent width cannot be negative.")
        self._stream = stream
        self.indent_width = indent_width

    @property
    def stream(self) -> TextIO:
        return sys.stdout if self._stream is None else self._stream

    def write(self, indent: int, template: str, *args: Any) -> None:
        """
        Write a single line at the given indent level.

        With no args the template is written as-is, otherwise the args are
        substituted positionally into the template with `str.format`.
        """
        if indent < 0:
            raise ValueError("Indent level cannot be negative.")

        value = template.format(*args) if args else template
        line = " " * (indent * self.indent_width) + value + "\n"

        try:
            self.stream.write(line)
        except (OSError, ValueError) as err:
            raise OutputWriteFailureError(f"Unable to write plan output - {err}") from err
