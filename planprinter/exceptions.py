# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

"""
Error types raised while printing plans.

Exception Hierarchy:

Exception
 └── Error
     ├── UnsupportedNodeKindError
     └── OutputWriteFailureError

Both are fatal, printing stops as soon as either is raised.
"""

from typing import Any
from typing import Optional


class Error(Exception):
    """
    Base class of all other error exceptions in this package. You can use this
    to catch all errors with one single except statement.
    """


class UnsupportedNodeKindError(Error):
    """
    Raised when the printer reaches a plan node it has no rendering rule for.

    This indicates a missing rule rather than bad plan data.
    """

    def __init__(self, node_kind: Any):
        self.node_kind = node_kind
        name = getattr(node_kind, "name", None) or repr(node_kind)
        message = f"No rendering rule is registered for plan nodes of kind '{name}'."
        super().__init__(message)


class OutputWriteFailureError(Error):
    """Raised when the output stream cannot accept a line."""

    def __init__(self, message: Optional[str] = None):
        if message is None:
            message = "Unable to write plan output."
        super().__init__(message)
