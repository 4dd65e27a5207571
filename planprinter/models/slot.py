# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# See the License at http://www.apache.org/licenses/LICENSE-2.0
# Distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND.

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Slot:
    """
    A named, typed column produced by a plan node.

    Parameters:
        name: str
            The name of the column, unique within the node producing it.
        type: str
            The display name of the column type.
    """

    name: str
    type: str

    def __str__(self) -> str:
        return self.name

    @property
    def described(self) -> str:
        """The `name:type` form used when listing node outputs."""
        return f"{self.name}:{self.type}"


class SortOrder(Enum):
    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"
