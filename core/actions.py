"""
Action discriminator carried by alert and PIN prompt messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable


class ListAction(Enum):
    ADD = "add"
    CLOSE = "close"
    CLOSE_ALL = "closeAll"

    @classmethod
    def decode(cls, value: Any, allowed: Iterable["ListAction"]) -> "ListAction":
        """
        Map an action field to a variant.

        Only the variants a handler supports are recognised; any other value,
        including a missing field, falls back to ADD.
        """
        for action in allowed:
            if action is not cls.ADD and value == action.value:
                return action
        return cls.ADD
