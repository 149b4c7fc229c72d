"""Shared enumerations and the task criteria configuration record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class ProgressSetType(IntEnum):
    """How a new value is combined with the current progress."""

    SET = 1  # always overwrite
    ACCUMULATE = 2  # always add
    HIGHEST = 3  # keep the highest value
    CONTINUE = 4  # add positive values, reset to zero otherwise


class CriteriaType(IntEnum):
    """Built-in criteria kinds; other integers may be registered at runtime."""

    EXAMPLE1 = 1
    EXAMPLE2 = 2


@dataclass
class BaseTaskCriteria:
    """Configuration of one task criterion."""

    type: int = 0
    target: int = 0
    param: Any = None