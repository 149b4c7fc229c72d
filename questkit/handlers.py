"""Task handlers that decide whether an event advances a criterion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .define import BaseTaskCriteria, CriteriaType, ProgressSetType
from .parse import parse_number
from .progress import Progress


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {value!r}")
    return value


class BaseTaskHandler(ABC):
    """Tracks the progress of one criterion kind."""

    def __init__(self, criteria_type: int, progress_set_type: ProgressSetType) -> None:
        self.criteria_type = criteria_type
        self.progress_set_type = progress_set_type
        self._count = Progress()

    @abstractmethod
    def can_update(self, *args: Any) -> bool:
        """Check the event arguments and record progress if they match."""

    def count(self) -> Progress:
        """Return a copy of the current progress."""
        return Progress(self._count.value)

    def _record(self, raw: Any) -> None:
        self._count.set(parse_number(raw), self.progress_set_type)


class CriteriaExample1(BaseTaskHandler):
    """Accumulates a count when the event's key/value pair matches the config map."""

    def __init__(self, config: BaseTaskCriteria) -> None:
        super().__init__(CriteriaType.EXAMPLE1, ProgressSetType.ACCUMULATE)
        if not isinstance(config.param, Mapping):
            raise TypeError("CriteriaExample1 requires a mapping parameter")
        self.param = config.param

    def can_update(self, *args: Any) -> bool:
        if len(args) < 3:
            return False
        key = _require_int(args[1])
        val = _require_int(args[2])
        if self.param.get(key, 0) != val:
            return False
        self._record(args[0])
        return True


class CriteriaExample2(BaseTaskHandler):
    """Overwrites the count when the event's argument equals the configured parameter."""

    def __init__(self, config: BaseTaskCriteria) -> None:
        super().__init__(CriteriaType.EXAMPLE2, ProgressSetType.SET)
        self.config = config

    def can_update(self, *args: Any) -> bool:
        if len(args) < 2:
            return False
        if self.config.param != args[1]:
            return False
        self._record(args[0])
        return True