"""Criteria instances and the registry of handler builders."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .define import BaseTaskCriteria, CriteriaType, ProgressSetType
from .handlers import BaseTaskHandler, CriteriaExample1, CriteriaExample2
from .progress import Progress

_log = logging.getLogger(__name__)

TaskHandlerBuilder = Callable[[BaseTaskCriteria], BaseTaskHandler]

_BUILDERS: dict[int, TaskHandlerBuilder] = {
    CriteriaType.EXAMPLE1: CriteriaExample1,
    CriteriaType.EXAMPLE2: CriteriaExample2,
}


class MissingHandlerError(LookupError):
    """Raised when a criterion has no handler for its type."""


@dataclass(eq=False)
class Criteria:
    """A configured criterion together with its handler and state flags."""

    id: int
    config: BaseTaskCriteria
    handler: BaseTaskHandler | None = None
    end: bool = False
    reward: bool = False

    def _require_handler(self) -> BaseTaskHandler:
        if self.handler is None:
            raise MissingHandlerError(
                f"criteria {self.id} has no handler for type {self.config.type}"
            )
        return self.handler

    @property
    def criteria_type(self) -> int:
        return self._require_handler().criteria_type

    @property
    def progress_set_type(self) -> ProgressSetType:
        return self._require_handler().progress_set_type

    def can_update(self, *args: Any) -> bool:
        """Delegate the event to the handler."""
        return self._require_handler().can_update(*args)

    def count(self) -> Progress:
        """Return a copy of the handler's progress."""
        return self._require_handler().count()


def new_criteria(criteria_id: int, config: BaseTaskCriteria) -> Criteria:
    """Create a criterion, building its handler from the registered builders."""
    criteria = Criteria(id=criteria_id, config=config)
    builder = _BUILDERS.get(config.type)
    if builder is None:
        _log.warning("handler not found. id: %s config.type: %s", criteria_id, config.type)
    else:
        criteria.handler = builder(config)
    return criteria


def add_builder(criteria_type: int, builder: TaskHandlerBuilder) -> bool:
    """Register a builder for a criteria type; return False if one already exists."""
    if criteria_type in _BUILDERS:
        return False
    _BUILDERS[criteria_type] = builder
    return True