"""Dispatching of events to the criteria held by a processor."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from .criteria import Criteria


class CriteriaProcessor(Protocol):
    """Owner of a set of criteria, such as a player account."""

    def get_list_by_type(self, criteria_type: int) -> list[Criteria]:
        """Return the criteria of the given type."""

    def can_update(self, criteria: Criteria, *args: Any) -> bool:
        """Return True if the event applies to ``criteria``."""

    def set_progress(self, criteria_id: int, change_value: int) -> int:
        """Store progress for a criterion and return the resulting value."""

    def complete(self, criteria_id: int) -> None:
        """Mark a criterion as reaching its target."""


def update(
    processor: CriteriaProcessor,
    criteria_type: int,
    callback: Callable[[list[Criteria]], None],
    *args: Any,
) -> None:
    """Apply an event to every criterion of a type, then report them to ``callback``."""
    criteria_list = processor.get_list_by_type(criteria_type)
    for criteria in criteria_list:
        if not processor.can_update(criteria, *args):
            continue
        final = processor.set_progress(criteria.id, criteria.count().value)
        if final >= criteria.config.target:
            processor.complete(criteria.id)
    callback(criteria_list)