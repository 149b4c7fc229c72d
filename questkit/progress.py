"""Progress counter with configurable update rules."""

from __future__ import annotations

from dataclasses import dataclass

from .define import ProgressSetType


def _wrap_int64(value: int) -> int:
    return ((value + 2**63) % 2**64) - 2**63


@dataclass
class Progress:
    """A non-negative progress value."""

    value: int = 0

    def set(self, change_value: int, set_type: ProgressSetType) -> bool:
        """Apply ``change_value`` under ``set_type``; return True if it changed."""
        if set_type == ProgressSetType.SET:
            new_value = change_value
        elif set_type == ProgressSetType.ACCUMULATE:
            new_value = _wrap_int64(self.value + change_value)
        elif set_type == ProgressSetType.HIGHEST:
            new_value = max(self.value, change_value)
        elif set_type == ProgressSetType.CONTINUE:
            new_value = _wrap_int64(self.value + change_value) if change_value > 0 else 0
        else:
            new_value = 0

        if new_value == self.value:
            return False
        self.value = max(new_value, 0)
        return True