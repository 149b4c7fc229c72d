import pytest

from questkit.criteria import MissingHandlerError, add_builder, new_criteria
from questkit.define import BaseTaskCriteria, CriteriaType, ProgressSetType
from questkit.handlers import BaseTaskHandler, CriteriaExample1, CriteriaExample2


class CountingHandler(BaseTaskHandler):
    def __init__(self, config):
        super().__init__(50, ProgressSetType.HIGHEST)

    def can_update(self, *args):
        if not args:
            return False
        self._record(args[0])
        return True


def test_events_build_handlers():
    c1 = BaseTaskCriteria(type=CriteriaType.EXAMPLE1, target=10, param={1: 2})
    first = new_criteria(1, c1)
    c2 = BaseTaskCriteria(type=CriteriaType.EXAMPLE2, target=10, param=3)
    second = new_criteria(1, c2)
    assert isinstance(first.handler, CriteriaExample1)
    assert isinstance(second.handler, CriteriaExample2)
    assert first.id == 1 and second.id == 1
    assert first.criteria_type == CriteriaType.EXAMPLE1
    assert second.criteria_type == CriteriaType.EXAMPLE2


def test_new_criteria_defaults():
    criteria = new_criteria(5, BaseTaskCriteria(type=2, target=1, param=0))
    assert (criteria.end, criteria.reward) == (False, False)


def test_unknown_type_has_no_handler():
    criteria = new_criteria(9, BaseTaskCriteria(type=404, target=1))
    assert criteria.handler is None
    with pytest.raises(MissingHandlerError):
        criteria.can_update(1)
    with pytest.raises(MissingHandlerError):
        criteria.count()


def test_add_builder_rejects_existing_type():
    assert add_builder(CriteriaType.EXAMPLE1, CountingHandler) is False


def test_add_builder_registers_new_type():
    assert add_builder(50, CountingHandler) is True
    assert add_builder(50, CountingHandler) is False
    criteria = new_criteria(3, BaseTaskCriteria(type=50, target=5))
    assert criteria.can_update(4) is True
    assert criteria.can_update(2) is True
    assert criteria.count().value == 4
    assert criteria.progress_set_type == ProgressSetType.HIGHEST