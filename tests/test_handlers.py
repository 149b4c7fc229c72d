import pytest

from questkit.define import BaseTaskCriteria, CriteriaType, ProgressSetType
from questkit.handlers import CriteriaExample1, CriteriaExample2


def make_example1(target=3):
    return BaseTaskCriteria(target=target, param={1: 2})


def test_example1_reaches_target():
    config = make_example1()
    criteria = CriteriaExample1(config)
    for _ in range(3):
        assert criteria.can_update(1, 1, 2) is True
    assert criteria.count().value == config.target


def test_example1_kind():
    criteria = CriteriaExample1(make_example1())
    assert criteria.criteria_type == CriteriaType.EXAMPLE1
    assert criteria.progress_set_type == ProgressSetType.ACCUMULATE


def test_example1_too_few_args():
    criteria = CriteriaExample1(make_example1())
    assert criteria.can_update(1) is False
    assert criteria.count().value == 0


def test_example1_mismatched_value():
    criteria = CriteriaExample1(make_example1())
    assert criteria.can_update(5, 1, 3) is False
    assert criteria.count().value == 0


def test_example1_missing_key_matches_zero():
    criteria = CriteriaExample1(make_example1())
    assert criteria.can_update(5, 7, 0) is True
    assert criteria.count().value == 5


def test_example1_non_integer_key_raises():
    criteria = CriteriaExample1(make_example1())
    with pytest.raises(TypeError):
        criteria.can_update(1, "1", 2)


def test_example1_requires_mapping_param():
    with pytest.raises(TypeError):
        CriteriaExample1(BaseTaskCriteria(param=3))


def test_example2_overwrites():
    criteria = CriteriaExample2(BaseTaskCriteria(type=2, target=10, param=3))
    assert criteria.can_update(4, 3) is True
    assert criteria.can_update(2, 3) is True
    assert criteria.count().value == 2
    assert criteria.progress_set_type == ProgressSetType.SET


def test_example2_param_mismatch():
    criteria = CriteriaExample2(BaseTaskCriteria(param=3))
    assert criteria.can_update(4, 5) is False
    assert criteria.can_update(4) is False
    assert criteria.count().value == 0


def test_count_returns_a_copy():
    criteria = CriteriaExample2(BaseTaskCriteria(param=3))
    criteria.can_update(4, 3)
    snapshot = criteria.count()
    snapshot.set(100, ProgressSetType.SET)
    assert criteria.count().value == 4