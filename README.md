# questkit

`questkit` is a small library for tracking quest (task) progress in a game
server. It holds quest criteria and updates their progress when game events
happen. It asks the owner of the criteria to complete each one that reaches
its target.

## Installation

```
pip install questkit
```

## Concepts

- **`BaseTaskCriteria`** (`questkit.define`): a dataclass with the
  configuration of one criterion. It has three fields: `type`, `target` and a
  type-specific `param`.
- **`CriteriaType`** and **`ProgressSetType`** (`questkit.define`):
  integer enums.
  - `CriteriaType` names the built-in criteria kinds, `EXAMPLE1` and
    `EXAMPLE2`. Other integers can be registered as types.
  - `ProgressSetType` says how a new value is combined with the current
    progress:
    - `SET` overwrites the value.
    - `ACCUMULATE` adds to the value.
    - `HIGHEST` keeps the larger of the two.
    - `CONTINUE` adds positive values and resets to zero on zero or a
      negative value.
- **`Progress`** (`questkit.progress`): a dataclass holding a `value`.
  - `Progress.set(change_value, set_type)` applies a change and returns
    whether the value changed.
  - A result below zero is stored as zero.
  - Sums wrap around as signed 64-bit integers.
- **Handlers** (`questkit.handlers`): subclasses of the abstract
  `BaseTaskHandler`.
  - Each handler has `criteria_type` and `progress_set_type` attributes.
    `can_update(*args)` checks an event's arguments and records progress when
    they match. `count()` returns a copy of the handler's progress.
  - `CriteriaExample1` needs a mapping as `param`. It accepts events of the
    form `(count, key, value)` when `param.get(key, 0) == value`, and adds
    `count` to its progress. `key` and `value` must be integers, or
    `TypeError` is raised.
  - `CriteriaExample2` accepts events of the form `(count, arg)` when `arg`
    equals the configured `param`, and overwrites its progress with `count`.
  - Both return `False` when given too few arguments.
- **`Criteria`** (`questkit.criteria`): a configured criterion with its
  `id`, `config`, `handler`, and `end` and `reward` flags.
  - `new_criteria(criteria_id, config)` builds the handler registered for
    `config.type`. When no builder is registered for that type, it logs a
    warning and leaves `handler` as `None`.
  - `add_builder(criteria_type, builder)` registers a builder for a new type.
    It returns `False` if that type already has one.
  - The following raise `MissingHandlerError` when the criterion has no
    handler: `can_update(*args)`, `count()`, and the `criteria_type` and
    `progress_set_type` properties.
- **`CriteriaProcessor`** and **`update`** (`questkit.processor`):
  - `CriteriaProcessor` is a protocol. Implement its four methods for the
    object that owns the criteria: `get_list_by_type`, `can_update`,
    `set_progress` and `complete`.
  - Call `update(processor, criteria_type, callback, *args)` when an event
    happens. For every criterion of that type that `processor.can_update`
    accepts, `update` passes the criterion's current count to
    `processor.set_progress`. It calls `processor.complete` when the returned
    value is at least the criterion's `target`.
  - Finally `callback` receives the list of criteria that were looked at.

## Example

```python
from questkit.criteria import new_criteria
from questkit.define import BaseTaskCriteria, CriteriaType
from questkit.processor import update


class MyProcessor:
    def __init__(self):
        self.criteria = {}

    def get_list_by_type(self, criteria_type):
        return [c for c in self.criteria.values() if c.criteria_type == criteria_type]

    def can_update(self, criteria, *args):
        return criteria.can_update(*args)

    def set_progress(self, criteria_id, change_value):
        criteria = self.criteria.get(criteria_id)
        if criteria is None:
            return 0
        progress = criteria.count()
        progress.set(change_value, criteria.progress_set_type)
        return progress.value

    def complete(self, criteria_id):
        criteria = self.criteria.get(criteria_id)
        if criteria is not None:
            criteria.end = True


processor = MyProcessor()
config = BaseTaskCriteria(type=CriteriaType.EXAMPLE2, target=10, param=3)
criteria = new_criteria(1, config)
processor.criteria[criteria.id] = criteria

update(processor, CriteriaType.EXAMPLE2, lambda dirty: None, 10, 3)
assert criteria.end
```

## Helpers

`questkit.compare` has checks for configuration parameters:

- `is_any(param)` is true for `""`, `"0"` and `"Any"`.
- `is_str_contains(param, arg)` checks whether a comma-separated `param`
  lists `arg`. `is_str_any_contains(param, arg)` also accepts an `Any`
  entry. Both trim the entries and skip empty ones.
- `is_slice_contains(elems, v)` and `is_numbers_must_contains(elems, v)`
  check membership.
- `is_numbers_any_contains(elems, v)` is also true when `elems` holds `0`.

`questkit.parse` converts values taken from events and configuration:

- `str_to_int64(s)` parses a base-10 signed 64-bit integer. It returns `0`
  when the text is malformed or the number is out of range.
- `parse_number(v)` returns an integer argument as a 64-bit integer and `0`
  for anything else, booleans included.
- `parse_string(v)` renders a value as text: `true`/`false` for booleans,
  `<nil>` for `None`, and a short form for floats such as `1.2` or `1e+06`.
- `parse_int_slice(param)` parses `"1,2,3"` into `[1, 2, 3]`. It skips
  malformed entries and logs a warning for each one.

## What it does not do

`questkit` keeps criteria in memory only. It does not load quest
configuration, store progress or grant rewards. The processor you write
decides where criteria live and what completion means. The `reward` flag on
`Criteria` is not set by the library.

## Running the tests

```
pip install questkit[test]
pytest
```