# entiqon

Small building blocks with no dependencies, meant to be shared between projects.

- `entiqon.decimals`: `Decimal`, an exact rational number, built directly or
  with `parse_from` / `must_new`.
- `entiqon.errors`: `CausableError`, an exception that carries a short cause
  and a readable reason, and `ProcessStageError`, which also records the
  processing stage where the failure happened and the error it wraps.
- `entiqon.boolean`: `parse_from` turns booleans, numbers and words such as
  `"yes"`, `"off"` or `"t"` into `bool`.
- `entiqon.collection`: `Collection`, an ordered container whose mutating
  methods can be chained.

## Installation

```
pip install entiqon
```

## Decimals

```python
from entiqon.decimals import Decimal, must_new, parse_from

a = must_new("1/3")
b = parse_from(2)
print(a + b)           # 7/3
print(float(a * b))    # 0.666...
print(Decimal("0.5"))  # 1/2
a / must_new(0)        # raises ZeroDivisionError
```

`Decimal` values are immutable and support `+`, `-`, `*`, `/`, `==`,
`hash()` and `float()` with other `Decimal` values. `str()` gives the
canonical form: `"numerator/denominator"`, or just the integer when the
denominator is 1.

`parse_from` (and `must_new`, which behaves the same) accepts a `Decimal`, a
string, an `int` or a `float`. A malformed string (including one with
surrounding whitespace or underscores) or a non-finite float raises
`ValueError`; any other type, `bool` included, raises `TypeError`.

## Errors

```python
from entiqon.errors import CausableError, ProcessStageError

err = CausableError("Database", "Connection failed")
err.cause, err.reason, str(err)   # ("Database", "Connection failed", "Connection failed")

wrapped = FileNotFoundError("file not found")
stage_err = ProcessStageError("Init", "Loader", "Failed to load resource", wrapped)
str(stage_err)
# "[Loader] at stage Init: Failed to load resource: file not found"

str(ProcessStageError("Parse", "Parser", "Syntax error"))
# "[Parser] at stage Parse: Syntax error"
```

`ProcessStageError` is a `CausableError` and has a `stage` attribute. The
wrapped error, if any, is kept in `err` and is also set as `__cause__`; it
defaults to `None`.

## Boolean parsing

```python
from entiqon.boolean import parse_from

parse_from("yes")   # True
parse_from(" OFF ") # False
parse_from(0.0)     # False
parse_from(42)      # True
parse_from("maybe") # raises ValueError
parse_from(None)    # raises ValueError
parse_from([1])     # raises TypeError
```

Strings are trimmed and compared case-insensitively. True words: `true`, `1`,
`yes`, `y`, `t`, `on`. False words: `false`, `0`, `no`, `n`, `f`, `off`.
Integers and floats are false when zero and true otherwise.

## Collections

```python
from entiqon.collection import Collection

nums = Collection([1, 2, 3]).remove(2)
nums.items()                               # [1, 3]
nums.filter(lambda x: x % 2 == 1).items()  # [1, 3]
nums.map(lambda x: f"#{x}").items()        # ["#1", "#3"]
3 in nums                                  # True
len(nums)                                  # 2
nums.index_of(3)                           # 1
nums.at(10, default=0)                     # 0
```

- `add(*values)` appends; `insert_at(idx, *values)` inserts, clamping `idx`
  to the start or end; `remove(value)` drops every occurrence;
  `remove_at(idx)` ignores out-of-range indices. All four return the
  collection itself, so calls can be chained. `clear()` empties it.
- `at(idx, default=None)` treats negative indices as out of range.
- `contains(value)` / `in`, `index_of(value)` (returns `-1` when absent),
  `len()` and iteration query the contents.
- `filter(fn)` and `map(fn)` return new collections; `for_each(fn)` calls
  `fn` on every element.
- `items()` and `clone()` return independent copies.

## Running the tests

```
pip install "entiqon[test]"
pytest
```