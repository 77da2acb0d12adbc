# ekit

A small toolkit of generic helpers:

- **Sequence helpers**: aggregation, searching, mapping, reversing, deleting
  by index, and set operations on plain lists.
- **Thread-safe containers**: a key/value map, an object pool and an atomic
  value holder.
- **Queues**: a bounded or unbounded priority queue, a lock-protected
  variant for use across threads, and a blocking delay queue that only
  releases elements once they are due.
- **Database column values**: a column that stores any JSON-serialisable
  value, and a column that stores its value encrypted with AES-GCM.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sequence helpers

```python
from ekit.aggregate import max_value, min_value, sum_values
from ekit.search import contains, contains_all, index, last_index, index_all
from ekit.transform import reverse, reverse_self, delete, IndexOutOfRangeError

max_value([1, 2, 3])          # 3
min_value([1, 2, 3])          # 1
sum_values([1, 2, 3])         # 6
sum_values([])                # 0

contains([1, 2, 3], 3)        # True
contains_all([1, 2, 3], [3, 1, 4])  # False
index([1, 2, 3], 4)           # -1
last_index([0, 1, 3, 4, 2, 0], 0)   # 5
index_all([1, 2, 3, 4, 5, 3, 9], 3) # [2, 5]

reverse([1, 3, 2, 2, 4])      # [4, 2, 2, 3, 1], a new list

items = ["a", "b", "c"]
reverse_self(items)           # items is now ["c", "b", "a"]

delete([1, 2, 3, 4], 2)       # [1, 2, 4], a new list
delete([1, 2, 3, 4], -1)      # raises IndexOutOfRangeError
```

`max_value` and `min_value` raise `ValueError` when given no values.
`IndexOutOfRangeError` is an `IndexError` carrying the `length` and `index`
involved.

Every search function has a `*_func` companion (`contains_func`,
`contains_any_func`, `contains_all_func`, `index_func`, `last_index_func`,
`index_all_func`) that takes an `equal(a, b)` callable, for elements that
cannot be compared with `==` or hashed. `contains_any` reports whether any
element of the second list is in the first.

`map_items(src, fn)` calls `fn(index, item)` for every element and returns
the results. `filter_map(src, fn)` expects `fn(index, item)` to return a
`(value, keep)` pair and returns the values whose `keep` is true.

## Set operations

```python
from ekit.setops import diff_set, intersect_set, symmetric_diff_set, union_set

sorted(diff_set([1, 3, 2, 2, 4], [3, 4, 5, 6]))             # [1, 2]
sorted(intersect_set([1, 2, 3, 3, 4], [1, 1, 3]))           # [1, 3]
sorted(symmetric_diff_set([1, 3, 4, 2], [2, 5, 7, 3]))      # [1, 4, 5, 7]
sorted(union_set([1, 3, 4, 5], [1, 4, 7]))                  # [1, 3, 4, 5, 7]
```

Results are deduplicated; do not rely on their order. Each operation also
has a `*_func` variant (`diff_set_func`, `intersect_set_func`,
`symmetric_diff_set_func`, `union_set_func`) taking an `equal` callable.

## Thread-safe containers

- `ekit.syncmap.SyncMap`: a lock-protected map. `load`, `load_or_store` and
  `load_and_delete` return a `(value, flag)` pair; `store`, `delete` and
  `for_each(fn)` complete the set, and `for_each` stops as soon as `fn`
  returns a false value. A key that is missing and a key stored with the
  value `None` are told apart.
- `ekit.pool.Pool`: hands out objects with `get`, creating them with the
  given factory when none are free, and takes them back with `put`. A
  factory that returns `None` makes `get` raise `TypeError`.
- `ekit.atomic.AtomicValue`: holds one value (`None` by default) with
  `load`, `store`, `swap` and `compare_and_swap`.

```python
from ekit.atomic import AtomicValue

value = AtomicValue(123)
value.swap(456)                  # 123
value.compare_and_swap(456, 789) # True
value.compare_and_swap(455, 1)   # False
value.load()                     # 789
```

## Queues

```python
from ekit.priority_queue import PriorityQueue, QueueFullError

def compare(a, b):
    return (a > b) - (a < b)

queue = PriorityQueue(3, compare)   # a capacity of 0 or less means unbounded
for n in (3, 1, 2):
    queue.enqueue(n)
len(queue)                          # 3
queue.cap()                         # 3
queue.peek()                        # 1
queue.dequeue()                     # 1
```

The comparator returns a negative number, zero or a positive number, and
the smallest element comes out first. Enqueueing into a full queue raises
`QueueFullError`; peeking at or dequeueing from an empty one raises
`QueueEmptyError`. `ConcurrentPriorityQueue` has the same interface and may
be shared between threads.

`ekit.delay_queue.DelayQueue(capacity)` holds elements implementing the
`Delayable` protocol, whose `delay()` returns the seconds left before the
element is due. `dequeue(timeout)` blocks until the element with the
shortest delay is due, and `enqueue(item, timeout)` blocks while the queue
is full. The timeout is in seconds; `None` waits without limit, and when it
passes `TimeoutError` is raised. Timing depends on thread wake-ups, so
expect some milliseconds of slack.

## Database column values

`ekit.json_column.JsonColumn` has `val` and `valid` fields. `value()`
returns the value as compact JSON bytes, or `None` when the column is not
valid. `scan(src)` accepts bytes, a string or `None` (which leaves the
column untouched), parses the JSON and marks the column valid; any other
type raises `TypeError`. Dataclasses are written as JSON objects, and an
optional `decode` callable turns the parsed JSON back into the wanted type.

`ekit.encrypt_column.EncryptColumn` has `val`, `valid` and `key` fields and
encrypts with AES-GCM; `value()` returns a random nonce followed by the
sealed data, and `scan(src)` decrypts it and loads `val`. The `kind` field,
a `ValueKind`, picks how the value is turned into bytes: strings and bytes
as they are, integers and floats in big-endian fixed-width form (`INT` and
`UINT` as 64 bits), and everything else, booleans included, as JSON. When
`kind` is `None` it is taken from the current `val`, so set it on a column
that starts empty. The key (string or bytes) must be 16, 24 or 32 bytes
long, otherwise `KeyLengthError` is raised; asking an invalid column for
its value raises `InvalidColumnError`. A string passed to `scan` that fails
to decrypt is ignored.

## What this package does not do

The column classes only produce and read the values to be stored; the
package does not connect to, query or manage any database.