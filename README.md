# linearkit

Vector containers with one interface for traversal, folding and in-place
mapping. The package also has a suite that runs checks on them and prints a
report.

## Containers (`linearkit.vector`)

- `Vector` is a sequence of fixed size that you can resize.
  - `Vector()` is empty.
  - `Vector(n)` has `n` slots, and every slot holds `None`.
  - `Vector(iterable)` copies the values of the iterable in order.
  - A negative size raises `ValueError`. A `bool` size raises `TypeError`.
  - It supports `len()`, indexing, iteration, `reversed()` and `==`. Two vectors are equal when their elements are equal, one by one. Vectors are not hashable.
  - An index outside the vector raises `IndexError`. Negative indices are outside too.
  - `front()` and `back()` raise `EmptyContainerError` when the vector is empty. `EmptyContainerError` is a subclass of `LookupError`.
  - `is_empty()` and `exists(value)` answer questions about the contents.
  - `resize(size)` keeps the common prefix and fills any new slots with `None`.
  - `clear()` removes every slot.
- `SortableVector` is a `Vector` with `sort()`, which sorts in place in ascending order.

```python
from linearkit.vector import SortableVector
from linearkit.helpers import fold_add, fold_multiply, map_double

vec = SortableVector([4, 3, 1])
vec.front()                            # 4
vec.pre_order_fold(fold_add, 0)        # 8
vec.map(map_double)                    # values become 8, 6, 2
vec.sort()
list(vec)                              # [2, 6, 8]
vec.resize(2)
vec.post_order_fold(fold_multiply, 1)  # 12
```

Each vector has three kinds of operation:

- `traverse(fun)`, `pre_order_traverse(fun)` and `post_order_traverse(fun)` call `fun` on each element.
- `fold(fun, acc)`, `pre_order_fold(fun, acc)` and `post_order_fold(fun, acc)` compute `acc = fun(value, acc)` for each element and return the final `acc`.
- `map(fun)`, `pre_order_map(fun)` and `post_order_map(fun)` replace each element with `fun(element)`.

Pre-order and the plain forms visit the elements front to back. Post-order visits them back to front.

## Helpers (`linearkit.helpers`)

These are ready-made functions for the operations above:

- Traversal: `traverse_print`.
- Folds: `fold_add`, `fold_multiply`, `fold_parity`, `fold_string_concatenate`.
- Maps:
  - `map_increment` and `map_decrement`.
  - `map_double` and `map_half`. `map_half` truncates integers toward zero.
  - `map_invert` and `map_parity_invert`. `map_parity_invert` negates only odd values.
  - `map_increment_print`, `map_double_print` and `map_invert_print` also print each change.
- Map factories: `string_appender(suffix)` and `non_empty_string_appender(suffix)`.

## Checks (`linearkit.checks`)

`CheckTally(out=None)` runs checks on a container. It writes one numbered line
for each check to `out`, or to standard output when `out` is not given. It
keeps `count` and `errors`.

Each check takes an `expected` flag. Set it to `True` when the operation should
succeed or the comparison should hold.

The checks are:

- Container: `empty` and `size`.
- Contents: `exists`.
- Traversal: `traverse`, `traverse_pre_order` and `traverse_post_order`.
- Folds: `fold`, `fold_pre_order` and `fold_post_order`.
- Maps: `map`, `map_pre_order` and `map_post_order`.
- Reading: `get_at`, `get_front` and `get_back`.
- Writing: `set_at`, `set_front` and `set_back`.
- Comparison: `equal_linear`, `non_equal_linear`, `equal_vector` and `non_equal_vector`.

`record(passed)` counts a check by hand. `merge(other)` adds the counts of another tally.

## Suite (`linearkit.suite`)

`linearkit.suite` runs scripted checks on vectors of integers, floats and strings:

- `run_vector_int`, `run_vector_double` and `run_vector_string` each run one set of checks.
- `run_vector_suite` runs all three sets.

Each of these functions adds its counts to the tally it is given. To run the
whole suite from the command line:

```
linearkit-suite
```

It prints each check and the totals for each section. It ends with a summary
line of errors and tests and exits with status 0.

## Not included

The only containers are `Vector` and `SortableVector`. The package has no
linked-list, set or dictionary containers, and the suite checks vectors only.