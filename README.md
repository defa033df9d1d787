# drillbox

A collection of small, self-contained programming drills: puzzle solutions,
two styles of finite state machine, fixed-capacity containers, an LRU cache,
a bump allocator, a tiny field-document parser and a predator–prey simulation
on a grid.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `drillbox.hackerrank`

Plain functions for well-known array and string puzzles:

- `breaking_records(scores)` – `[best_breaks, worst_breaks]`: how often the
  highest and the lowest score so far were beaten. An empty list raises
  `ValueError`.
- `maximum_perimeter_triangle(sticks)` – the three sides, ascending, of the
  non-degenerate triangle with the largest perimeter, or `[-1]` if none exists.
- `migratory_birds(arr)` – the most frequent value, the smallest one on a tie.
- `strings_xor(s1, s2)` – digit-wise XOR of two binary strings over the length
  of `s1`; raises `ValueError` if `s2` is shorter.
- `grading_students(grades)` – grades of 38 or more are rounded up to the next
  multiple of five when they are less than three below it.
- `rotate_left(d, arr)` – left rotation by `d` places; `d` outside
  `0..len(arr)` raises `ValueError`.
- `kangaroo(x1, v1, x2, v2)` – `"YES"` when the two jumpers land on the same
  spot after the same number of jumps, otherwise `"NO"`.
- `picking_numbers(a)` – the size of the longest group of values that differ
  by at most one.
- `separate_numbers(s)` – the report text for whether a digit string splits
  into consecutive increasing numbers (`"NO\n"`, or `"YES <first>\n"` followed
  by a closing `"No\n"` line).

These are library functions only; there is no command that reads their input.

### `drillbox.camelcase`

Splits camelCase identifiers into words and combines words into identifiers.
`parse_input_line(op, lex, line)` takes a line of the form `op;lex;text`:
`S` splits, `C` combines, and `lex` is `M` (method, gets `()`), `C` (class)
or `V` (variable). Lines shorter than five characters give `""`.

```python
from drillbox.camelcase import parse_input_line

parse_input_line("S", "C", "S;C;LargeSoftwareBook")  # "large software book"
parse_input_line("S", "C", "S;M;plasticCup()")       # "plastic cup"
parse_input_line("C", "M", "C;M;white sheet of paper")  # "whiteSheetOfPaper()"
```

`convert_first_char(kind, word)` adjusts just the first letter for a kind.

The `drillbox-camelcase` command reads such lines from standard input, stops
at the first line shorter than five characters and prints one result per line:

```
echo "S;C;LargeSoftwareBook" | drillbox-camelcase
```

### `drillbox.fsm`

Two ways to build a finite state machine:

- `StateMachine` keeps one handler per `EventId` (`NOTHING`,
  `START_SENSORS_CMD`, `STOP_SENSORS_CMD`). `register_handler(event, handler)`
  stores a handler, replacing any earlier one; `handle_event(event)` returns the
  handler's result, or `False` when no handler is registered.
- `StateController` starts in `State.NONE`. `handle_event(event)` moves to
  `State.FULL` on `Event.ACTIVATE` and to `State.BACKGROUND` on
  `Event.DEACTIVATE`, prints `State transitioned to <state>` (to standard output,
  or to the stream given to the constructor) and returns the new state.

The demonstration runs both machines:

```
drillbox-fsm
```

### `drillbox.containers`

- `BoundedQueue(capacity, items=())` – first-in first-out. `push` raises
  `ContainerFullError` when the queue is full; `pop` drops the front item.
- `BoundedStack(capacity, items=())` – last-in first-out. `push` onto a full
  stack is silently ignored; `pop` drops the top item.

Both have `get(index)` (raises `IndexError` out of range), `empty()`, `len()`,
iteration and a `capacity` property; `pop` on an empty container does nothing.
A capacity below one raises `ValueError`.

### `drillbox.lru_cache`

`LRUCache(capacity)` implements the abstract `Cache` interface with
`set(key, value)` and `get(key)` (which returns `-1` for a missing key). Once
over capacity it evicts the entry set least recently; reading does not
refresh an entry, and a capacity of zero stores nothing.

`run_commands(lines)` reads `n capacity` followed by `n` commands
(`get key` or `set key value`) and returns the results of the `get`s. The
`drillbox-lru` command does the same from standard input and prints each result:

```
drillbox-lru < commands.txt
```

### `drillbox.allocator`

`SmallAllocator(size=1 MiB)` hands out consecutive slices of one byte arena as
writable `memoryview` blocks:

- `alloc(size)` reserves a block, raising `OutOfMemoryError` when it would not
  fit (the last byte of the arena is never handed out).
- `realloc(block, size)` reserves a new block and copies the start of `block`
  into it.
- `free(block)` releases the view; arena space is never reused.

`capacity` and `used` report the arena size and how much has been handed out.

### `drillbox.fields`

`parse_fields(xml_data)` reads a flat document such as

```
<data>
    <field1 type="int">123</field1>
    <field2 type="string">abc</field2>
</data>
```

and returns `[("field1", 123), ("field2", "abc")]`. An unknown type, a bad
integer or a missing `</data>` raises `ValueError`. `format_fields(fields)`
renders `field name:<name>, field value:<value>` lines. This is not a general
XML parser.

### `drillbox.leetcode`

- `largest_common_prefix(words)` – a longest prefix shared by at least two of
  the words (the alphabetically first among equals), or `""` if none.
- `longest_palindrome(s)` – the longest palindromic substring, leftmost on a tie.
- `add_two_numbers(l1, l2)` – adds numbers stored as `ListNode` chains of
  digits, least significant first. Build chains with
  `ListNode.from_digits(digits)` and read them back with `node.digits()`.

### `drillbox.pool`

A `Pool(m, n, rng=None)` grid holding `Victim` and `Predator` fish, one per
cell. Victims take one step in a random `Direction`, turning clockwise around
walls and other fish. Predators take up to two steps toward the nearest victim
and eat a victim they step onto; with no victims left they wander randomly.

- `set_victims(number)` / `set_predators(number)` place fish on random free cells.
- `add_fish(coord, fish)`, `remove_fish(coord)`, `is_fish_at(coord)`,
  `is_predator_at(coord)`, `nearest_victim_to(coord)` and `victims_empty()`
  inspect and change the grid.
- `simulate(steps)` runs the rounds and returns `(victims, predators)`.
- `render()` draws the grid with `V`, `P` and `e`.

`step_move_to`, `random_direction` and `random_coord` are the movement helpers.

```
drillbox-pool --size 5 5 --victims 12 --predators 3 --steps 40 --seed 1
```

All options are optional; the defaults are those shown, without a fixed seed.
The simulation runs without pausing and prints the starting grid and the
surviving counts only.