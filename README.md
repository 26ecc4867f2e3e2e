# dequelab

A small playground for learning how a double-ended queue and its iterator
behave. You keep a list of strings and a cursor that points either at an
element or just past the last one (the `end` row). Each operation changes the
list, moves the cursor, or both, the way the matching standard container
algorithm would.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The shell

```
dequelab [SCRIPT]
```

This starts a line-oriented shell. It reads commands from `SCRIPT` if given,
otherwise from standard input. Blank lines and lines starting with `#` are
skipped. `quit` or `exit` stops it.

After each command the shell prints the numbered rows with a final `end` row,
and marks the cursor's row with `>`. It then prints the size field, the element
field (`text:`), and which actions are currently available (`enabled:` lists
any of pop_front, pop_back, edit, erase, increment, decrement).

Commands that read the element field take an optional argument. When one is
given, it becomes the field's new value first:

- `text VALUE` sets the element field only
- `push_back`, `push_front`, `insert` add the field's text. Empty text adds
  nothing. `insert` puts it before the cursor.
- `edit` replaces the element under the cursor
- `find` moves to the first equal element, or to `end`
- `lower_bound`, `upper_bound` move the cursor only when the list is sorted

Other commands:

- `pop_back`, `pop_front`, `clear`, `erase`
- `resize [N]` resizes to the size field, padding with empty strings. Text
  that is not a number counts as 0.
- `count [TEXT]` prints how many elements equal the text
- `min_element`, `max_element`
- `sort`, `sort_ci` (case-insensitive merge sort), `unique` (only on a sorted
  list), `reverse`, `shuffle`
- `begin`, `end`, `++`, `--`, `select ROW` (rows past the last element mean
  `end`; negative rows are ignored)
- `tea`, `cakes` load sample lists
- `show` reprints the form

The `enabled:` line only reports availability; it does not block a command. If
you run `pop_back`/`pop_front` on an empty list, or `edit` at `end`, the shell
prints `error: ...` and carries on. `++` at `end` and `--` at the first row leave
the cursor where it is.

## Library use

```python
import random
from dequelab.emulator import DequeEmulator
from dequelab.algo import merge_sort

emu = DequeEmulator(random.Random(12))
emu.load_tea()
emu.sort()
print(emu.rows())      # ["0: ...", ..., "end"]
print(emu.controls())  # Controls(pop_front=True, ...)

emu.text = "Сенча"
emu.find()
print(emu.position, emu.current())

print(merge_sort(["b", "A", "c"], lambda a, b: a.lower() < b.lower()))
```

`DequeEmulator` keeps four text fields: `text`, `size_text`, `count_text` and
`count_result`. Operations read their input from these fields. The contents
are exposed as `items`, and the cursor as `position`.

`merge(first, second, less)` merges two ordered sequences. It takes from
`first` only when `less(a, b)` holds, so on a tie the element from `second`
comes first. `merge_sort(items, less)` is a top-down merge sort built on it,
and it returns a new list.

## What it does not do

There is no graphical window: the form is shown as text by the shell, or read
through the `DequeEmulator` object.