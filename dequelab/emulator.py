"""An interactive model of a string deque with a cursor, driven like a form.

The emulator keeps the deque, a cursor position (which may point one past the
last element, the "end" row), and the text fields a user types into. Every
operation reads its input from those fields and updates the cursor and the
fields the same way the form does.
"""

from __future__ import annotations

import bisect
import random
from dataclasses import dataclass
from itertools import pairwise

from dequelab.algo import merge_sort

TEA: tuple[str, ...] = (
    "Чай Лунцзин",
    "Эрл Грей",
    "Сенча",
    "Пуэр",
    "Дарджилинг",
    "Ассам",
    "Матча",
    "Ганпаудер",
    "Оолонг",
    "Лапсанг Сушонг",
)

CAKES: tuple[str, ...] = (
    "Красный бархат",
    "Наполеон",
    "Медовик",
    "Тирамису",
    "Прага",
    "Чизкейк",
    "Захер",
    "Эстерхази",
    "Морковный торт",
    "Чёрный лес",
)

_MAX_SIZE = 0xFFFFFFFF


@dataclass(frozen=True)
class Controls:
    """Which cursor- and size-dependent actions are currently available."""

    pop_front: bool
    pop_back: bool
    edit: bool
    erase: bool
    increment: bool
    decrement: bool


def _parse_size(text: str) -> int:
    """Read an unsigned size the lenient way: anything unreadable counts as 0."""
    digits = text.strip()
    if digits.startswith("+"):
        digits = digits[1:]
    if not digits or not (digits.isascii() and digits.isdigit()):
        return 0
    value = int(digits)
    return value if value <= _MAX_SIZE else 0


def _less_ignore_case(first: str, second: str) -> bool:
    return first.lower() < second.lower()


class DequeEmulator:
    """A deque of strings with a cursor and the text fields that feed it.

    ``text`` is the element field, ``size_text`` the size field, ``count_text``
    the field searched by :meth:`count` and ``count_result`` where its answer
    is shown.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._items: list[str] = []
        self._position = 0
        self._rng = rng if rng is not None else random.Random()
        self.text = ""
        self.size_text = "0"
        self.count_text = ""
        self.count_result = ""
        self._apply_model()

    # ----- state -----------------------------------------------------------

    @property
    def items(self) -> tuple[str, ...]:
        """The deque's contents, front first."""
        return tuple(self._items)

    @property
    def position(self) -> int:
        """The cursor's row; equal to the length when it stands on "end"."""
        return self._position

    def rows(self) -> list[str]:
        """The listing as shown: numbered elements followed by an "end" row."""
        return [f"{index}: {item}" for index, item in enumerate(self._items)] + ["end"]

    def controls(self) -> Controls:
        at_end = self.at_end()
        non_empty = bool(self._items)
        return Controls(
            pop_front=non_empty,
            pop_back=non_empty,
            edit=not at_end,
            erase=not at_end,
            increment=not at_end,
            decrement=self._position != 0,
        )

    def at_end(self) -> bool:
        return self._position == len(self._items)

    def current(self) -> str | None:
        """The element under the cursor, or None on the "end" row."""
        return None if self.at_end() else self._items[self._position]

    def set_random(self, rng: random.Random) -> None:
        self._rng = rng

    # ----- refresh ---------------------------------------------------------

    def _apply_model(self) -> None:
        self.size_text = str(len(self._items))
        self._apply_iterator()

    def _apply_iterator(self) -> None:
        self.text = "" if self.at_end() else self._items[self._position]

    def _is_sorted(self) -> bool:
        return all(a <= b for a, b in pairwise(self._items))

    def _require_element(self, action: str) -> None:
        if self.at_end():
            raise IndexError(f"cannot {action}: the cursor is at the end")

    def _require_items(self, action: str) -> None:
        if not self._items:
            raise IndexError(f"cannot {action}: the deque is empty")

    # ----- cursor ----------------------------------------------------------

    def select(self, row: int) -> None:
        """Move the cursor to ``row``; rows past the last element mean "end"."""
        if row < 0:
            return
        self._position = min(row, len(self._items))
        self._apply_iterator()

    def begin(self) -> None:
        self._position = 0
        self._apply_iterator()

    def end(self) -> None:
        self._position = len(self._items)
        self._apply_iterator()

    def increment(self) -> None:
        if not self.at_end():
            self._position += 1
        self._apply_iterator()

    def decrement(self) -> None:
        if self._position != 0:
            self._position -= 1
        self._apply_iterator()

    # ----- modifiers -------------------------------------------------------

    def push_back(self) -> None:
        if not self.text:
            return
        self._items.append(self.text)
        self._position = 0
        self._apply_model()

    def push_front(self) -> None:
        if not self.text:
            return
        self._items.insert(0, self.text)
        self._position = 0
        self._apply_model()

    def pop_back(self) -> None:
        self._require_items("pop_back")
        self._items.pop()
        self._position = 0
        self._apply_model()

    def pop_front(self) -> None:
        self._require_items("pop_front")
        self._items.pop(0)
        self._position = 0
        self._apply_model()

    def clear(self) -> None:
        self._items.clear()
        self._position = 0
        self._apply_model()

    def insert(self) -> None:
        """Insert the element field before the cursor (at the end if it is there)."""
        if self.text:
            self._items.insert(self._position, self.text)
            self._position = 0
        self._apply_model()

    def erase(self) -> None:
        if not self.at_end():
            del self._items[self._position]
            self._position = 0
        self._apply_model()

    def edit(self) -> None:
        """Replace the element under the cursor with the element field."""
        self._require_element("edit")
        self._items[self._position] = self.text
        self._apply_model()

    def resize(self) -> None:
        """Resize to the number in the size field, padding with empty strings."""
        size = _parse_size(self.size_text)
        if size < len(self._items):
            del self._items[size:]
        else:
            self._items.extend([""] * (size - len(self._items)))
        self._position = 0
        self._apply_model()

    def load_tea(self) -> None:
        self._items = list(TEA)
        self._position = 0
        self._apply_model()

    def load_cakes(self) -> None:
        self._items = list(CAKES)
        self._position = 0
        self._apply_model()

    # ----- queries ---------------------------------------------------------

    def find(self) -> None:
        """Move the cursor to the first element equal to the element field."""
        try:
            self._position = self._items.index(self.text)
        except ValueError:
            self._position = len(self._items)
        self._apply_iterator()

    def count(self) -> int:
        """Count elements equal to the count field and show the result."""
        found = self._items.count(self.count_text)
        self.count_result = str(found)
        return found

    def min_element(self) -> None:
        if self._items:
            self._position = min(range(len(self._items)), key=self._items.__getitem__)
        else:
            self._position = 0
        self._apply_iterator()

    def max_element(self) -> None:
        if self._items:
            self._position = max(range(len(self._items)), key=self._items.__getitem__)
        else:
            self._position = 0
        self._apply_iterator()

    def lower_bound(self) -> None:
        """On a sorted deque, move to the first element not less than the field."""
        if not self._is_sorted():
            return
        self._position = bisect.bisect_left(self._items, self.text)
        self._apply_iterator()

    def upper_bound(self) -> None:
        """On a sorted deque, move to the first element greater than the field."""
        if not self._is_sorted():
            return
        self._position = bisect.bisect_right(self._items, self.text)
        self._apply_iterator()

    # ----- algorithms ------------------------------------------------------

    def sort(self) -> None:
        self._items.sort()
        self._position = 0
        self._apply_model()

    def sort_ignore_case(self) -> None:
        """Merge sort that ignores letter case."""
        self._items = merge_sort(self._items, _less_ignore_case)
        self._position = 0
        self._apply_model()

    def unique(self) -> None:
        """Drop adjacent duplicates, but only when the deque is sorted."""
        if not self._is_sorted():
            return
        deduplicated: list[str] = []
        for item in self._items:
            if not deduplicated or deduplicated[-1] != item:
                deduplicated.append(item)
        self._items = deduplicated
        self._position = 0
        self._apply_model()

    def reverse(self) -> None:
        self._items.reverse()
        self._apply_model()

    def shuffle(self) -> None:
        self._rng.shuffle(self._items)
        self._apply_model()