"""A line-oriented front end for the deque emulator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from dataclasses import asdict
from typing import TextIO

from dequelab.emulator import DequeEmulator

_QUIT = frozenset({"quit", "exit"})


class Shell:
    """Reads commands, drives an emulator and prints the resulting form.

    Commands that take the element field (push_back, insert, find, ...) use
    the rest of the line as its new value when one is given.
    """

    def __init__(self, emulator: DequeEmulator | None = None, out: TextIO | None = None) -> None:
        self.emulator = emulator if emulator is not None else DequeEmulator()
        self.out = out if out is not None else sys.stdout
        emu = self.emulator
        self._text_commands: dict[str, Callable[[], None]] = {
            "push_back": emu.push_back,
            "push_front": emu.push_front,
            "insert": emu.insert,
            "edit": emu.edit,
            "find": emu.find,
            "lower_bound": emu.lower_bound,
            "upper_bound": emu.upper_bound,
        }
        self._plain_commands: dict[str, Callable[[], None]] = {
            "pop_back": emu.pop_back,
            "pop_front": emu.pop_front,
            "clear": emu.clear,
            "erase": emu.erase,
            "min_element": emu.min_element,
            "max_element": emu.max_element,
            "sort": emu.sort,
            "sort_ci": emu.sort_ignore_case,
            "unique": emu.unique,
            "reverse": emu.reverse,
            "shuffle": emu.shuffle,
            "begin": emu.begin,
            "end": emu.end,
            "++": emu.increment,
            "--": emu.decrement,
            "tea": emu.load_tea,
            "cakes": emu.load_cakes,
            "show": lambda: None,
        }

    def execute(self, line: str) -> bool:
        """Run one command; return False when the command asks to stop."""
        name, _, argument = line.strip().partition(" ")
        has_argument = bool(_)
        emu = self.emulator

        if name in _QUIT:
            return False
        if name == "text":
            emu.text = argument
        elif name in self._text_commands:
            if has_argument:
                emu.text = argument
            self._text_commands[name]()
        elif name in self._plain_commands:
            self._plain_commands[name]()
        elif name == "select":
            try:
                row = int(argument)
            except ValueError:
                raise ValueError(f"select needs a row number, got {argument!r}") from None
            emu.select(row)
        elif name == "resize":
            if has_argument:
                emu.size_text = argument
            emu.resize()
        elif name == "count":
            if has_argument:
                emu.count_text = argument
            self.out.write(f"{emu.count()}\n")
            return True
        else:
            raise ValueError(f"unknown command: {name!r}")

        self.out.write(self.render())
        return True

    def render(self) -> str:
        """The listing with the cursor marked, followed by the form's fields."""
        emu = self.emulator
        lines = [
            f"{'>' if index == emu.position else ' '} {row}"
            for index, row in enumerate(emu.rows())
        ]
        enabled = [name for name, on in asdict(emu.controls()).items() if on]
        lines.append(f"size: {emu.size_text}")
        lines.append(f"text: {emu.text}")
        lines.append(f"enabled: {', '.join(enabled)}")
        return "\n".join(lines) + "\n"

    def run(self, lines: Iterable[str]) -> int:
        """Execute commands until input runs out or a quit command; return 0."""
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                if not self.execute(stripped):
                    break
            except (ValueError, IndexError) as error:
                self.out.write(f"error: {error}\n")
        return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Explore deque operations interactively.")
    parser.add_argument("script", nargs="?", help="file of commands; standard input if omitted")
    args = parser.parse_args(argv)

    shell = Shell(DequeEmulator(), sys.stdout)
    shell.out.write(shell.render())
    if args.script is None:
        return shell.run(sys.stdin)
    with open(args.script, encoding="utf-8") as script:
        return shell.run(script)


if __name__ == "__main__":
    raise SystemExit(main())