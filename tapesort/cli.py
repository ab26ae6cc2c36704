"""Command-line entry point: sort a tape file and report the simulated time."""

from __future__ import annotations

import re
import sys
import tempfile
from contextlib import ExitStack
from pathlib import Path

from .sorting import FastSorter, SimpleSorter
from .tape import StatTape

INT_SIZE = 4

USAGE = """\
Usage: tapesort <input file path> <output file path> <memory limit>
Optional flags:
-rw <number> : Timeout for reading/writing number from tape. Default 1
-move <number> : Timeout for moving head for one space. Default 10
-reset <number> : Timeout for moving tape more than one space. Default 100
-type <number> : Type of sort. 1 is slow sort with lower memory usage, 2 is fast sort with more memory usage. Default 2"""

_FLAGS = {"-rw": "rw", "-move": "move", "-reset": "reset", "-type": "type"}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse a leading integer the lenient way: anything else counts as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2 or len(args) % 2 == 0:
        print(USAGE)
        return 0
    in_path, out_path, memory_text, *flags = args

    memory_bytes = _to_int(memory_text)
    memory_limit = abs(memory_bytes) // INT_SIZE * (1 if memory_bytes >= 0 else -1)

    options = {"rw": 1, "move": 10, "reset": 100, "type": 2}
    for key, value in zip(flags[::2], flags[1::2]):
        if key not in _FLAGS:
            print(USAGE)
            return 0
        options[_FLAGS[key]] = _to_int(value)

    move_time = options["move"]
    reset_time = options["reset"]
    rw_time = (options["rw"] + move_time) * INT_SIZE

    sorter_cls = SimpleSorter if options["type"] == 1 else FastSorter
    try:
        sorter = sorter_cls(memory_limit)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    with tempfile.TemporaryDirectory() as tmp_dir, ExitStack() as stack:
        def open_tape(path: str | Path) -> StatTape:
            return stack.enter_context(StatTape(path, rw_time, move_time, reset_time))

        in_tape = open_tape(in_path)
        out_tape = open_tape(out_path)
        tmp_tapes = [open_tape(Path(tmp_dir) / "1"), open_tape(Path(tmp_dir) / "2")]
        try:
            sorter.sort(in_tape, out_tape, tmp_tapes)
        except (OSError, EOFError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        total = sum(tape.time for tape in (in_tape, out_tape, *tmp_tapes))

    print(f"Time: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())