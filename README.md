# tapesort

Sort files of integers on simulated tape devices while holding only a
limited number of values in memory.

A *tape* is a file of native-endian 4-byte signed integers. It is read or
written one value at a time at the position of its head, and the head can be
moved back and forth. The package has three modules:

- `tapesort.tape`
  - `Tape`: the abstract interface: `read()`, `write(value)`,
    `move(offset)`, `size()`, `flush()`, `clear()`.
  - `FileTape(path)`: a tape backed by a binary file. Its `position` and
    `reading` properties show the head position and the current mode.
    Switching from reading to writing truncates the file, and the head keeps
    its position across the switch. Reading past the end raises `EOFError`.
    Moving the head before position 0 raises `ValueError`.
  - `StatTape(path, rw_time, move_time, reset_time)`: a file tape that adds up
    simulated time. Each read or write costs `rw_time`. A move costs
    `move_time` per cell, but never more than `reset_time`. Switching between
    reading and writing costs the same as rewinding from the current position.
    The total is in the `time` property, and `reset_timer()` sets it back to
    zero.

  Both file tapes have `close()` and can be used as context managers.
- `tapesort.sorting`
  - `SimpleSorter(mem_size)`: merges each sorted chunk into the result built
    so far. It needs one temporary tape.
  - `FastSorter(mem_size)`: a bottom-up merge of sorted blocks. It needs two
    temporary tapes.

  Both derive from `ExternalSorter`. Their `sort(in_tape, out_tape,
  tmp_tapes)` method writes the values of `in_tape` in ascending order to
  `out_tape`. If there are too few temporary tapes, it raises
  `NotEnoughTapesError`, a subclass of `RuntimeError`. A `mem_size` below 1
  raises `ValueError`.
- `tapesort.cli`: the `tapesort` command.

## Installation

```
pip install .
```

## Command line

```
tapesort <input file> <output file> <memory limit in bytes> [options]
```

| Flag              | Meaning                                                   | Default |
|-------------------|-----------------------------------------------------------|---------|
| `-rw <number>`    | time to read or write one number on a tape                | 1       |
| `-move <number>`  | time to move the head by one position                     | 10      |
| `-reset <number>` | most time one head movement may take                      | 100     |
| `-type <number>`  | `1` for the simple, low-memory sort; any other value for the fast one | 2 |

The memory limit is given in bytes. It is divided by 4, the integer size, to
get the number of values held in memory at once. Each tape is charged
`(rw + move) * 4` per read or write.

Numbers are parsed leniently: only a leading integer is read, and text with no
leading integer counts as 0.

The usage text is printed, and the command exits with status 0, if:

- the number of arguments is wrong, or
- a flag is not recognised.

If the memory limit comes to less than one value, or a tape cannot be read or
written, an error goes to standard error and the exit status is 1.

The two temporary tapes are created in a temporary directory. That directory
is removed when the sort finishes.

When the sort succeeds, the total simulated time over all four tapes is
printed:

```
$ tapesort numbers.bin sorted.bin 4000 -type 1
Time: 123456
```

## Library use

```python
from tapesort.tape import FileTape
from tapesort.sorting import FastSorter

with FileTape("numbers.bin") as src, FileTape("sorted.bin") as dst, \
        FileTape("tmp1.bin") as t1, FileTape("tmp2.bin") as t2:
    FastSorter(1000).sort(src, dst, [t1, t2])
```

After sorting, every tape's head is back at position 0 and the input tape's
contents are unchanged. The output tape and the temporary tapes are cleared
before use.

## Tests

```
pip install .[test]
pytest
```