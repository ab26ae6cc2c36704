"""Sequential tapes of 32-bit integers stored in binary files."""

from __future__ import annotations

import os
import struct
from abc import ABC, abstractmethod
from contextlib import suppress
from typing import BinaryIO

_INT = struct.Struct("=i")
_WIDTH = _INT.size


class Tape(ABC):
    """A tape holding integers, accessed through a single moving head."""

    @abstractmethod
    def read(self) -> int:
        """Read the value under the head and advance the head."""

    @abstractmethod
    def write(self, value: int) -> None:
        """Write a value under the head and advance the head."""

    @abstractmethod
    def move(self, offset: int) -> None:
        """Move the head by ``offset`` cells."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of values stored on the tape."""

    @abstractmethod
    def flush(self) -> None:
        """Make pending writes visible on the medium."""

    @abstractmethod
    def clear(self) -> None:
        """Erase everything stored on the tape."""


class FileTape(Tape):
    """A tape backed by a file of native-endian 32-bit signed integers.

    Switching from reading to writing truncates the file, and the head
    keeps its position across the switch.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = os.fspath(path)
        self._position = 0
        self._reading = True
        self._file: BinaryIO | None = self._open_for_reading()

    @property
    def position(self) -> int:
        """Index of the cell under the head."""
        return self._position

    @property
    def reading(self) -> bool:
        """Whether the tape is currently in reading mode."""
        return self._reading

    @property
    def path(self) -> str:
        return self._path

    def _open_for_reading(self) -> BinaryIO | None:
        try:
            return open(self._path, "rb")
        except FileNotFoundError:
            return None

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _seek_head(self) -> None:
        if self._file is not None:
            self._file.seek(self._position * _WIDTH)

    def _prepare_read(self) -> None:
        if self._reading:
            return
        self._reading = True
        self._close_file()
        self._file = self._open_for_reading()
        self._seek_head()

    def _prepare_write(self) -> None:
        if not self._reading:
            return
        self._reading = False
        self._close_file()
        self._file = open(self._path, "wb")
        self._seek_head()

    def read(self) -> int:
        self._prepare_read()
        self._position += 1
        data = self._file.read(_WIDTH) if self._file is not None else b""
        if len(data) < _WIDTH:
            raise EOFError(
                f"no value at position {self._position - 1} of {self._path}"
            )
        return _INT.unpack(data)[0]

    def write(self, value: int) -> None:
        self._prepare_write()
        self._position += 1
        assert self._file is not None
        self._file.write(_INT.pack(value))

    def move(self, offset: int) -> None:
        target = self._position + offset
        if target < 0:
            raise ValueError(f"cannot move head to position {target}")
        self._position = target
        self._seek_head()

    def size(self) -> int:
        return os.path.getsize(self._path) // _WIDTH

    def flush(self) -> None:
        if self._file is not None and not self._reading:
            self._file.flush()

    def clear(self) -> None:
        self._close_file()
        with suppress(FileNotFoundError):
            os.remove(self._path)
        self._file = open(self._path, "wb")
        if self._reading:
            self._file.close()
            self._file = open(self._path, "rb")

    def close(self) -> None:
        """Close the underlying file, flushing pending writes."""
        self._close_file()

    def __enter__(self) -> FileTape:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class StatTape(Tape):
    """A file tape that accumulates the simulated time of every operation.

    ``rw_time`` is charged per read or write, ``move_time`` per cell the
    head travels, capped at ``reset_time`` for any single movement.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        rw_time: int,
        move_time: int,
        reset_time: int,
    ) -> None:
        self._tape = FileTape(path)
        self.rw_time = rw_time
        self.move_time = move_time
        self.reset_time = reset_time
        self._time = 0

    @property
    def time(self) -> int:
        """Total simulated time spent since creation or the last reset."""
        return self._time

    def _rewind_cost(self) -> int:
        return min(self.reset_time, self._tape.position * self.move_time)

    def read(self) -> int:
        if not self._tape.reading:
            self._time += self._rewind_cost()
        self._time += self.rw_time
        return self._tape.read()

    def write(self, value: int) -> None:
        if self._tape.reading:
            self._time += self._rewind_cost()
        self._time += self.rw_time
        self._tape.write(value)

    def move(self, offset: int) -> None:
        self._time += min(abs(offset) * self.move_time, self.reset_time)
        self._tape.move(offset)

    def size(self) -> int:
        return self._tape.size()

    def flush(self) -> None:
        self._tape.flush()

    def clear(self) -> None:
        self._tape.clear()

    def reset_timer(self) -> None:
        """Set the accumulated time back to zero."""
        self._time = 0

    def close(self) -> None:
        self._tape.close()

    def __enter__(self) -> StatTape:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()