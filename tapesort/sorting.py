"""External merge sorting of tapes with a bounded in-memory buffer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from .tape import Tape

_END = object()


class NotEnoughTapesError(RuntimeError):
    """Raised when a sorter is given fewer temporary tapes than it needs."""


class ExternalSorter(ABC):
    """Sorts a tape using at most ``mem_size`` values held in memory."""

    def __init__(self, mem_size: int) -> None:
        if mem_size < 1:
            raise ValueError(f"memory size must be positive, got {mem_size}")
        self.mem_size = mem_size

    @abstractmethod
    def sort(self, in_tape: Tape, out_tape: Tape, tmp_tapes: Sequence[Tape]) -> None:
        """Write the values of ``in_tape`` in ascending order to ``out_tape``."""

    @staticmethod
    def _read_buffer(tape: Tape, count: int) -> list[int]:
        return [tape.read() for _ in range(count)]

    @staticmethod
    def _write_buffer(tape: Tape, values: Iterable[int]) -> None:
        for value in values:
            tape.write(value)
        tape.flush()

    def _sorted_chunks(self, tape: Tape, total: int):
        for start in range(0, total, self.mem_size):
            yield sorted(self._read_buffer(tape, min(self.mem_size, total - start)))


class SimpleSorter(ExternalSorter):
    """Merges each sorted chunk into the accumulated result; needs one temporary tape."""

    def sort(self, in_tape: Tape, out_tape: Tape, tmp_tapes: Sequence[Tape]) -> None:
        if not tmp_tapes:
            raise NotEnoughTapesError("Not enough tapes")
        tmp = tmp_tapes[0]
        tmp.clear()
        out_tape.clear()
        first, second = out_tape, tmp
        total = in_tape.size()
        for chunk in self._sorted_chunks(in_tape, total):
            self._merge(first, second, chunk)
            first, second = second, first
        if first is not out_tape:
            self._merge(tmp, out_tape, [])
        in_tape.move(-total)

    def _merge(self, source: Tape, target: Tape, chunk: list[int]) -> None:
        source_size = source.size()
        if source_size == 0:
            self._write_buffer(target, chunk)
            target.move(-len(chunk))
            return
        values = iter(chunk)
        chunk_value = next(values, _END)
        source_value = source.read()
        source_left = source_size
        while source_left or chunk_value is not _END:
            if source_left and (chunk_value is _END or source_value < chunk_value):
                target.write(source_value)
                source_left -= 1
                if source_left:
                    source_value = source.read()
            else:
                target.write(chunk_value)
                chunk_value = next(values, _END)
        source.move(-source_size)
        target.flush()
        target.move(-(source_size + len(chunk)))


class FastSorter(ExternalSorter):
    """Bottom-up merge sort of sorted blocks; needs two temporary tapes."""

    def sort(self, in_tape: Tape, out_tape: Tape, tmp_tapes: Sequence[Tape]) -> None:
        if len(tmp_tapes) < 2:
            raise NotEnoughTapesError("Not enough tapes")
        out_tape.clear()
        for tape in tmp_tapes[:2]:
            tape.clear()
        first, second, writer = out_tape, tmp_tapes[0], tmp_tapes[1]
        total = in_tape.size()
        for chunk in self._sorted_chunks(in_tape, total):
            self._write_buffer(first, chunk)
            self._write_buffer(second, chunk)
        first.move(-total)
        second.move(-total)
        self._merge_sorted_blocks(first, second, writer)
        in_tape.move(-total)

    def _merge_sorted_blocks(self, first: Tape, second: Tape, writer: Tape) -> None:
        block = self.mem_size
        total = first.size()
        while block < total:
            self._merge_many(first, second, writer, block)
            block *= 2
            first.move(-total)
            second.move(-total)
            writer.move(-total)
            for _ in range(total):
                first.write(writer.read())
            first.flush()
            first.move(-total)
            writer.move(-total)
            second, writer = writer, second

    def _merge_many(self, first: Tape, second: Tape, writer: Tape, block: int) -> None:
        total = first.size()
        left = 0
        right = min(block, total)
        second.move(right)
        while left < total or right < total:
            edge_left = min(total, left + block)
            edge_right = min(total, right + block)
            self._merge_block(first, second, writer, edge_left - left, edge_right - right)
            skip_left = min(block, total - edge_left)
            skip_right = min(block, total - edge_right)
            left = edge_left + skip_left
            right = edge_right + skip_right
            first.move(skip_left)
            second.move(skip_right)

    @staticmethod
    def _merge_block(
        first: Tape, second: Tape, writer: Tape, left_count: int, right_count: int
    ) -> None:
        left_value = first.read() if left_count else 0
        right_value = second.read() if right_count else 0
        while left_count or right_count:
            if not left_count or (right_count and left_value > right_value):
                writer.write(right_value)
                right_count -= 1
                if right_count:
                    right_value = second.read()
            else:
                writer.write(left_value)
                left_count -= 1
                if left_count:
                    left_value = first.read()
        writer.flush()