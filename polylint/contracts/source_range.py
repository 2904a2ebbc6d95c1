"""
Source Range - Positions, ranges and offset arithmetic.

Positions are zero-indexed {line, column} pairs. A SourceRange covers the
text from `start` up to (but not including) `end` in a single file.

Usage:
    from polylint.contracts.source_range import SourceRange, LineIndex

    index = LineIndex("abc\\ndef")
    start, end = index.source_range_to_offsets(
        SourceRange.from_coords("a.html", 1, 0, 1, 2)
    )
    # (4, 6)
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import List, Tuple

from .errors import OffsetMappingError


@dataclass(frozen=True, order=True)
class SourcePosition:
    """A zero-indexed line/column position. Ordered by line, then column."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceRange:
    """
    A span of text in one file.

    Example:
        SourceRange("index.html", SourcePosition(0, 2), SourcePosition(0, 3))
    """

    file: str
    """Identifier (url or relative path) of the file."""

    start: SourcePosition
    """First covered position."""

    end: SourcePosition
    """Position immediately after the last covered character."""

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(
                f"Range end {self.end} precedes start {self.start} in {self.file}"
            )

    @classmethod
    def from_coords(
        cls,
        file: str,
        start_line: int,
        start_column: int,
        end_line: int,
        end_column: int,
    ) -> "SourceRange":
        """Build a range from raw line/column numbers."""
        return cls(
            file=file,
            start=SourcePosition(start_line, start_column),
            end=SourcePosition(end_line, end_column),
        )

    @classmethod
    def zero(cls, file: str) -> "SourceRange":
        """Zero-width range anchored at the start of `file`."""
        return cls(file, SourcePosition(0, 0), SourcePosition(0, 0))

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def __str__(self) -> str:
        return f"{self.file}:{self.start}-{self.end}"


def compare_positions(a: SourcePosition, b: SourcePosition) -> int:
    """Return -1, 0 or 1 as `a` is before, equal to, or after `b`."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_position_and_range(
    position: SourcePosition,
    source_range: SourceRange,
    include_edges: bool,
) -> int:
    """
    Locate a position relative to a range.

    Args:
        position: Position to locate
        source_range: Range to compare against
        include_edges: Whether the start/end positions count as inside

    Returns:
        -1 if the position is before the range, 0 if inside, 1 if after
    """
    if include_edges:
        if position < source_range.start:
            return -1
        if position > source_range.end:
            return 1
        return 0
    if position <= source_range.start:
        return -1
    if position >= source_range.end:
        return 1
    return 0


def is_position_inside_range(
    position: SourcePosition,
    source_range: SourceRange,
    include_edges: bool = False,
) -> bool:
    return compare_position_and_range(position, source_range, include_edges) == 0


def are_ranges_equal(a: SourceRange, b: SourceRange) -> bool:
    """Same span, ignoring file."""
    return a.start == b.start and a.end == b.end


def do_ranges_overlap(a: SourceRange, b: SourceRange) -> bool:
    """
    Whether two ranges touch the same text.

    Ranges in different files never overlap. Ranges that merely share an
    endpoint (one ends where the other starts) do not overlap; identical
    ranges always do, including identical zero-width ranges.
    """
    if a.file != b.file:
        return False
    return (
        are_ranges_equal(a, b)
        or is_position_inside_range(a.start, b)
        or is_position_inside_range(a.end, b)
        or is_position_inside_range(b.start, a)
        or is_position_inside_range(b.end, a)
    )


class LineIndex:
    """
    Converts between positions and absolute offsets for one text snapshot.

    Lines are split on "\\n"; a "\\r" before it is counted as an ordinary
    column on that line, so CRLF text maps and splices without being
    normalized.
    """

    def __init__(self, contents: str):
        self._contents = contents
        self._line_starts: List[int] = [0]
        for offset, char in enumerate(contents):
            if char == "\n":
                self._line_starts.append(offset + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_length(self, line: int) -> int:
        """Length of `line` excluding its newline terminator."""
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            return self._line_starts[line + 1] - 1 - start
        return len(self._contents) - start

    def position_to_offset(self, position: SourcePosition) -> int:
        """
        Absolute character offset of a position.

        Raises:
            OffsetMappingError: If the position lies outside the text
        """
        if position.line < 0 or position.line >= len(self._line_starts):
            raise OffsetMappingError(
                f"Line {position.line} is out of range "
                f"(text has {len(self._line_starts)} lines)"
            )
        if position.column < 0 or position.column > self.line_length(position.line):
            raise OffsetMappingError(
                f"Column {position.column} is out of range for line "
                f"{position.line} (length {self.line_length(position.line)})"
            )
        return self._line_starts[position.line] + position.column

    def offset_to_position(self, offset: int) -> SourcePosition:
        if offset < 0 or offset > len(self._contents):
            raise OffsetMappingError(
                f"Offset {offset} is out of range (text length {len(self._contents)})"
            )
        line = bisect_right(self._line_starts, offset) - 1
        return SourcePosition(line, offset - self._line_starts[line])

    def source_range_to_offsets(self, source_range: SourceRange) -> Tuple[int, int]:
        """
        Map a range to a (start, end) pair of absolute offsets.

        Raises:
            OffsetMappingError: If either endpoint lies outside the text
        """
        start = self.position_to_offset(source_range.start)
        return start, self.position_to_offset(source_range.end)
