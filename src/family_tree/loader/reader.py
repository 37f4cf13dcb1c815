# src/family_tree/loader/reader.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from family_tree.core.exceptions import TreeFormatError, TreeLoadError
from family_tree.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class Line:
    """
    A single line of a saved tree file.

    Attributes:
        lineno: 1-based line number in the original file.
        text: The line content without trailing newline characters.
    """
    lineno: int
    text: str


@dataclass
class TreeRecord:
    """
    One individual as it appears on disk, before relinking.

    ``children`` holds the raw identifiers exactly as written; range checks
    happen when the records are turned back into a tree.
    """
    name: str
    birth_year: int
    death_year: int
    children: List[int] = field(default_factory=list)
    lineno: int = 0


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


class LineCursor:
    """
    Forward-only reader over numbered lines.

    Mirrors the framing of the save format: names take a whole line, numbers
    take the first token of their line (anything after it is ignored), and
    child identifiers are a token run that may wrap onto following lines.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = [
            Line(lineno=i, text=_strip_eol(text))
            for i, text in enumerate(lines, start=1)
        ]
        self._pos = 0

    @property
    def lineno(self) -> int:
        """Line number of the next unread line (one past the end at EOF)."""
        if self._pos < len(self._lines):
            return self._lines[self._pos].lineno
        return len(self._lines) + 1

    def at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def next_line(self, what: str) -> Line:
        if self.at_end():
            raise TreeFormatError(
                f"unexpected end of input while reading {what}", self.lineno
            )
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def skip_line(self) -> None:
        if not self.at_end():
            self._pos += 1

    def next_int(self, what: str) -> int:
        line = self.next_line(what)
        # Blank lines before a number are skipped.
        while not line.text.strip():
            line = self.next_line(what)
        token = line.text.split()[0]
        return _parse_int(token, what, line.lineno)

    def next_ints(self, count: int, what: str) -> List[int]:
        """
        Read ``count`` integers, spanning lines when needed.

        The rest of the line holding the last integer is discarded. When
        ``count`` is zero a single (normally empty) line is consumed.
        """
        values: List[int] = []
        if count == 0:
            self.skip_line()
            return values

        while len(values) < count:
            line = self.next_line(what)
            for token in line.text.split():
                values.append(_parse_int(token, what, line.lineno))
                if len(values) == count:
                    break
        return values


def _parse_int(token: str, what: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise TreeFormatError(
            f"expected an integer for {what}, got {token!r}", lineno
        ) from None


def _read_count(cursor: LineCursor, what: str) -> int:
    lineno = cursor.lineno
    value = cursor.next_int(what)
    if value < 0:
        raise TreeFormatError(f"negative {what}: {value}", lineno)
    return value


def parse_tree_lines(lines: Iterable[str]) -> List[TreeRecord]:
    """
    Parse the text of a saved tree into records.

    Layout::

        <count>
        <name>            \\
        <birth year>       |
        <death year>       |  repeated <count> times
        <child count>      |
        <child ids ...>   /

    Raises:
        TreeFormatError: on empty input, non-numeric fields, negative counts
            or premature end of input.
    """
    cursor = LineCursor(lines)
    if cursor.at_end():
        raise TreeFormatError("empty file, cannot read person count", 1)

    count = _read_count(cursor, "person count")
    log.debug(f"Reading {count} people")

    records: List[TreeRecord] = []
    for index in range(count):
        name_line = cursor.next_line(f"name of person #{index}")
        birth = cursor.next_int(f"birth year of person #{index}")
        death = cursor.next_int(f"death year of person #{index}")
        child_count = _read_count(cursor, f"child count of person #{index}")

        last_record = index == count - 1
        if child_count == 0 and last_record and cursor.at_end():
            # Tolerate a file whose final empty child line was trimmed.
            children: List[int] = []
        else:
            children = cursor.next_ints(child_count, f"children of person #{index}")

        records.append(
            TreeRecord(
                name=name_line.text,
                birth_year=birth,
                death_year=death,
                children=children,
                lineno=name_line.lineno,
            )
        )

    if not cursor.at_end():
        log.debug(f"Ignoring trailing content from line {cursor.lineno}")

    return records


def read_tree_file(path: Union[str, Path]) -> List[TreeRecord]:
    """
    Read and parse a saved tree file.

    Raises:
        TreeLoadError: if the file cannot be opened or decoded.
        TreeFormatError: if its content is malformed.
    """
    file_path = Path(path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except FileNotFoundError:
        raise TreeLoadError(f"File not found: {file_path}") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise TreeLoadError(f"Cannot read {file_path}: {exc}") from exc

    return parse_tree_lines(lines)

