"""Source locations: byte spans and a registry of loaded source files."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar


@dataclass(frozen=True)
class Span:
    """A half-open byte range ``[start, end)`` into one source file."""

    file_id: int
    start: int
    end: int

    DUMMY: ClassVar[Span]

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both ``self`` and ``other``."""
        if self.file_id != other.file_id:
            raise ValueError(
                f"cannot merge spans from files {self.file_id} and {other.file_id}"
            )
        return Span(self.file_id, min(self.start, other.start), max(self.end, other.end))

    def __len__(self) -> int:
        return self.end - self.start


Span.DUMMY = Span(0, 0, 0)


def _line_starts(content: str) -> list[int]:
    starts = [0]
    starts.extend(i + 1 for i, b in enumerate(content.encode("utf-8")) if b == 0x0A)
    return starts


@dataclass
class SourceFile:
    """One loaded source file with its line-start byte offsets."""

    id: int
    path: Path
    content: str
    line_starts: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        if not self.line_starts:
            self.line_starts = _line_starts(self.content)


class SourceMap:
    """Holds every source file and maps spans to line and column numbers."""

    def __init__(self) -> None:
        self._files: list[SourceFile] = []

    def __len__(self) -> int:
        return len(self._files)

    def add_file(self, path: str | Path, content: str) -> int:
        """Register a file and return its id."""
        file_id = len(self._files)
        self._files.append(SourceFile(file_id, Path(path), content))
        return file_id

    def get_file(self, file_id: int) -> SourceFile:
        if not 0 <= file_id < len(self._files):
            raise IndexError(f"no source file with id {file_id}")
        return self._files[file_id]

    def line_col(self, span: Span) -> tuple[int, int]:
        """Return the 1-based line and column (in characters) of ``span.start``."""
        source = self.get_file(span.file_id)
        data = source.content.encode("utf-8")
        if not 0 <= span.start <= len(data):
            raise ValueError(f"span start {span.start} is outside the file")
        line_idx = bisect_right(source.line_starts, span.start) - 1
        line_start = source.line_starts[line_idx]
        try:
            prefix = data[line_start:span.start].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"span start {span.start} is not on a character boundary") from exc
        return line_idx + 1, len(prefix) + 1