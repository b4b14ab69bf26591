from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SearchRequest:
    verbose: bool
    filename_pattern: str | None
    ignore_filename_case: bool
    content_pattern: str | None
    ignore_content_case: bool
    dop: int
    root: Path
    recursive: bool = True

    @property
    def content_search(self) -> bool:
        return self.content_pattern is not None


@dataclass(frozen=True)
class LineMatch:
    line: int
    column: int
    content: str


@dataclass(frozen=True)
class FileOnly:
    path: str


@dataclass(frozen=True)
class FileWithMatches:
    path: str
    matches: tuple[LineMatch, ...]


SearchResult = FileOnly | FileWithMatches
