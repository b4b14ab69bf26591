import os
from pathlib import Path

from lps.models import SearchRequest


class ConfigError(ValueError):
    pass


def default_dop() -> int:
    return os.cpu_count() or 1


def parse_dop(value: str | None) -> int:
    if value is None:
        return default_dop()
    try:
        dop = int(value.strip())
    except ValueError:
        raise ConfigError(f"invalid degree of parallelism: '{value}'")
    if dop < 1:
        raise ConfigError(f"degree of parallelism must be a positive integer, got {dop}")
    return dop


def resolve_root(root: Path | None) -> Path:
    if root is None:
        return Path.cwd()
    if not root.is_dir():
        raise ConfigError(f"working directory '{root}' is not a directory")
    return root


def build_request(
    verbose: bool = False,
    filename: str | None = None,
    ignore_filename_case: bool = False,
    content: str | None = None,
    ignore_content_case: bool = False,
    dop: str | None = None,
    root: Path | None = None,
    recursive: bool = True,
) -> SearchRequest:
    return SearchRequest(
        verbose=verbose,
        filename_pattern=filename,
        ignore_filename_case=ignore_filename_case,
        content_pattern=content,
        ignore_content_case=ignore_content_case,
        dop=parse_dop(dop),
        root=resolve_root(root),
        recursive=recursive,
    )
