import os
from typing import Callable


def _name_matches(name: str, name_filter: str | None, ignore_case: bool) -> bool:
    if not name_filter:
        return True
    if ignore_case:
        return name_filter.lower() in name.lower()
    return name_filter in name


def collect_files(
    directory: str,
    name_filter: str | None = None,
    ignore_case: bool = False,
    recursive: bool = True,
    on_error: Callable[[OSError], None] | None = None,
) -> list[str]:
    """Return every regular file under `directory` whose name contains `name_filter`.

    Unreadable directories are reported to `on_error` and skipped.
    """
    files: list[str] = []
    if not recursive:
        try:
            entries = sorted(os.scandir(directory), key=lambda e: e.name)
        except OSError as e:
            if on_error is not None:
                on_error(e)
            return files
        for entry in entries:
            if entry.is_file() and _name_matches(entry.name, name_filter, ignore_case):
                files.append(entry.path)
        return files

    for root, dirnames, filenames in os.walk(directory, onerror=on_error):
        # sorted in place so os.walk descends in a stable order
        dirnames.sort()
        for filename in sorted(filenames):
            if not _name_matches(filename, name_filter, ignore_case):
                continue
            path = os.path.join(root, filename)
            if os.path.isfile(path):
                files.append(path)
    return files
