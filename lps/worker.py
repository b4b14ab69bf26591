from rich.console import Console
from rich.markup import escape

from lps.channel import Sender
from lps.models import FileWithMatches, LineMatch, SearchRequest

console = Console(stderr=True)


def _strip_newline(raw: bytes) -> bytes:
    if raw.endswith(b"\r\n"):
        return raw[:-2]
    if raw.endswith(b"\n"):
        return raw[:-1]
    return raw


def _fold(text: str) -> str:
    # lower-case per character, keeping characters whose lower form is longer,
    # so indexes still point into the raw line
    folded = []
    for c in text:
        low = c.lower()
        folded.append(low if len(low) == 1 else c)
    return "".join(folded)


def scan_file(
    file_path: str, pattern: str, ignore_case: bool = False, log: bool = False
) -> list[LineMatch] | None:
    """Scan a file line by line for `pattern`.

    Returns None if the file cannot be opened. Lines that are not valid UTF-8
    are skipped; a read error ends the scan with the matches found so far.
    """
    needle = _fold(pattern) if ignore_case else pattern
    matches: list[LineMatch] = []
    try:
        f = open(file_path, "rb")
    except OSError as e:
        if log:
            console.log(f"[yellow]Skipping file[/] {escape(file_path)}: {escape(str(e))}")
        return None

    with f:
        line_no = 0
        try:
            for raw in f:
                line_no += 1
                try:
                    line = _strip_newline(raw).decode("utf-8")
                except UnicodeDecodeError:
                    continue
                haystack = _fold(line) if ignore_case else line
                index = haystack.find(needle)
                if index >= 0:
                    matches.append(LineMatch(line=line_no, column=index + 1, content=line))
        except OSError as e:
            if log:
                console.log(
                    f"[yellow]Read failed[/] {escape(file_path)} at line {line_no + 1}: "
                    f"{escape(str(e))}"
                )
    return matches


def search_chunk(chunk: list[str], request: SearchRequest, sender: Sender) -> None:
    """Scan every file in `chunk` and send one result per file with matches.

    Always releases `sender`, so the receiver sees this worker finish even if
    it fails.
    """
    try:
        for file_path in chunk:
            matches = scan_file(
                file_path,
                request.content_pattern or "",
                request.ignore_content_case,
                log=request.verbose,
            )
            if not matches:
                continue
            if not sender.send(FileWithMatches(path=file_path, matches=tuple(matches))):
                # receiver is gone, nothing left to report to
                return
    finally:
        sender.close()
