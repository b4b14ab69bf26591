import threading

from rich.console import Console
from rich.markup import escape

from lps.arena import partition
from lps.channel import Sender, open_channel
from lps.models import FileOnly, SearchRequest
from lps.output import ReportPrinter
from lps.walker import collect_files
from lps.worker import search_chunk

console = Console(soft_wrap=True)
log_console = Console(stderr=True)


class WorkerError(RuntimeError):
    """One or more workers failed; results from their chunks may be missing."""

    def __init__(self, failures: list[tuple[str, Exception]]) -> None:
        self.failures = failures
        names = ", ".join(name for name, _ in failures)
        super().__init__(f"{len(failures)} worker(s) failed: {names}")


def _run_worker(
    chunk: list[str],
    request: SearchRequest,
    sender: Sender,
    failures: list[tuple[str, Exception]],
) -> None:
    try:
        search_chunk(chunk, request, sender)
    except Exception as e:
        # reported by run() once every worker has been joined
        failures.append((threading.current_thread().name, e))


def _start_workers(
    candidates: list[str],
    request: SearchRequest,
    sender: Sender,
    threads: list[threading.Thread],
    failures: list[tuple[str, Exception]],
) -> None:
    for i, chunk in enumerate(partition(candidates, request.dop)):
        handle = sender.clone()
        th = threading.Thread(
            target=_run_worker,
            args=(chunk, request, handle, failures),
            name=f"lps-worker-{i}",
        )
        try:
            th.start()
        except BaseException:
            handle.close()
            raise
        threads.append(th)


def run(request: SearchRequest, printer: ReportPrinter | None = None) -> int:
    """Search `request.root` and print every matching file. Returns the number of files reported."""
    printer = printer or ReportPrinter()

    if request.verbose:
        console.print(f"working directory: {request.root}", markup=False, highlight=False)
        console.print(f"DoP was set to {request.dop} threads", markup=False, highlight=False)

    def _skip_dir(error: OSError) -> None:
        if request.verbose:
            log_console.log(f"[yellow]Skipping directory[/] {escape(str(error))}")

    candidates = collect_files(
        str(request.root),
        name_filter=request.filename_pattern,
        ignore_case=request.ignore_filename_case,
        recursive=request.recursive,
        on_error=_skip_dir,
    )
    if request.verbose:
        log_console.log(f"Found [green]{len(candidates)}[/] candidate files")

    sender, receiver = open_channel()
    threads: list[threading.Thread] = []
    failures: list[tuple[str, Exception]] = []
    try:
        with sender:
            if not request.content_search:
                # listing only: no worker threads
                for path in candidates:
                    if not sender.send(FileOnly(path=path)):
                        break
            else:
                _start_workers(candidates, request, sender, threads, failures)
                if request.verbose:
                    log_console.log(f"Scanning with [green]{len(threads)}[/] workers")

        reported = printer.drain(receiver)
    finally:
        receiver.close()
        for th in threads:
            th.join()

    for name, error in failures:
        log_console.log(f"[red]Worker {escape(name)} failed:[/] {escape(repr(error))}")
    if failures:
        raise WorkerError(failures) from failures[0][1]

    if request.verbose:
        log_console.log(f"Reported [green]{reported}[/] files")
    return reported
