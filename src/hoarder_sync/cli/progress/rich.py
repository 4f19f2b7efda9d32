"""Rich-based sync progress display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TaskID, TextColumn, TimeElapsedColumn

from hoarder_sync.engine.progress import SyncPhase, SyncProgress

_STYLES = {
    SyncPhase.DISCOVER: ("cyan", "documents"),
    SyncPhase.FETCH: ("blue", "listings"),
    SyncPhase.RECONCILE: ("green", "bookmarks"),
    SyncPhase.DISPOSITIONS: ("magenta", "documents"),
}


def _label(phase: str) -> str:
    color, unit = _STYLES.get(phase, ("white", "items"))
    return f"[{color}]{phase}[/] [dim]{unit}[/]"


class RichSyncProgress(SyncProgress):
    """One progress row per phase, drawn on stderr.

    Phases without a known total (the engine discovers bookmarks page by page)
    count items and are closed at their final count::

        with RichSyncProgress() as progress:
            outcome = await HoarderSync.from_config(config, progress=progress).sync_now()
    """

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:<28}"),
            BarColumn(bar_width=24),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
        )
        self._rows: dict[str, TaskID] = {}

    def __enter__(self) -> RichSyncProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._rows[phase] = self._progress.add_task(_label(phase), total=total)

    def item_done(self, phase: str) -> None:
        if phase in self._rows:
            self._progress.advance(self._rows[phase])

    def phase_done(self, phase: str) -> None:
        row = self._rows.get(phase)
        if row is None:
            return
        completed = int(self._progress.tasks[row].completed)
        # An empty phase still renders as finished.
        self._progress.update(row, total=completed or 1, completed=completed or 1)

    def phase_error(self, phase: str, error: BaseException) -> None:
        row = self._rows.get(phase)
        if row is None:
            return
        self._progress.stop_task(row)
        self._progress.update(row, description=f"[red]✗ {phase}[/] [dim]{type(error).__name__}[/]")
