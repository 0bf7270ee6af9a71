# ABOUTME: Simplified progress tracking using Rich's built-in capabilities
# ABOUTME: Spinner progress for the document loop of a corpus import

from typing import Any

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn


class SimpleProgressTracker:
    """Advances a Rich progress task as documents are processed."""

    def __init__(self, progress: Progress, task_id: Any):
        self.progress = progress
        self.task_id = task_id

    def __call__(self, document: str, index: int, total: int) -> None:
        self.progress.update(self.task_id, description=f"📄 {document}", completed=index - 1, total=total)

    def finish(self) -> None:
        task = next((t for t in self.progress.tasks if t.id == self.task_id), None)
        if task is not None and task.total is not None:
            self.progress.update(self.task_id, completed=task.total)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.finish()


def create_smart_progress(
    console: Console, initial_description: str = "📚 Importing question corpus..."
) -> tuple[Progress, Any, SimpleProgressTracker]:
    """Create a progress display with spinner and document counter.

    Args:
        console: Rich console instance
        initial_description: Initial progress description

    Returns:
        Tuple of (progress, task_id, tracker)
    """
    progress = Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    )

    task_id = progress.add_task(initial_description, total=None)
    tracker = SimpleProgressTracker(progress, task_id)

    return progress, task_id, tracker
