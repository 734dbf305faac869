"""Rich-based backlog table."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.table import Table

from prdcheck import DoneStory, StoryStatus, ValidationResult


class RichBacklogView:
    """Render a validated backlog as a terminal table.

    The runnable story is marked with an arrow; summary stories show the IDs
    they reserve.
    """

    _STATUS_STYLES: ClassVar[dict[StoryStatus, str]] = {
        StoryStatus.PENDING: "[yellow]pending[/]",
        StoryStatus.DONE: "[green]done[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def build_table(self, result: ValidationResult) -> Table:
        runnable_id = result.runnable_story.id if result.runnable_story is not None else None
        table = Table(title="Backlog", show_lines=False)
        table.add_column("", width=1)
        table.add_column("ID", justify="right")
        table.add_column("Status")
        table.add_column("Title")
        table.add_column("Depends on")
        table.add_column("Compacted from")

        for story in result.stories:
            compacted = story.compacted_from if isinstance(story, DoneStory) and story.compacted_from else ""
            table.add_row(
                "[bold cyan]>[/]" if story.id == runnable_id else "",
                str(story.id),
                self._STATUS_STYLES[story.status],
                story.title,
                ", ".join(str(dep_id) for dep_id in dict.fromkeys(story.depends_on)),
                compacted,
            )
        return table

    def print(self, result: ValidationResult) -> None:
        self._console.print(self.build_table(result))
        if result.all_done:
            self._console.print("[green]All stories done.[/]")
        elif result.runnable_story is not None:
            self._console.print(f"Next: story {result.runnable_story.id} - {result.runnable_story.title}")
