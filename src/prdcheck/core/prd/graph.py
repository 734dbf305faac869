"""Dependency cycle detection over ``dependsOn`` edges."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from prdcheck.core.contracts.story import DoneStory, PendingStory


class _Mark(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


class DependencyGraph:
    """Adjacency view of the stories' ``dependsOn`` relation.

    Every edge target is expected to be a known story id; the validator
    checks dependency resolution before cycle detection runs.
    """

    def __init__(self, stories: Sequence[PendingStory | DoneStory]) -> None:
        self._order = [story.id for story in stories]
        self._edges: dict[int, list[int]] = {story.id: list(story.depends_on) for story in stories}

    def dependencies_of(self, story_id: int) -> list[int]:
        return self._edges.get(story_id, [])

    def find_cycle(self) -> list[int] | None:
        """Return the first cycle found as a closed path (``[1, 2, 1]``), or ``None``.

        Depth-first search with three-colour marking, started from each story
        in document order. Iterative so deep chains do not hit the recursion
        limit.
        """
        marks = dict.fromkeys(self._edges, _Mark.UNVISITED)

        for root in self._order:
            if marks[root] is not _Mark.UNVISITED:
                continue

            path: list[int] = [root]
            # Each frame pairs a node with the index of its next edge to follow.
            stack: list[tuple[int, int]] = [(root, 0)]
            marks[root] = _Mark.IN_PROGRESS

            while stack:
                node, edge_index = stack[-1]
                deps = self._edges.get(node, [])
                if edge_index >= len(deps):
                    stack.pop()
                    path.pop()
                    marks[node] = _Mark.DONE
                    continue

                stack[-1] = (node, edge_index + 1)
                dep = deps[edge_index]
                mark = marks.get(dep, _Mark.DONE)
                if mark is _Mark.IN_PROGRESS:
                    start = path.index(dep)
                    return [*path[start:], dep]
                if mark is _Mark.UNVISITED:
                    marks[dep] = _Mark.IN_PROGRESS
                    path.append(dep)
                    stack.append((dep, 0))

        return None
