"""Helpers for inspecting parent chains of theme sources."""

from __future__ import annotations

from collections.abc import Iterator

from themesource.core.exceptions import ThemeSourceCycleError
from themesource.sources.base import HierarchicalThemeSource, ThemeSource


def _walk(source: ThemeSource) -> Iterator[ThemeSource]:
    current: ThemeSource | None = source
    while current is not None:
        yield current
        if not isinstance(current, HierarchicalThemeSource):
            return
        current = current.get_parent()


def find_cycle(source: ThemeSource) -> list[ThemeSource] | None:
    """
    Find a loop in the parent chain starting at ``source``.

    Returns:
        The sources forming the loop, starting with the first repeated one,
        or None if the chain terminates
    """
    seen: dict[int, int] = {}
    visited: list[ThemeSource] = []
    for current in _walk(source):
        index = seen.get(id(current))
        if index is not None:
            return visited[index:]
        seen[id(current)] = len(visited)
        visited.append(current)
    return None


def iter_chain(source: ThemeSource) -> Iterator[ThemeSource]:
    """Yield ``source`` and then each of its ancestors, nearest first.

    Raises ``ThemeSourceCycleError`` when a source is reached twice.
    """
    seen: set[int] = set()
    visited: list[ThemeSource] = []
    for current in _walk(source):
        if id(current) in seen:
            raise ThemeSourceCycleError(
                message=f"Theme source chain loops back to {current!r}",
                chain=visited + [current],
            )
        seen.add(id(current))
        visited.append(current)
        yield current


def check_acyclic(source: ThemeSource) -> None:
    """Raise ``ThemeSourceCycleError`` if the chain from ``source`` loops."""
    cycle = find_cycle(source)
    if cycle is not None:
        raise ThemeSourceCycleError(
            message=f"Theme source chain contains a cycle of length {len(cycle)}",
            chain=cycle,
        )


def chain_depth(source: ThemeSource) -> int:
    """Number of sources in the chain starting at ``source``."""
    return sum(1 for _ in iter_chain(source))
