"""Level assembly for the presented map."""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

from valuestream.models.presentation import DependencyNode, Level
from valuestream.models.raw import RawNode


def assemble_levels(
    raw_levels: Iterable[Iterable[RawNode]],
    classify: Callable[[RawNode], DependencyNode],
) -> Tuple[Level, ...]:
    """Classify every node, keeping level order and node order as given.

    The incoming order drives the layout, so nothing is sorted, merged or
    dropped here.
    """

    return tuple(
        Level(nodes=tuple(classify(raw_node) for raw_node in raw_level))
        for raw_level in raw_levels
    )
