"""Consistency checks for raw value stream graphs."""

from __future__ import annotations

import logging
from typing import List, Set

from valuestream.errors import MalformedGraphError
from valuestream.models.raw import RawGraph

_LOGGER = logging.getLogger(__name__)


def validate_graph(raw_graph: RawGraph) -> None:
    """Raise :class:`MalformedGraphError` when ``raw_graph`` is inconsistent.

    Checks that node ids are unique, that every ``child_ids``/``parent_ids``
    entry names a node of the graph and that no depth is negative. All
    problems are reported together.
    """

    known: Set[str] = set()
    problems: List[str] = []

    for level in raw_graph.levels:
        for node in level:
            if node.id in known:
                problems.append(f"duplicate node id '{node.id}'")
            known.add(node.id)

    for level in raw_graph.levels:
        for node in level:
            if node.depth < 0:
                problems.append(
                    f"node '{node.id}' has negative depth {node.depth}"
                )
            for child_id in node.child_ids:
                if child_id not in known:
                    problems.append(
                        f"node '{node.id}' references unknown child '{child_id}'"
                    )
            for parent_id in node.parent_ids:
                if parent_id not in known:
                    problems.append(
                        f"node '{node.id}' references unknown parent "
                        f"'{parent_id}'"
                    )

    if problems:
        _LOGGER.debug("Graph validation found %d problem(s)", len(problems))
        raise MalformedGraphError(
            "Malformed value stream graph: " + "; ".join(problems)
        )
