"""
ValueStream Repository
Introductory remarks: This module is part of the ValueStream codebase.

Entry point turning a raw leveled graph into the presented value stream map.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Mapping, Optional

from valuestream.errors import MalformedGraphError
from valuestream.logging_config import configure_logging
from valuestream.models.presentation import (ValueStreamMap,
                                             ValueStreamMapError,
                                             ValueStreamMapResult)
from valuestream.models.raw import RawGraph
from valuestream.presentation.classifier import classify_node
from valuestream.presentation.levels import assemble_levels
from valuestream.presentation.locators import PathResolvers
from valuestream.presentation.validation import validate_graph
from valuestream.utils.env import strict_graph_validation

_LOGGER = logging.getLogger(__name__)


class ValueStreamMapBuilder:
    """Present raw value stream graphs using the injected path resolvers.

    The builder holds no per-request state; one instance can serve any number
    of renders.
    """

    def __init__(
        self, resolvers: PathResolvers, *, strict: Optional[bool] = None
    ) -> None:
        configure_logging()
        if strict is None:
            strict = strict_graph_validation()
        self._resolvers = resolvers
        self._strict = strict
        self._classify = partial(classify_node, resolvers=resolvers)

    @property
    def resolvers(self) -> PathResolvers:
        return self._resolvers

    @property
    def strict(self) -> bool:
        return self._strict

    def build(
        self, raw_graph: Optional[RawGraph], error: Optional[str] = None
    ) -> ValueStreamMapResult:
        """Return the presented map, or the upstream error when there is one.

        A non-empty ``error`` wins outright: ``raw_graph`` is not looked at
        and no partial map is produced.
        """

        if error:
            _LOGGER.warning("Value stream map computation failed: %s", error)
            return ValueStreamMapError(error=error)

        if raw_graph is None:
            return ValueStreamMap()

        if self._strict:
            try:
                validate_graph(raw_graph)
            except MalformedGraphError as exc:
                _LOGGER.warning("Rejecting value stream graph: %s", exc)
                return ValueStreamMapError(error=str(exc))

        levels = assemble_levels(raw_graph.levels, self._classify)
        _LOGGER.debug(
            "Presented value stream map for %s with %d level(s), %d node(s)",
            raw_graph.current_pipeline or raw_graph.current_material,
            len(levels),
            sum(len(level.nodes) for level in levels),
        )
        return ValueStreamMap(
            levels=levels,
            current_pipeline=raw_graph.current_pipeline,
            current_material=raw_graph.current_material,
        )

    def build_from_mapping(
        self, payload: Mapping[str, Any]
    ) -> ValueStreamMapResult:
        """Present a JSON-like payload produced by the graph computation.

        The payload's ``error`` is checked before anything else is parsed.
        """

        error = payload.get("error") if isinstance(payload, Mapping) else None
        if error:
            return self.build(None, str(error))
        return self.build(RawGraph.from_mapping(payload))


def build_value_stream_map(
    raw_graph: Optional[RawGraph],
    error: Optional[str],
    resolvers: PathResolvers,
    *,
    strict: Optional[bool] = None,
) -> ValueStreamMapResult:
    """Convenience wrapper around :meth:`ValueStreamMapBuilder.build`."""
    return ValueStreamMapBuilder(resolvers, strict=strict).build(
        raw_graph, error
    )
