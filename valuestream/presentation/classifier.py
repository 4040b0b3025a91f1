"""Dispatch of raw graph nodes to their typed presentation variant."""

from __future__ import annotations

from typing import Any, Dict

from valuestream.config import MATERIAL_NODE_TYPE, PIPELINE_NODE_TYPE
from valuestream.models.presentation import (DependencyNode, GenericNode,
                                             MaterialNode, PipelineNode)
from valuestream.models.raw import RawNode
from valuestream.presentation.instances import expand_instances
from valuestream.presentation.locators import PathResolvers
from valuestream.presentation.materials import (expand_material_revisions,
                                                material_names_or_none)


def classify_node(raw_node: RawNode, resolvers: PathResolvers) -> DependencyNode:
    """Build the presentation node matching ``raw_node``'s type tag.

    ``PIPELINE`` and ``MATERIAL`` nodes get their revisions expanded; any
    other tag yields a :class:`GenericNode` with the structural fields only.
    """

    common = _common_fields(raw_node)

    if raw_node.type == PIPELINE_NODE_TYPE:
        if resolvers.pipeline is not None:
            common["locator"] = resolvers.pipeline(raw_node.name)
        return PipelineNode(
            **common,
            instances=expand_instances(
                raw_node.name,
                raw_node.revisions,
                resolvers.pipeline_instance,
                resolvers.stage,
            ),
            message=raw_node.message,
            view_type=raw_node.view_type,
        )

    if raw_node.type == MATERIAL_NODE_TYPE:
        return MaterialNode(
            **common,
            material_names=material_names_or_none(raw_node.material_names),
            material_revisions=expand_material_revisions(
                raw_node.fingerprint,
                raw_node.material_revisions,
                resolvers.material_modification,
            ),
            material_type=raw_node.material_type,
            view_type=raw_node.view_type,
            message=raw_node.message,
        )

    return GenericNode(**common)


def _common_fields(raw_node: RawNode) -> Dict[str, Any]:
    return {
        "id": raw_node.id,
        "name": raw_node.name,
        "child_ids": frozenset(raw_node.child_ids),
        "parent_ids": frozenset(raw_node.parent_ids),
        "depth": raw_node.depth,
    }
