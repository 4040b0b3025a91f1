"""Domain model package exports."""

from .presentation import (DependencyNode, GenericNode, Level, MaterialNode,
                           MaterialRevision, Modification, NodeType,
                           PipelineInstance, PipelineNode, StageRef,
                           ValueStreamMap, ValueStreamMapError,
                           ValueStreamMapResult)
from .raw import (RawGraph, RawMaterialRevision, RawModification, RawNode,
                  RawPipelineRevision, RawStage)

__all__ = [
    "DependencyNode",
    "GenericNode",
    "Level",
    "MaterialNode",
    "MaterialRevision",
    "Modification",
    "NodeType",
    "PipelineInstance",
    "PipelineNode",
    "RawGraph",
    "RawMaterialRevision",
    "RawModification",
    "RawNode",
    "RawPipelineRevision",
    "RawStage",
    "StageRef",
    "ValueStreamMap",
    "ValueStreamMapError",
    "ValueStreamMapResult",
]
