"""Value stream map presentation model."""

from .models import (GenericNode, Level, MaterialNode, MaterialRevision,
                     Modification, NodeType, PipelineInstance, PipelineNode,
                     RawGraph, StageRef, ValueStreamMap, ValueStreamMapError)
from .presentation import (PathResolvers, ValueStreamMapBuilder,
                           build_value_stream_map, default_path_resolvers)

__all__ = [
    "GenericNode",
    "Level",
    "MaterialNode",
    "MaterialRevision",
    "Modification",
    "NodeType",
    "PathResolvers",
    "PipelineInstance",
    "PipelineNode",
    "RawGraph",
    "StageRef",
    "ValueStreamMap",
    "ValueStreamMapBuilder",
    "ValueStreamMapError",
    "build_value_stream_map",
    "default_path_resolvers",
]
