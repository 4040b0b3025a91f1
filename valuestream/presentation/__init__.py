"""Transformation of raw graphs into the presented value stream map."""

from .builder import ValueStreamMapBuilder, build_value_stream_map
from .classifier import classify_node
from .instances import expand_instances
from .levels import assemble_levels
from .locators import PathResolvers, default_path_resolvers
from .materials import expand_material_revisions, material_names_or_none
from .validation import validate_graph

__all__ = [
    "PathResolvers",
    "ValueStreamMapBuilder",
    "assemble_levels",
    "build_value_stream_map",
    "classify_node",
    "default_path_resolvers",
    "expand_instances",
    "expand_material_revisions",
    "material_names_or_none",
    "validate_graph",
]
