"""Presentation model rendered as the value stream map."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, FrozenSet, Optional, Tuple, Union

from valuestream.config import (GENERIC_NODE_TYPE, MATERIAL_NODE_TYPE,
                                PIPELINE_NODE_TYPE)


class NodeType(str, Enum):
    """Discriminator of the dependency node variants."""

    PIPELINE = PIPELINE_NODE_TYPE
    MATERIAL = MATERIAL_NODE_TYPE
    GENERIC = GENERIC_NODE_TYPE


@dataclass(frozen=True)
class StageRef:
    """Stage of a pipeline instance and the link to its detail page."""

    name: str
    status: str
    counter: Any
    locator: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "status": self.status,
            "counter": self.counter,
            "locator": self.locator,
        }


@dataclass(frozen=True)
class PipelineInstance:
    """Run of an upstream pipeline.

    Counter ``0`` marks a placeholder instance that was never scheduled; its
    locator is empty.
    """

    label: str
    counter: int
    locator: str = ""
    stages: Tuple[StageRef, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "counter": self.counter,
            "locator": self.locator,
            "stages": [stage.as_dict() for stage in self.stages],
        }


@dataclass(frozen=True)
class Modification:
    """Change to a material, linked to the map centred on it."""

    revision: str
    user: Optional[str]
    comment: Optional[str]
    modified_time: Any
    locator: str

    def as_dict(self) -> dict[str, Any]:
        modified_time = self.modified_time
        if isinstance(modified_time, datetime):
            modified_time = modified_time.isoformat()
        return {
            "revision": self.revision,
            "user": self.user,
            "comment": self.comment,
            "modified_time": modified_time,
            "locator": self.locator,
        }


@dataclass(frozen=True)
class MaterialRevision:
    """Modifications of a material."""

    modifications: Tuple[Modification, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "modifications": [item.as_dict() for item in self.modifications]
        }


@dataclass(frozen=True)
class _NodeFields:
    id: str
    name: str
    child_ids: FrozenSet[str] = frozenset()
    parent_ids: FrozenSet[str] = frozenset()
    depth: int = 0
    locator: str = ""

    node_type: ClassVar[NodeType]

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "dependents": sorted(self.child_ids),
            "parents": sorted(self.parent_ids),
            "node_type": self.node_type.value,
            "depth": self.depth,
            "locator": self.locator,
        }


@dataclass(frozen=True)
class GenericNode(_NodeFields):
    """Node that is neither a pipeline nor a material."""

    node_type: ClassVar[NodeType] = NodeType.GENERIC


@dataclass(frozen=True)
class PipelineNode(_NodeFields):
    """Pipeline with its instances that took part in the value stream."""

    instances: Tuple[PipelineInstance, ...] = ()
    message: Optional[str] = None
    view_type: Optional[str] = None

    node_type: ClassVar[NodeType] = NodeType.PIPELINE

    def as_dict(self) -> dict[str, Any]:
        payload = super().as_dict()
        payload["instances"] = [item.as_dict() for item in self.instances]
        _put_optional(payload, "message", self.message)
        _put_optional(payload, "view_type", self.view_type)
        return payload


@dataclass(frozen=True)
class MaterialNode(_NodeFields):
    """Material with the revisions that fed its dependents.

    ``material_names`` is ``None`` when no names are known; it is never an
    empty tuple.
    """

    material_names: Optional[Tuple[str, ...]] = None
    material_revisions: Tuple[MaterialRevision, ...] = ()
    material_type: Optional[str] = None
    view_type: Optional[str] = None
    message: Optional[str] = None

    node_type: ClassVar[NodeType] = NodeType.MATERIAL

    def as_dict(self) -> dict[str, Any]:
        payload = super().as_dict()
        if self.material_names:
            payload["material_names"] = list(self.material_names)
        payload["material_revisions"] = [
            item.as_dict() for item in self.material_revisions
        ]
        _put_optional(payload, "material_type", self.material_type)
        _put_optional(payload, "view_type", self.view_type)
        _put_optional(payload, "message", self.message)
        return payload


DependencyNode = Union[GenericNode, PipelineNode, MaterialNode]


@dataclass(frozen=True)
class Level:
    """Nodes at one distance from the centre of the map, in layout order."""

    nodes: Tuple[DependencyNode, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {"nodes": [node.as_dict() for node in self.nodes]}


@dataclass(frozen=True)
class ValueStreamMap:
    """Successfully presented value stream map."""

    levels: Tuple[Level, ...] = ()
    current_pipeline: Optional[str] = None
    current_material: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        _put_optional(payload, "current_pipeline", self.current_pipeline)
        _put_optional(payload, "current_material", self.current_material)
        payload["levels"] = [level.as_dict() for level in self.levels]
        return payload


@dataclass(frozen=True)
class ValueStreamMapError:
    """Failed value stream map; carries the upstream message verbatim."""

    error: str

    def __post_init__(self) -> None:
        if not self.error:
            raise ValueError("Value stream map error message cannot be empty")

    def as_dict(self) -> dict[str, Any]:
        return {"error": self.error}


ValueStreamMapResult = Union[ValueStreamMap, ValueStreamMapError]


def _put_optional(payload: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        payload[key] = value
