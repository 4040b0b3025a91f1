"""
ValueStream Repository
Introductory remarks: This module is part of the ValueStream codebase.

Raw value stream graph records, as handed over by the graph computation.

The graph computation discovers upstream pipelines and materials, links them
and assigns every node its depth. These dataclasses only mirror that output;
nothing here recomputes or reorders it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple

from valuestream.config import MATERIAL_NODE_TYPE, UNKNOWN_STAGE_STATUS
from valuestream.errors import GraphParseError


@dataclass(frozen=True)
class RawStage:
    """Stage of a pipeline run."""

    name: str
    status: str
    counter: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawStage":
        """Parse a stage; a scheduled stage must carry its counter."""
        data = _require_mapping(data, "stage")
        name = _text(data.get("name"))
        status = _text(data.get("status"))
        counter = data.get("counter")
        if status != UNKNOWN_STAGE_STATUS and (counter is None or counter == ""):
            raise GraphParseError(
                f"Stage '{name}' with status '{status}' has no counter"
            )
        return cls(name=name, status=status, counter=counter)


@dataclass(frozen=True)
class RawPipelineRevision:
    """One run (or placeholder run) of a pipeline node."""

    label: str
    counter: int
    stages: Tuple[RawStage, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawPipelineRevision":
        data = _require_mapping(data, "pipeline revision")
        return cls(
            label=_text(data.get("label")),
            counter=_counter(data.get("counter")),
            stages=tuple(
                RawStage.from_mapping(item)
                for item in _sequence(data.get("stages"), "stages")
            ),
        )


@dataclass(frozen=True)
class RawModification:
    """Single change recorded against a material."""

    revision: str
    user: Optional[str] = None
    comment: Optional[str] = None
    modified_time: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawModification":
        data = _require_mapping(data, "modification")
        return cls(
            revision=_text(data.get("revision")),
            user=data.get("user"),
            comment=data.get("comment"),
            modified_time=_first(data, "modifiedTime", "modified_time"),
        )


@dataclass(frozen=True)
class RawMaterialRevision:
    """Modifications of a material that fed one downstream pipeline."""

    modifications: Tuple[RawModification, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawMaterialRevision":
        data = _require_mapping(data, "material revision")
        return cls(
            modifications=tuple(
                RawModification.from_mapping(item)
                for item in _sequence(data.get("modifications"), "modifications")
            )
        )


@dataclass(frozen=True)
class RawNode:
    """Node of the leveled dependency graph."""

    id: str
    name: str
    type: str
    child_ids: Tuple[str, ...] = ()
    parent_ids: Tuple[str, ...] = ()
    depth: int = 0
    revisions: Tuple[RawPipelineRevision, ...] = ()
    material_fingerprint: Optional[str] = None
    material_names: Tuple[str, ...] = ()
    material_revisions: Tuple[RawMaterialRevision, ...] = ()
    material_type: Optional[str] = None
    view_type: Optional[str] = None
    message: Optional[str] = None

    @property
    def fingerprint(self) -> str:
        """Fingerprint scoping the material's history; defaults to the id."""
        return self.material_fingerprint or self.id

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawNode":
        data = _require_mapping(data, "node")
        node_id = data.get("id")
        if node_id is None or node_id == "":
            raise GraphParseError("Graph node is missing an 'id'")
        node_id = str(node_id)
        node_type = _text(_first(data, "type", "nodeType", "node_type"))

        revisions: Tuple[RawPipelineRevision, ...] = ()
        material_revisions: Tuple[RawMaterialRevision, ...] = ()
        if node_type == MATERIAL_NODE_TYPE:
            material_revisions = tuple(
                RawMaterialRevision.from_mapping(item)
                for item in _sequence(
                    _first(data, "materialRevisions", "material_revisions"),
                    "materialRevisions",
                )
            )
        else:
            revisions = tuple(
                RawPipelineRevision.from_mapping(item)
                for item in _sequence(data.get("revisions"), "revisions")
            )

        return cls(
            id=node_id,
            name=_text(data.get("name")),
            type=node_type,
            child_ids=_ids(_first(data, "childIds", "child_ids"), "childIds"),
            parent_ids=_ids(_first(data, "parentIds", "parent_ids"), "parentIds"),
            depth=_depth(data.get("depth")),
            revisions=revisions,
            material_fingerprint=_first(
                data, "materialFingerprint", "material_fingerprint"
            ),
            material_names=tuple(
                str(name)
                for name in _sequence(
                    _first(data, "materialNames", "material_names"),
                    "materialNames",
                )
            ),
            material_revisions=material_revisions,
            material_type=_first(data, "materialType", "material_type"),
            view_type=_first(data, "viewType", "view_type"),
            message=data.get("message"),
        )


@dataclass(frozen=True)
class RawGraph:
    """Leveled graph centred on a pipeline or on a material."""

    levels: Tuple[Tuple[RawNode, ...], ...] = ()
    current_pipeline: Optional[str] = None
    current_material: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawGraph":
        """Parse the graph computation's JSON-like payload.

        Levels may be plain lists of nodes or ``{"nodes": [...]}`` objects.
        Missing optional collections are read as empty ones.
        """
        data = _require_mapping(data, "graph")
        levels = []
        for level in _sequence(data.get("levels"), "levels"):
            if isinstance(level, Mapping):
                level = level.get("nodes")
            levels.append(
                tuple(
                    RawNode.from_mapping(node)
                    for node in _sequence(level, "level")
                )
            )
        return cls(
            levels=tuple(levels),
            current_pipeline=_first(
                data, "currentPipelineName", "current_pipeline_name",
                "current_pipeline",
            ),
            current_material=_first(
                data, "currentMaterialId", "current_material_id",
                "current_material",
            ),
        )


def _first(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise GraphParseError(
            f"Expected {what} to be an object, got {type(data).__name__}"
        )
    return data


def _sequence(value: Any, what: str) -> Sequence[Any]:
    if value is None:
        return ()
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(
        value, (list, tuple)
    ):
        raise GraphParseError(
            f"Expected '{what}' to be a list, got {type(value).__name__}"
        )
    return value


def _ids(value: Any, what: str) -> Tuple[str, ...]:
    if isinstance(value, (set, frozenset)):
        value = sorted(value)
    return tuple(str(item) for item in _sequence(value, what))


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _counter(value: Any) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise GraphParseError(f"Invalid pipeline counter {value!r}") from exc


def _depth(value: Any) -> int:
    if value is None:
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise GraphParseError(f"Invalid node depth {value!r}") from exc
