"""
ValueStream Repository
Introductory remarks: This module is part of the ValueStream codebase.

Path resolvers used to annotate the map with navigation links.

The presentation model never builds URLs itself. Callers inject the
resolvers; :func:`default_path_resolvers` provides ones that mirror the
server's routes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional
from urllib.parse import quote

from werkzeug.routing import BaseConverter, Map, Rule

from valuestream.utils.env import url_prefix

PipelineInstanceLocator = Callable[[str, int], str]
StageLocator = Callable[[str, int, str, Any], str]
ModificationLocator = Callable[[str, str], str]
PipelineLocator = Callable[[str], str]

VSM_SHOW = "vsm_show"
STAGE_DETAIL = "stage_detail"
VSM_SHOW_MATERIAL = "vsm_show_material"
PIPELINE_HISTORY = "pipeline_history"


class SegmentConverter(BaseConverter):
    """Single path segment; a slash in the value is escaped as %2F."""

    regex = "[^/]+"

    def to_url(self, value: Any) -> str:
        return quote(str(value), safe="")


_URL_MAP = Map(
    [
        Rule(
            "/pipelines/value_stream_map/<segment:pipeline_name>"
            "/<pipeline_counter>",
            endpoint=VSM_SHOW,
        ),
        Rule(
            "/pipelines/<segment:pipeline_name>/<pipeline_counter>"
            "/<segment:stage_name>/<stage_counter>",
            endpoint=STAGE_DETAIL,
        ),
        Rule(
            "/materials/value_stream_map/<segment:material_fingerprint>"
            "/<segment:revision>",
            endpoint=VSM_SHOW_MATERIAL,
        ),
        Rule(
            "/pipelines/<segment:pipeline_name>/history",
            endpoint=PIPELINE_HISTORY,
        ),
    ],
    converters={"segment": SegmentConverter},
)


@dataclass(frozen=True)
class PathResolvers:
    """Pure, synchronous functions from identifying fields to a path."""

    pipeline_instance: PipelineInstanceLocator
    stage: StageLocator
    material_modification: ModificationLocator
    pipeline: Optional[PipelineLocator] = None


def default_path_resolvers(prefix: Optional[str] = None) -> PathResolvers:
    """Return resolvers that build server paths under ``prefix``.

    When ``prefix`` is omitted it is read from ``VSM_URL_PREFIX``.
    """

    if prefix is None:
        prefix = url_prefix()
    adapter = _URL_MAP.bind("localhost", script_name=prefix or "/")

    def pipeline_instance(pipeline_name: str, counter: int) -> str:
        return adapter.build(
            VSM_SHOW,
            {"pipeline_name": pipeline_name, "pipeline_counter": counter},
        )

    def stage(
        pipeline_name: str, counter: int, stage_name: str, stage_counter: Any
    ) -> str:
        return adapter.build(
            STAGE_DETAIL,
            {
                "pipeline_name": pipeline_name,
                "pipeline_counter": counter,
                "stage_name": stage_name,
                "stage_counter": stage_counter,
            },
        )

    def material_modification(fingerprint: str, revision: str) -> str:
        return adapter.build(
            VSM_SHOW_MATERIAL,
            {"material_fingerprint": fingerprint, "revision": revision},
        )

    def pipeline(pipeline_name: str) -> str:
        return adapter.build(PIPELINE_HISTORY, {"pipeline_name": pipeline_name})

    return PathResolvers(
        pipeline_instance=pipeline_instance,
        stage=stage,
        material_modification=material_modification,
        pipeline=pipeline,
    )
