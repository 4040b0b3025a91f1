"""Expansion of pipeline node revisions into linked instances."""

from __future__ import annotations

from typing import Iterable, Tuple

from valuestream.config import UNKNOWN_STAGE_STATUS
from valuestream.models.presentation import PipelineInstance, StageRef
from valuestream.models.raw import RawPipelineRevision, RawStage
from valuestream.presentation.locators import (PipelineInstanceLocator,
                                               StageLocator)


def expand_instances(
    pipeline_name: str,
    revisions: Iterable[RawPipelineRevision],
    instance_locator: PipelineInstanceLocator,
    stage_locator: StageLocator,
) -> Tuple[PipelineInstance, ...]:
    """Map each revision of ``pipeline_name`` to a :class:`PipelineInstance`.

    Counter ``0`` denotes a placeholder run, so the instance gets no link.
    Stages keep their order; only scheduled stages (status other than
    ``Unknown``) are linked.
    """

    return tuple(
        PipelineInstance(
            label=revision.label,
            counter=revision.counter,
            locator=(
                instance_locator(pipeline_name, revision.counter)
                if revision.counter != 0
                else ""
            ),
            stages=tuple(
                _stage_ref(pipeline_name, revision.counter, stage, stage_locator)
                for stage in revision.stages or ()
            ),
        )
        for revision in revisions or ()
    )


def _stage_ref(
    pipeline_name: str,
    counter: int,
    stage: RawStage,
    stage_locator: StageLocator,
) -> StageRef:
    locator = ""
    if stage.status != UNKNOWN_STAGE_STATUS:
        locator = stage_locator(pipeline_name, counter, stage.name, stage.counter)
    return StageRef(
        name=stage.name,
        status=stage.status,
        counter=stage.counter,
        locator=locator,
    )
