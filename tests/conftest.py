"""
ValueStream Repository
Introductory remarks: This module is part of the ValueStream codebase.

Shared fixtures for the value stream map tests.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from valuestream import logging_config
from valuestream.presentation.locators import PathResolvers
from valuestream.utils import env


class RecordingResolvers:
    """Deterministic resolvers that remember every call they receive."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def pipeline_instance(self, pipeline_name: str, counter: int) -> str:
        self.calls.append(("instance", pipeline_name, counter))
        return f"instance:{pipeline_name}/{counter}"

    def stage(
        self, pipeline_name: str, counter: int, stage_name: str, stage_counter: Any
    ) -> str:
        self.calls.append(("stage", pipeline_name, counter, stage_name, stage_counter))
        return f"stage:{pipeline_name}/{counter}/{stage_name}/{stage_counter}"

    def material_modification(self, fingerprint: str, revision: str) -> str:
        self.calls.append(("modification", fingerprint, revision))
        return f"modification:{fingerprint}/{revision}"

    def as_path_resolvers(self) -> PathResolvers:
        return PathResolvers(
            pipeline_instance=self.pipeline_instance,
            stage=self.stage,
            material_modification=self.material_modification,
        )


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    _isolated_env: Keep ``.env`` files, VSM_* variables and logging setup out.
    :param monkeypatch:
    :returns:
    """

    monkeypatch.setattr(env, "_ENV_LOADED", True)
    monkeypatch.setattr(logging_config, "_CONFIGURED", True)
    monkeypatch.delenv("VSM_URL_PREFIX", raising=False)
    monkeypatch.delenv("VSM_STRICT_GRAPH", raising=False)


@pytest.fixture
def recorder() -> RecordingResolvers:
    return RecordingResolvers()


@pytest.fixture
def resolvers(recorder: RecordingResolvers) -> PathResolvers:
    return recorder.as_path_resolvers()
