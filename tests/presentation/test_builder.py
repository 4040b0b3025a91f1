"""
ValueStream Repository
Introductory remarks: This module is part of the ValueStream codebase.

End-to-end tests for presenting value stream maps.
"""

from __future__ import annotations

import logging

import pytest

from valuestream.errors import GraphParseError
from valuestream.models.presentation import (GenericNode, ValueStreamMap,
                                             ValueStreamMapError)
from valuestream.models.raw import (RawGraph, RawMaterialRevision,
                                    RawModification, RawNode,
                                    RawPipelineRevision, RawStage)
from valuestream.presentation import builder as builder_module
from valuestream.presentation.builder import (ValueStreamMapBuilder,
                                              build_value_stream_map)


def _pipeline_graph(counter: int) -> RawGraph:
    node = RawNode(
        id="P1",
        name="P1",
        type="PIPELINE",
        revisions=(
            RawPipelineRevision(
                label="1",
                counter=counter,
                stages=(RawStage(name="build", status="Passed", counter=3),),
            ),
        ),
    )
    return RawGraph(levels=((node,),), current_pipeline="P1")


def test_error_short_circuits_without_reading_graph(resolvers, recorder) -> None:
    class _Exploding:
        @property
        def levels(self):
            raise AssertionError("graph must not be inspected")

    result = build_value_stream_map(
        _Exploding(), "VSM computation failed", resolvers
    )

    assert result == ValueStreamMapError(error="VSM computation failed")
    assert result.as_dict() == {"error": "VSM computation failed"}
    assert recorder.calls == []


def test_error_is_logged(resolvers, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        build_value_stream_map(None, "boom", resolvers)

    assert "boom" in caplog.text


def test_pipeline_scenario_links_instance_and_stage(resolvers) -> None:
    result = build_value_stream_map(_pipeline_graph(3), None, resolvers)

    assert isinstance(result, ValueStreamMap)
    assert result.current_pipeline == "P1"
    assert result.current_material is None
    instance = result.levels[0].nodes[0].instances[0]
    assert instance.locator == "instance:P1/3"
    assert instance.stages[0].locator == "stage:P1/3/build/3"


def test_pipeline_scenario_with_counter_zero(resolvers) -> None:
    result = build_value_stream_map(_pipeline_graph(0), "", resolvers)

    assert result.levels[0].nodes[0].instances[0].locator == ""


def test_material_scenario(resolvers) -> None:
    node = RawNode(
        id="abc",
        name="git",
        type="MATERIAL",
        material_fingerprint="abc",
        material_revisions=(
            RawMaterialRevision(
                modifications=(
                    RawModification(
                        revision="r1",
                        user="jane",
                        comment="fix",
                        modified_time="2024-05-01T12:00:00Z",
                    ),
                )
            ),
        ),
    )
    graph = RawGraph(levels=((node,),), current_material="abc")

    result = build_value_stream_map(graph, None, resolvers)

    assert result.current_material == "abc"
    modification = result.levels[0].nodes[0].material_revisions[0].modifications[0]
    assert modification.locator == "modification:abc/r1"


def test_material_without_names_omits_field(resolvers) -> None:
    graph = RawGraph(
        levels=((RawNode(id="abc", name="git", type="MATERIAL"),),)
    )

    payload = build_value_stream_map(graph, None, resolvers).as_dict()

    assert "material_names" not in payload["levels"][0]["nodes"][0]


def test_unknown_type_scenario(resolvers) -> None:
    graph = RawGraph(
        levels=(
            (
                RawNode(
                    id="x",
                    name="x",
                    type="UPSTREAM_UNKNOWN",
                    child_ids=("P1",),
                    depth=1,
                ),
            ),
        )
    )

    result = build_value_stream_map(graph, None, resolvers)

    node = result.levels[0].nodes[0]
    assert isinstance(node, GenericNode)
    assert node.as_dict() == {
        "id": "x",
        "name": "x",
        "dependents": ["P1"],
        "parents": [],
        "node_type": "GENERIC",
        "depth": 1,
        "locator": "",
    }


def test_missing_graph_yields_empty_levels(resolvers) -> None:
    result = build_value_stream_map(None, None, resolvers)

    assert result == ValueStreamMap()
    assert result.as_dict() == {"levels": []}


def test_level_counts_match_input(resolvers) -> None:
    graph = RawGraph(
        levels=(
            (
                RawNode(id="m1", name="m1", type="MATERIAL", child_ids=("P1",)),
                RawNode(id="m2", name="m2", type="MATERIAL", child_ids=("P1",)),
            ),
            (
                RawNode(
                    id="P1", name="P1", type="PIPELINE", parent_ids=("m1", "m2")
                ),
            ),
        ),
        current_pipeline="P1",
    )

    result = build_value_stream_map(graph, None, resolvers)

    assert [len(level.nodes) for level in result.levels] == [2, 1]
    assert [node.id for node in result.levels[0].nodes] == ["m1", "m2"]


def test_strict_mode_turns_malformed_graph_into_error(resolvers) -> None:
    graph = RawGraph(
        levels=((RawNode(id="P1", name="P1", type="PIPELINE", child_ids=("P2",)),),)
    )

    result = ValueStreamMapBuilder(resolvers, strict=True).build(graph)

    assert isinstance(result, ValueStreamMapError)
    assert "unknown child 'P2'" in result.error


def test_lenient_mode_trusts_malformed_graph(resolvers) -> None:
    graph = RawGraph(
        levels=((RawNode(id="P1", name="P1", type="PIPELINE", child_ids=("P2",)),),)
    )

    result = ValueStreamMapBuilder(resolvers, strict=False).build(graph)

    assert isinstance(result, ValueStreamMap)
    assert result.levels[0].nodes[0].child_ids == frozenset({"P2"})


def test_strict_mode_defaults_from_environment(
    resolvers, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("VSM_STRICT_GRAPH", "yes")

    assert ValueStreamMapBuilder(resolvers).strict is True


def test_build_from_mapping_checks_error_first(resolvers) -> None:
    builder = ValueStreamMapBuilder(resolvers)

    result = builder.build_from_mapping(
        {"error": "VSM computation failed", "levels": "not even a list"}
    )

    assert result.as_dict() == {"error": "VSM computation failed"}


def test_build_from_mapping_presents_payload(resolvers) -> None:
    payload = {
        "currentPipelineName": "P2",
        "levels": [
            {
                "nodes": [
                    {
                        "id": "P1",
                        "name": "P1",
                        "type": "PIPELINE",
                        "childIds": ["P2"],
                        "parentIds": [],
                        "depth": 1,
                        "revisions": [{"label": "12", "counter": 12}],
                    }
                ]
            },
            [
                {
                    "id": "P2",
                    "name": "P2",
                    "type": "PIPELINE",
                    "childIds": [],
                    "parentIds": ["P1"],
                    "depth": 1,
                }
            ],
        ],
    }

    result = ValueStreamMapBuilder(resolvers).build_from_mapping(payload)

    assert result.as_dict() == {
        "current_pipeline": "P2",
        "levels": [
            {
                "nodes": [
                    {
                        "id": "P1",
                        "name": "P1",
                        "dependents": ["P2"],
                        "parents": [],
                        "node_type": "PIPELINE",
                        "depth": 1,
                        "locator": "",
                        "instances": [
                            {
                                "label": "12",
                                "counter": 12,
                                "locator": "instance:P1/12",
                                "stages": [],
                            }
                        ],
                    }
                ]
            },
            {
                "nodes": [
                    {
                        "id": "P2",
                        "name": "P2",
                        "dependents": [],
                        "parents": ["P1"],
                        "node_type": "PIPELINE",
                        "depth": 1,
                        "locator": "",
                        "instances": [],
                    }
                ]
            },
        ],
    }


def test_build_from_mapping_rejects_unparseable_payload(resolvers) -> None:
    with pytest.raises(GraphParseError, match="Expected 'levels' to be a list"):
        ValueStreamMapBuilder(resolvers).build_from_mapping({"levels": "nope"})


def test_builder_configures_logging_and_exposes_resolvers(
    resolvers, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = []
    monkeypatch.setattr(
        builder_module, "configure_logging", lambda: calls.append(True)
    )

    builder = ValueStreamMapBuilder(resolvers, strict=False)

    assert calls == [True]
    assert builder.resolvers is resolvers
