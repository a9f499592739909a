"""Unit tests for heurist_mesh.mesh.models — wire envelopes and loose responses."""

import pytest
from pydantic import ValidationError

from heurist_mesh.mesh.models import (
    MeshAgentMetadata,
    MeshAgentRequest,
    MeshAgentResponse,
    QueryInput,
    ToolInput,
)


class TestRequestEnvelope:
    def test_query_shape(self):
        req = MeshAgentRequest(agent_id="A", input=QueryInput(query="hi"), api_key="k")
        assert req.model_dump() == {"agent_id": "A", "input": {"query": "hi"}, "api_key": "k"}

    def test_tool_shape(self):
        req = MeshAgentRequest(
            agent_id="A",
            input=ToolInput(tool="t", tool_arguments={"x": 1}),
            api_key="k",
        )
        assert req.model_dump() == {
            "agent_id": "A",
            "input": {"tool": "t", "tool_arguments": {"x": 1}, "raw_data_only": True},
            "api_key": "k",
        }

    def test_tool_arguments_default_empty(self):
        assert ToolInput(tool="t").tool_arguments == {}


class TestRawDataOnly:
    def test_always_true(self):
        assert ToolInput(tool="t").raw_data_only is True

    def test_false_rejected(self):
        with pytest.raises(ValidationError):
            ToolInput(tool="t", raw_data_only=False)

    def test_frozen(self):
        ti = ToolInput(tool="t")
        with pytest.raises(ValidationError):
            ti.raw_data_only = False


class TestMeshAgentResponse:
    def test_all_optional(self):
        r = MeshAgentResponse.model_validate({})
        assert r.response is None
        assert r.data is None
        assert r.success is None

    def test_keeps_unknown_fields(self):
        r = MeshAgentResponse.model_validate({"response": "ok", "latency_ms": 12})
        assert r.response == "ok"
        assert r.model_dump()["latency_ms"] == 12

    def test_data_any_shape(self):
        assert MeshAgentResponse.model_validate({"data": [1, 2]}).data == [1, 2]


class TestMetadata:
    def test_minimal(self):
        m = MeshAgentMetadata.model_validate({"name": "A"})
        assert m.inputs == []
        assert m.tags == []

    def test_full(self):
        m = MeshAgentMetadata.model_validate({
            "name": "A",
            "description": "d",
            "inputs": [{"name": "query", "description": "q", "type": "str"}],
            "outputs": [{"name": "response", "description": "r", "type": "str"}],
            "external_apis": ["X"],
            "tags": ["Y"],
            "author": "someone",
        })
        assert m.inputs[0].type == "str"
        assert m.outputs[0].name == "response"
        assert m.model_dump()["author"] == "someone"
