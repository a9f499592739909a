"""Unit tests for heurist_mesh.errors — typed error hierarchy."""

import pytest

from heurist_mesh.errors import (
    AgentNotFoundError,
    ConfigurationError,
    InvalidArgumentError,
    MeshCallError,
    MeshError,
)


class TestMeshError:
    def test_base_error(self):
        err = MeshError("something broke")
        assert str(err) == "something broke"
        assert err.code == "mesh_error"

    def test_code_override(self):
        assert MeshError("x", code="custom").code == "custom"


class TestCodes:
    def test_configuration(self):
        assert ConfigurationError("no key").code == "configuration_error"

    def test_invalid_argument(self):
        err = InvalidArgumentError("coingecko_id is required", parameter="coingecko_id")
        assert err.code == "invalid_argument"
        assert err.parameter == "coingecko_id"

    def test_mesh_call(self):
        err = MeshCallError("failed", agent_id="A", underlying_message="reset")
        assert err.code == "mesh_call_error"
        assert err.target == "A"
        assert err.underlying_message == "reset"

    def test_mesh_call_with_tool(self):
        err = MeshCallError("failed", agent_id="A", tool="t")
        assert err.target == "A.t"

    def test_agent_not_found(self):
        err = AgentNotFoundError("missing", agent_id="A")
        assert err.code == "agent_not_found"
        assert err.agent_id == "A"


class TestInheritance:
    def test_all_inherit_from_mesh_error(self):
        errors = [
            ConfigurationError("x"),
            InvalidArgumentError("x"),
            MeshCallError("x", agent_id="A"),
            AgentNotFoundError("x", agent_id="A"),
        ]
        for err in errors:
            assert isinstance(err, MeshError)
            assert isinstance(err, Exception)

    def test_not_found_is_distinct_from_call_error(self):
        with pytest.raises(AgentNotFoundError):
            try:
                raise AgentNotFoundError("x", agent_id="A")
            except MeshCallError:
                pytest.fail("AgentNotFoundError must not be a MeshCallError")
