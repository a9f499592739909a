"""Typed error hierarchy for the mesh adapter.

Every error carries a machine-readable `code` so action handlers never need
to parse exception messages. Transport exceptions are translated into these
at the client boundary and never escape it raw.
"""

from __future__ import annotations

from typing import Optional


class MeshError(Exception):
    """Base for all mesh adapter errors."""
    code: str = "mesh_error"

    def __init__(self, message: str, *, code: Optional[str] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigurationError(MeshError):
    """Required configuration (the API key) is missing."""
    code = "configuration_error"


class InvalidArgumentError(MeshError):
    """A required parameter was omitted by the caller."""
    code = "invalid_argument"

    def __init__(self, message: str, *, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class MeshCallError(MeshError):
    """A remote call failed at the transport level."""
    code = "mesh_call_error"

    def __init__(
        self,
        message: str,
        *,
        agent_id: Optional[str] = None,
        tool: Optional[str] = None,
        underlying_message: str = "",
    ):
        super().__init__(message)
        self.agent_id = agent_id
        self.tool = tool
        self.underlying_message = underlying_message

    @property
    def target(self) -> str:
        """``agent_id``, ``agent_id.tool`` for tool calls, or '' for the metadata document."""
        if not self.agent_id:
            return ""
        return f"{self.agent_id}.{self.tool}" if self.tool else self.agent_id


class AgentNotFoundError(MeshError):
    """The metadata document has no entry for the requested agent."""
    code = "agent_not_found"

    def __init__(self, message: str, *, agent_id: str):
        super().__init__(message)
        self.agent_id = agent_id
