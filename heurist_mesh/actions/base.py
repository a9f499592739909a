"""Base facade shared by every mesh agent action.

A facade binds one agent identifier and translates its method parameters
into the wire argument keys the remote tool expects, using the per-class
``TOOL_ARGUMENTS`` table.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from heurist_mesh.errors import InvalidArgumentError
from heurist_mesh.mesh.client import MeshClient

logger = logging.getLogger(__name__)

# tool name -> ((method parameter, wire key), ...)
ToolArgumentTable = Mapping[str, Tuple[Tuple[str, str], ...]]


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class BaseMeshAction:
    """Facade over one mesh agent."""

    agent_id: str = ""
    TOOL_ARGUMENTS: ToolArgumentTable = {}

    def __init__(
        self,
        api_key: Optional[str] = None,
        agent_id: Optional[str] = None,
        *,
        client: Optional[MeshClient] = None,
    ):
        if client is None:
            client = MeshClient(api_key or "")
        self.client = client
        if agent_id is not None:
            self.agent_id = agent_id
        if not self.agent_id:
            raise InvalidArgumentError("agent_id is required", parameter="agent_id")

    async def natural_language_query(self, query: str) -> Dict[str, Any]:
        """Ask the bound agent a free-text question."""
        return await self.client.call_agent(self.agent_id, query)

    def build_tool_arguments(self, tool: str, **params: Any) -> Dict[str, Any]:
        """Map method parameters to wire keys, values passed through as-is."""
        try:
            table = self.TOOL_ARGUMENTS[tool]
        except KeyError:
            raise InvalidArgumentError(
                f"{self.agent_id} has no tool {tool!r}", parameter="tool"
            ) from None

        arguments: Dict[str, Any] = {}
        for param, wire_key in table:
            value = params.get(param)
            if _is_missing(value):
                raise InvalidArgumentError(f"{param} is required", parameter=param)
            arguments[wire_key] = value
        return arguments

    async def call_tool(self, tool: str, **params: Any) -> Dict[str, Any]:
        arguments = self.build_tool_arguments(tool, **params)
        logger.debug("%s.%s args=%s", self.agent_id, tool, sorted(arguments))
        return await self.client.call_agent_tool(self.agent_id, tool, arguments)
