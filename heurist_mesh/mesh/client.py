"""HTTP client for the Heurist mesh agent service.

Three remote operations go through this client: free-text agent queries,
named tool calls, and metadata lookup. Uses httpx with a configurable
per-call timeout. Every transport failure is logged and re-raised as a
MeshCallError so raw httpx exceptions never reach callers.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx
from pydantic import ValidationError

from heurist_mesh.errors import (
    AgentNotFoundError,
    ConfigurationError,
    InvalidArgumentError,
    MeshCallError,
)
from heurist_mesh.mesh.models import (
    MeshAgentMetadata,
    MeshAgentRequest,
    QueryInput,
    ToolInput,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://sequencer-v2.heurist.xyz"
DEFAULT_TIMEOUT_S = 10.0
CONNECT_TIMEOUT_S = 5.0

# InvalidURL is not an HTTPError; TypeError covers bodies json cannot encode.
TRANSPORT_ERRORS = (httpx.HTTPError, httpx.InvalidURL, TypeError, ValueError)

MESH_REQUEST_PATH = "/mesh_request"
METADATA_PATH = "/mesh_agents_metadata.json"


def _require(value: Optional[str], name: str) -> None:
    if not value:
        raise InvalidArgumentError(f"{name} is required", parameter=name)


class MeshClient:
    """Stateless client bound to one API key and base URL."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ConfigurationError("HEURIST_API_KEY is required")
        self._api_key = api_key
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout_s = timeout_s
        self._transport = transport

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout_s, connect=min(CONNECT_TIMEOUT_S, self.timeout_s)),
            transport=self._transport,
        )

    async def _post(self, request: MeshAgentRequest) -> Any:
        async with self._new_client() as client:
            resp = await client.post(
                f"{self._base_url}{MESH_REQUEST_PATH}",
                json=request.model_dump(mode="json"),
            )
            resp.raise_for_status()
            return resp.json()

    # ------------------------------------------------------------------
    # Free-text query
    # ------------------------------------------------------------------

    async def call_agent(self, agent_id: str, query: str) -> Dict[str, Any]:
        """Send a natural-language query to an agent.

        Returns the parsed JSON body unmodified.
        """
        _require(agent_id, "agent_id")
        _require(query, "query")

        request = MeshAgentRequest(
            agent_id=agent_id,
            input=QueryInput(query=query),
            api_key=self._api_key,
        )
        logger.debug("Mesh query -> %s", agent_id)
        try:
            return await self._post(request)
        except TRANSPORT_ERRORS as exc:
            logger.error("Error calling Mesh Agent %s: %s", agent_id, exc, exc_info=True)
            raise MeshCallError(
                f"Failed to call Mesh Agent {agent_id}: {exc}",
                agent_id=agent_id,
                underlying_message=str(exc),
            ) from exc

    # ------------------------------------------------------------------
    # Tool call
    # ------------------------------------------------------------------

    async def call_agent_tool(
        self,
        agent_id: str,
        tool: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Invoke a named tool on an agent and return its raw data.

        `raw_data_only` is always sent as true; it is not a parameter.
        """
        _require(agent_id, "agent_id")
        _require(tool, "tool")

        request = MeshAgentRequest(
            agent_id=agent_id,
            input=ToolInput(tool=tool, tool_arguments=dict(args or {})),
            api_key=self._api_key,
        )
        logger.debug("Mesh tool call -> %s.%s", agent_id, tool)
        try:
            return await self._post(request)
        except TRANSPORT_ERRORS as exc:
            logger.error("Error calling Mesh Agent tool %s.%s: %s", agent_id, tool, exc, exc_info=True)
            raise MeshCallError(
                f"Failed to call Mesh Agent tool {agent_id}.{tool}: {exc}",
                agent_id=agent_id,
                tool=tool,
                underlying_message=str(exc),
            ) from exc

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    async def _fetch_metadata(self, agent_id: Optional[str] = None) -> Dict[str, Any]:
        try:
            async with self._new_client() as client:
                resp = await client.get(f"{self._base_url}{METADATA_PATH}")
                resp.raise_for_status()
                metadata = resp.json()
        except TRANSPORT_ERRORS as exc:
            logger.error("Error loading mesh agent metadata document: %s", exc, exc_info=True)
            raise MeshCallError(
                f"Failed to load mesh agent metadata document: {exc}",
                agent_id=agent_id,
                underlying_message=str(exc),
            ) from exc

        if not isinstance(metadata, dict):
            logger.error("Mesh agent metadata document is not a JSON object: %s", type(metadata).__name__)
            raise MeshCallError(
                "Failed to load mesh agent metadata document: expected a JSON object",
                agent_id=agent_id,
                underlying_message=f"unexpected {type(metadata).__name__} body",
            )
        return metadata

    async def get_agent_metadata(self, agent_id: str) -> MeshAgentMetadata:
        """Look up one agent in the service's metadata document."""
        _require(agent_id, "agent_id")

        metadata = await self._fetch_metadata(agent_id)
        entry = metadata.get(agent_id)
        if entry is None:
            logger.warning("Agent %s not found in metadata", agent_id)
            raise AgentNotFoundError(f"Agent {agent_id} not found in metadata", agent_id=agent_id)

        try:
            return MeshAgentMetadata.model_validate(entry)
        except ValidationError as exc:
            logger.error("Malformed metadata for %s: %s", agent_id, exc)
            raise MeshCallError(
                f"Failed to parse agent metadata for {agent_id}",
                agent_id=agent_id,
                underlying_message=str(exc),
            ) from exc

    async def list_agents(self) -> List[str]:
        """Identifiers of every agent the service advertises."""
        metadata = await self._fetch_metadata()
        return sorted(metadata)
