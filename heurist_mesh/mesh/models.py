"""Pydantic models for the mesh request/response wire format.

MeshAgentRequest wraps one of two mutually exclusive inputs:
QueryInput for free-text questions and ToolInput for named tool calls.
Responses and metadata are loose projections; unknown fields are kept.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Wire protocol: mesh_request
# ---------------------------------------------------------------------------

class QueryInput(BaseModel):
    """Free-text input; the agent decides how to answer."""
    query: str


class ToolInput(BaseModel):
    """Structured input naming a tool and its exact arguments."""
    model_config = ConfigDict(frozen=True)

    tool: str
    tool_arguments: Dict[str, Any] = Field(default_factory=dict)
    # Tool calls always ask for unprocessed data.
    raw_data_only: Literal[True] = True


class MeshAgentRequest(BaseModel):
    """POST /mesh_request body."""
    agent_id: str
    input: Union[QueryInput, ToolInput]
    api_key: str


class MeshAgentResponse(BaseModel):
    """Best-effort view of a /mesh_request reply.

    The service does not document when `response` vs `data` is filled,
    so every field is optional.
    """
    model_config = ConfigDict(extra="allow")

    response: Optional[str] = None
    data: Any = None
    success: Optional[bool] = None


# ---------------------------------------------------------------------------
# Wire protocol: mesh_agents_metadata.json
# ---------------------------------------------------------------------------

class AgentIO(BaseModel):
    """One declared input or output of an agent."""
    model_config = ConfigDict(extra="allow")

    name: str
    description: str = ""
    type: str = ""


class MeshAgentMetadata(BaseModel):
    """Descriptive metadata for a single mesh agent."""
    model_config = ConfigDict(extra="allow")

    name: str
    description: str = ""
    inputs: List[AgentIO] = Field(default_factory=list)
    outputs: List[AgentIO] = Field(default_factory=list)
    external_apis: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
