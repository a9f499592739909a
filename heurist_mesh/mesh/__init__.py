"""Mesh client: request envelopes, transport and error translation."""

from heurist_mesh.mesh.client import MeshClient
from heurist_mesh.mesh.models import MeshAgentMetadata, MeshAgentResponse

__all__ = ["MeshClient", "MeshAgentMetadata", "MeshAgentResponse"]
