"""Heurist mesh agents as plugin actions for conversational runtimes."""

from heurist_mesh.errors import (
    AgentNotFoundError,
    ConfigurationError,
    InvalidArgumentError,
    MeshCallError,
    MeshError,
)
from heurist_mesh.mesh.client import MeshClient

__version__ = "0.1.0"

__all__ = [
    "AgentNotFoundError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MeshCallError",
    "MeshClient",
    "MeshError",
]
