"""Per-agent facades over the mesh client."""

from heurist_mesh.actions.agents import (
    CoinGeckoTokenInfoAction,
    DexScreenerTokenInfoAction,
    GoplusAnalysisAction,
    QueryAgentAction,
)
from heurist_mesh.actions.base import BaseMeshAction

__all__ = [
    "BaseMeshAction",
    "CoinGeckoTokenInfoAction",
    "DexScreenerTokenInfoAction",
    "GoplusAnalysisAction",
    "QueryAgentAction",
]
