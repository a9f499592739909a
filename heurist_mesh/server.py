"""
Heurist Mesh MCP Bridge
=======================

Exposes the Heurist mesh plugin actions to any MCP-compatible host.

Tools:
  - coingecko_token_info: token info, trending coins, CoinGecko id lookup
  - dexscreener_token_info: trading pair search and per-token pairs
  - goplus_token_security: contract security scan
  - query_agent: free-text question to any mesh agent
  - agent_metadata: descriptive metadata for one mesh agent
  - list_agents: identifiers of every advertised agent

Env/config:
  - HEURIST_API_KEY   (required)
  - MESH_BASE_URL     (defaults to https://sequencer-v2.heurist.xyz)
  - MESH_TIMEOUT_S    (per-call HTTP timeout, seconds)
"""

import logging
import sys
from typing import Any, Dict, Optional, Union

from mcp.server.fastmcp import FastMCP

from heurist_mesh.config import settings
from heurist_mesh.errors import ConfigurationError, MeshError
from heurist_mesh.mesh.client import MeshClient
from heurist_mesh.plugin import ActionResult, HeuristMeshPlugin

logger = logging.getLogger(__name__)

mcp = FastMCP("heurist-mesh")
plugin = HeuristMeshPlugin(settings)


def _client() -> MeshClient:
    return settings.build_client()


def _as_dict(result: ActionResult) -> Dict[str, Any]:
    return {
        "success": result.success,
        "text": result.text,
        "thought": result.thought,
        "actions": result.actions,
        "data": result.data,
    }


def _error(exc: MeshError) -> Dict[str, Any]:
    return {"success": False, "error": str(exc), "code": exc.code}


@mcp.tool()
async def coingecko_token_info(
    action: str,
    coingecko_id: Optional[str] = None,
    token_name: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get token information from CoinGecko.

    Args:
        action: One of getTokenInfo, getTrendingCoins, getCoingeckoId.
        coingecko_id: CoinGecko id (required for getTokenInfo), e.g. "bitcoin".
        token_name: Token name (required for getCoingeckoId).
    """
    result = await plugin.run(
        "coinGeckoTokenInfo",
        {"action": action, "coingeckoId": coingecko_id, "tokenName": token_name},
    )
    return _as_dict(result)


@mcp.tool()
async def dexscreener_token_info(
    action: str,
    search_term: Optional[str] = None,
    chain: Optional[str] = None,
    token_address: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get trading pair information from DexScreener.

    Args:
        action: One of searchPairs, getTokenPairs.
        search_term: Free-text pair search (required for searchPairs).
        chain: Chain name (required for getTokenPairs), e.g. "ethereum".
        token_address: Token contract address (required for getTokenPairs).
    """
    result = await plugin.run(
        "dexScreenerTokenInfo",
        {"action": action, "searchTerm": search_term, "chain": chain, "tokenAddress": token_address},
    )
    return _as_dict(result)


@mcp.tool()
async def goplus_token_security(contract_address: str, chain_id: Union[int, str]) -> Dict[str, Any]:
    """
    Get token security information from GoPlus.

    Args:
        contract_address: Token contract address.
        chain_id: Chain id, e.g. 1 for Ethereum.
    """
    result = await plugin.run(
        "goplusTokenSecurity",
        {"contractAddress": contract_address, "chainId": chain_id},
    )
    return _as_dict(result)


@mcp.tool()
async def query_agent(agent_id: str, query: str) -> Dict[str, Any]:
    """
    Send a natural language query to any Heurist Mesh agent.

    Args:
        agent_id: Mesh agent identifier, e.g. "CoinGeckoTokenInfoAgent".
        query: The question, in plain language.
    """
    result = await plugin.run("queryAgent", {"agentId": agent_id, "query": query})
    return _as_dict(result)


@mcp.tool()
async def agent_metadata(agent_id: str) -> Dict[str, Any]:
    """
    Describe a mesh agent: inputs, outputs, external APIs and tags.

    Args:
        agent_id: Mesh agent identifier.
    """
    try:
        metadata = await _client().get_agent_metadata(agent_id)
    except MeshError as exc:
        logger.warning("agent_metadata(%s) failed: %s", agent_id, exc)
        return _error(exc)
    return {"success": True, "agent_id": agent_id, "metadata": metadata.model_dump()}


@mcp.tool()
async def list_agents() -> Dict[str, Any]:
    """List the identifiers of every agent the mesh advertises."""
    try:
        agents = await _client().list_agents()
    except MeshError as exc:
        logger.warning("list_agents failed: %s", exc)
        return _error(exc)
    return {"success": True, "agents": agents, "count": len(agents)}


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        plugin.initialize()
    except ConfigurationError as exc:
        logger.error("Cannot start heurist-mesh MCP bridge: %s", exc)
        sys.exit(f"heurist-mesh: {exc}")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
