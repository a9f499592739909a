"""Facades for the mesh agents that have dedicated actions."""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from heurist_mesh.actions.base import BaseMeshAction, ToolArgumentTable
from heurist_mesh.mesh.client import MeshClient


class CoinGeckoTokenInfoAction(BaseMeshAction):
    """Token prices, trending coins and id lookup via CoinGecko."""

    agent_id = "CoinGeckoTokenInfoAgent"
    TOOL_ARGUMENTS: ToolArgumentTable = {
        "get_token_info": (("coingecko_id", "coingecko_id"),),
        "get_trending_coins": (),
        "get_coingecko_id": (("token_name", "token_name"),),
    }

    async def get_token_info(self, coingecko_id: str) -> Dict[str, Any]:
        return await self.call_tool("get_token_info", coingecko_id=coingecko_id)

    async def get_trending_coins(self) -> Dict[str, Any]:
        return await self.call_tool("get_trending_coins")

    async def get_coingecko_id(self, token_name: str) -> Dict[str, Any]:
        return await self.call_tool("get_coingecko_id", token_name=token_name)


class DexScreenerTokenInfoAction(BaseMeshAction):
    """Trading pair search on DexScreener."""

    agent_id = "DexScreenerTokenInfoAgent"
    TOOL_ARGUMENTS: ToolArgumentTable = {
        "search_pairs": (("search_term", "search_term"),),
        "get_token_pairs": (
            ("chain", "chain"),
            ("token_address", "token_address"),
        ),
    }

    async def search_pairs(self, search_term: str) -> Dict[str, Any]:
        return await self.call_tool("search_pairs", search_term=search_term)

    async def get_token_pairs(self, chain: str, token_address: str) -> Dict[str, Any]:
        return await self.call_tool("get_token_pairs", chain=chain, token_address=token_address)


class GoplusAnalysisAction(BaseMeshAction):
    """Contract security scan via GoPlus."""

    agent_id = "GoplusAnalysisAgent"
    TOOL_ARGUMENTS: ToolArgumentTable = {
        "fetch_security_details": (
            ("contract_address", "contract_address"),
            ("chain_id", "chain_id"),
        ),
    }

    async def fetch_security_details(
        self,
        contract_address: str,
        chain_id: Union[str, int],
    ) -> Dict[str, Any]:
        # chain_id goes out exactly as given (1 stays 1, "1" stays "1")
        return await self.call_tool(
            "fetch_security_details",
            contract_address=contract_address,
            chain_id=chain_id,
        )


class QueryAgentAction:
    """Free-text access to any mesh agent, including ones without a facade."""

    def __init__(self, api_key: Optional[str] = None, *, client: Optional[MeshClient] = None):
        self.client = client if client is not None else MeshClient(api_key or "")

    async def query(self, agent_id: str, query: str) -> Dict[str, Any]:
        action = BaseMeshAction(agent_id=agent_id, client=self.client)
        return await action.natural_language_query(query)
