"""Host-facing plugin actions for the Heurist mesh.

Each PluginAction bundles what a conversational runtime needs to offer a
mesh capability: a name, trigger keywords for `validate`, and a handler
that turns caller options into a facade call. Handlers never raise for
mesh failures; they log and return an apology ActionResult instead.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from heurist_mesh.actions import (
    CoinGeckoTokenInfoAction,
    DexScreenerTokenInfoAction,
    GoplusAnalysisAction,
    QueryAgentAction,
)
from heurist_mesh.config import Settings, settings as default_settings
from heurist_mesh.errors import InvalidArgumentError, MeshError
from heurist_mesh.mesh.client import MeshClient

logger = logging.getLogger(__name__)

REPLY_ACTION = "REPLY"


@dataclass
class ActionResult:
    """What a handler hands back to the host runtime."""
    success: bool
    text: str
    thought: str = ""
    actions: List[str] = field(default_factory=list)
    data: Any = None


@dataclass(frozen=True)
class ExampleTurn:
    name: str
    text: str
    thought: Optional[str] = None
    actions: List[str] = field(default_factory=list)


Handler = Callable[[MeshClient, Mapping[str, Any]], Awaitable["HandlerOutput"]]


@dataclass
class HandlerOutput:
    text: str
    result: Any
    detail: str


@dataclass
class PluginAction:
    """One action the host runtime can select and run."""
    name: str
    description: str
    similes: List[str]
    keywords: List[str]
    failure_text: str
    handler: Handler
    examples: List[List[ExampleTurn]] = field(default_factory=list)

    def validate(self, text: Optional[str]) -> bool:
        """True when the message mentions any trigger keyword."""
        lowered = (text or "").lower()
        return any(keyword in lowered for keyword in self.keywords)

    async def handle(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        client: Optional[MeshClient] = None,
        config: Optional[Settings] = None,
    ) -> ActionResult:
        options = options or {}
        try:
            if client is None:
                client = (config or default_settings).build_client()
            output = await self.handler(client, options)
        except MeshError as exc:
            logger.error("Error in %s action: %s", self.name, exc)
            return ActionResult(
                success=False,
                text=self.failure_text,
                thought=f"Error executing {self.name} action ({exc.code}): {exc}",
                actions=[REPLY_ACTION],
            )

        return ActionResult(
            success=True,
            text=output.text,
            thought=f"{output.detail} Result: {_dumps(output.result)}",
            actions=[self.name],
            data=output.result,
        )


def _dumps(value: Any) -> str:
    return json.dumps(value, default=str)


def _option(options: Mapping[str, Any], name: str) -> Any:
    value = options.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{name} is required", parameter=name)
    return value


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

async def _coingecko_handler(client: MeshClient, options: Mapping[str, Any]) -> HandlerOutput:
    action = CoinGeckoTokenInfoAction(client=client)
    kind = options.get("action")

    if kind == "getTokenInfo":
        coingecko_id = _option(options, "coingeckoId")
        result = await action.get_token_info(coingecko_id)
        text = f"Here's the token information for {coingecko_id}"
    elif kind == "getTrendingCoins":
        result = await action.get_trending_coins()
        text = "Here are the current trending coins"
    elif kind == "getCoingeckoId":
        token_name = _option(options, "tokenName")
        result = await action.get_coingecko_id(token_name)
        text = f"Found CoinGecko ID for {token_name}"
    else:
        raise InvalidArgumentError(f"Unknown action: {kind}", parameter="action")

    return HandlerOutput(text, result, f"Executed CoinGecko {kind} request.")


async def _dexscreener_handler(client: MeshClient, options: Mapping[str, Any]) -> HandlerOutput:
    action = DexScreenerTokenInfoAction(client=client)
    kind = options.get("action")

    if kind == "searchPairs":
        search_term = _option(options, "searchTerm")
        result = await action.search_pairs(search_term)
        text = f"Here are the pairs for {search_term}"
    elif kind == "getTokenPairs":
        chain = _option(options, "chain")
        token_address = _option(options, "tokenAddress")
        result = await action.get_token_pairs(chain, token_address)
        text = f"Here are the pairs for token {token_address} on {chain}"
    else:
        raise InvalidArgumentError(f"Unknown action: {kind}", parameter="action")

    return HandlerOutput(text, result, f"Executed DexScreener {kind} request.")


async def _goplus_handler(client: MeshClient, options: Mapping[str, Any]) -> HandlerOutput:
    contract_address = _option(options, "contractAddress")
    chain_id = _option(options, "chainId")
    result = await GoplusAnalysisAction(client=client).fetch_security_details(contract_address, chain_id)
    return HandlerOutput(
        f"Here's the security analysis for {contract_address} on chain {chain_id}",
        result,
        "Executed GoPlus security check.",
    )


async def _query_agent_handler(client: MeshClient, options: Mapping[str, Any]) -> HandlerOutput:
    agent_id = _option(options, "agentId")
    query = _option(options, "query")
    result = await QueryAgentAction(client=client).query(agent_id, query)

    answer = result.get("response") if isinstance(result, dict) else None
    return HandlerOutput(
        f"Agent {agent_id} response: {answer or _dumps(result)}",
        result,
        f'Queried Mesh agent {agent_id} with: "{query}".',
    )


# ---------------------------------------------------------------------------
# Action table
# ---------------------------------------------------------------------------

COINGECKO_TOKEN_INFO = PluginAction(
    name="coinGeckoTokenInfo",
    description="Get token information from CoinGecko",
    similes=["getCryptoInfo", "checkTokenPrice", "fetchCoinData"],
    keywords=["crypto", "token", "coin", "price", "coingecko"],
    failure_text="I'm sorry, I couldn't retrieve the token information at this time.",
    handler=_coingecko_handler,
    examples=[[
        ExampleTurn("user1", "What's the current price of Bitcoin?"),
        ExampleTurn(
            "assistant",
            "Here's the token information for bitcoin",
            thought="User is asking for Bitcoin price information. I'll use the CoinGecko action to get this data.",
            actions=["coinGeckoTokenInfo"],
        ),
    ]],
)

DEXSCREENER_TOKEN_INFO = PluginAction(
    name="dexScreenerTokenInfo",
    description="Get token information from DexScreener",
    similes=["checkPairs", "lookupDex", "findTradingPairs"],
    keywords=["dex", "pair", "trading", "liquidity", "dexscreener"],
    failure_text="I'm sorry, I couldn't retrieve the DEX information at this time.",
    handler=_dexscreener_handler,
    examples=[[
        ExampleTurn("user1", "Find trading pairs for USDC on Ethereum"),
        ExampleTurn(
            "assistant",
            "Here are the pairs for token 0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48 on ethereum",
            thought="User is asking for USDC trading pairs on Ethereum. I'll use DexScreener to look this up.",
            actions=["dexScreenerTokenInfo"],
        ),
    ]],
)

GOPLUS_TOKEN_SECURITY = PluginAction(
    name="goplusTokenSecurity",
    description="Get token security information from GoPlus",
    similes=["checkTokenSecurity", "scanContract", "verifyTokenSafety"],
    keywords=["security", "safe", "verify", "check", "scam", "goplus"],
    failure_text="I'm sorry, I couldn't complete the security analysis at this time.",
    handler=_goplus_handler,
    examples=[[
        ExampleTurn("user1", "Check if this token is safe: 0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48 on Ethereum"),
        ExampleTurn(
            "assistant",
            "Here's the security analysis for 0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48 on chain 1",
            thought="User wants to verify token safety. I'll check the contract using GoPlus.",
            actions=["goplusTokenSecurity"],
        ),
    ]],
)

QUERY_AGENT = PluginAction(
    name="queryAgent",
    description="Send a natural language query to any Heurist Mesh agent",
    similes=["askMeshAgent", "queryMesh", "talkToAgent"],
    keywords=["mesh", "agent", "ask", "query"],
    failure_text="I'm sorry, I couldn't get a response from the agent at this time.",
    handler=_query_agent_handler,
    examples=[[
        ExampleTurn("user1", "Ask the blockchain agent about Ethereum gas prices"),
        ExampleTurn(
            "assistant",
            "Agent BlockchainInfoAgent response: The current average gas price on Ethereum is 25 gwei.",
            thought="User wants information from a specific agent. I'll forward this query to the blockchain agent.",
            actions=["queryAgent"],
        ),
    ]],
)


class HeuristMeshPlugin:
    """Plugin bundle registered with the host runtime."""

    name = "heurist-mesh"
    description = "Heurist Mesh Agent integration"

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        self.actions: Dict[str, PluginAction] = {
            action.name: action
            for action in (COINGECKO_TOKEN_INFO, DEXSCREENER_TOKEN_INFO, GOPLUS_TOKEN_SECURITY, QUERY_AGENT)
        }

    def initialize(self) -> Settings:
        """Validate configuration up front; raises ConfigurationError."""
        self.config.require_api_key()
        logger.info("Heurist Mesh plugin initialized (%s)", self.config.mesh_base_url)
        return self.config

    def matching_actions(self, text: Optional[str]) -> List[PluginAction]:
        return [action for action in self.actions.values() if action.validate(text)]

    async def run(
        self,
        name: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        client: Optional[MeshClient] = None,
    ) -> ActionResult:
        try:
            action = self.actions[name]
        except KeyError:
            raise InvalidArgumentError(f"Unknown plugin action: {name}", parameter="name") from None
        return await action.handle(options, client=client, config=self.config)
