# =============================================================================
# agent/weather_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the orchestrating agent: the LLM that reads the user's message,
#   calls the municipality and weather tools, and either asks a clarifying
#   question or answers with the forecast.
#
# HOW IT IS WIRED:
#
#   ┌──────────────────────────────────────────────────────────────┐
#   │                     Google ADK Agent                         │
#   │  instruction (agent/prompt.py)                               │
#   │  model       LiteLlm(settings.model)                         │
#   │  tools       MCPToolset ──stdio──▶ tools/mcp_server.py       │
#   └──────────────────────────────────────────────────────────────┘
#                                           │
#                                           ▼
#                               ┌────────────────────────┐
#                               │  FastMCP server        │
#                               │  • get_municipality    │
#                               │  • get_weather         │
#                               └────────────────────────┘
#                                           │
#                                           ▼
#                               ┌────────────────────────┐
#                               │  core/ (pure Python)   │
#                               └────────────────────────┘
#
# MODEL:
#   Any LiteLlm model string works ("openai/gpt-4o-mini" by default,
#   "openrouter/openai/gpt-4o", "anthropic/...", ...).  LiteLlm reads the
#   provider key (OPENAI_API_KEY, OPENROUTER_API_KEY, ...) from the
#   environment.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess with "uv run python" so it
#   runs inside the project's virtual environment, and talks to it over
#   stdin/stdout.  The subprocess inherits our environment, including
#   RAPIDAPI_KEY.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_weather_agent_prompt
from core.config import Settings

AGENT_NAME = "weather_agent"


def mcp_server_path() -> str:
    """Absolute path of tools/mcp_server.py, independent of the cwd."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(project_root, "tools", "mcp_server.py")


def create_tools(settings: Settings) -> MCPToolset:
    """MCP toolset exposing get_municipality and get_weather."""
    env = dict(os.environ)
    env["RAPIDAPI_KEY"] = settings.rapidapi_key
    env["RAPIDAPI_HOST"] = settings.rapidapi_host
    env["HTTP_TIMEOUT"] = str(settings.http_timeout)

    return MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", mcp_server_path()],
            env=env,
        ),
    )


def create_agent(settings: Settings) -> Agent:
    """Create the weather agent.

    Args:
        settings: Loaded once at startup; supplies the model string and the
            geocoding credentials forwarded to the tool server.  Without a
            geocoding key the agent gets no tools (workflow-only use).

    Returns:
        A configured Google ADK Agent named "weather_agent".
    """
    tools = [create_tools(settings)] if settings.rapidapi_key else []
    return Agent(
        name=AGENT_NAME,
        model=LiteLlm(model=settings.model),
        description=(
            "Resolves place names to municipalities, fetches forecasts and "
            "suggests weather-appropriate activities."
        ),
        instruction=get_weather_agent_prompt(),
        tools=tools,
    )
