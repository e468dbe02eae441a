# =============================================================================
# main.py  —  Entry Point for the Weather Activity Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py                 interactive chat with the agent
#   uv run python main.py --city Tokyo    one-shot workflow: forecast + plan
#
# CHAT MODE:
#   The agent receives each message and autonomously:
#     a) asks for a location if none was given
#     b) calls get_municipality to resolve the place name
#     c) asks for a municipality if the match is prefecture-level
#     d) otherwise calls get_weather and answers
#   Tool calls are printed as they happen and the answer is streamed.
#
# WORKFLOW MODE:
#   Runs workflows/weather_workflow.py once for --city: the forecast is
#   fetched directly (no geocoding key needed) and the agent streams an
#   activity plan.
#
# CONFIGURATION:
#   Read once, here, before anything else (see core/config.py).  A missing
#   RAPIDAPI_KEY in chat mode stops the program immediately.
# =============================================================================

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

# LiteLlm reads the model provider key from the environment when the agent
# is created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService

from agent.streaming import stream_agent_text
from agent.weather_agent import AGENT_NAME, create_agent
from core.config import Settings
from core.errors import ConfigurationError, WeatherAgentError
from workflows.base import APP_NAME, WorkflowContext
from workflows.weather_workflow import weather_workflow

USER_ID = "demo_user"


def _print_banner() -> None:
    print("=" * 70)
    print("  WEATHER ACTIVITY ASSISTANT")
    print("  Powered by Google ADK + LiteLlm + FastMCP")
    print("=" * 70)


def _print_chunk(chunk: str) -> None:
    print(chunk, end="", flush=True)


async def run_chat(settings: Settings) -> None:
    """Interactive loop: one in-memory session, one agent."""
    _print_banner()
    print("\n🔧 Initializing agent...")
    agent = create_agent(settings)

    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about the weather or what to do somewhere (e.g. '千代田区の天気は?')")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        print("\n🤖 Agent: ", end="", flush=True)
        received = False
        async for _ in stream_agent_text(
            runner,
            USER_ID,
            session.id,
            user_input,
            sink=_print_chunk,
            on_tool_call=lambda name: print(f"\n  🔧 Calling tool: {name}"),
        ):
            received = True

        if not received:
            print("\n⚠️  No response generated.")
        print("\n" + "-" * 70)


async def run_workflow(settings: Settings, city: str) -> str:
    """Run the forecast → activity plan workflow once."""
    _print_banner()
    print(f"\n📍 {city}\n")

    context = WorkflowContext(
        settings=settings,
        agents={AGENT_NAME: create_agent(settings)},
        sink=_print_chunk,
    )
    result = await weather_workflow.run({"city": city}, context)
    print("\n" + "=" * 70)
    return result.activities


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Weather activity assistant")
    parser.add_argument("--city", help="Run the workflow once for this city instead of chatting")
    args = parser.parse_args(argv)
    workflow_mode = bool(args.city)

    try:
        settings = Settings.from_env(require_geocoding_key=not workflow_mode)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if workflow_mode:
            asyncio.run(run_workflow(settings, args.city))
        else:
            asyncio.run(run_chat(settings))
    except WeatherAgentError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
