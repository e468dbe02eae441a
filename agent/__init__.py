# =============================================================================
# agent/__init__.py
# =============================================================================
# Google ADK configuration for the weather assistant:
#
#   prompt.py         system instructions (address-level policy in prose)
#   weather_agent.py  create_agent(): LiteLlm model + MCP tools
#   streaming.py      consume a streamed run as text chunks
#
# The agent decides WHICH tool to call and WHEN, and whether to ask the user
# a clarifying question.  Fetching and summarizing data lives in core/.
# =============================================================================
