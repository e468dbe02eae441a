# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers that expose core/ functions to the agent as tools.
#
# Each tool:
#   1. Logs the call (stderr; stdout is the MCP transport)
#   2. Calls one core/ function
#   3. Returns a plain dict with the camelCase keys its docstring promises
#
# Tools do not decide anything.  When a core/ call fails, the exception is
# raised and the tool invocation fails; there is no retry.
# =============================================================================
