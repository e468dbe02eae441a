# =============================================================================
# core/__init__.py
# =============================================================================
# Pure-Python pieces of the weather assistant: settings, data models, the
# municipality resolver, the forecast fetcher, the address-level policy and
# the activity prompt.
#
# Nothing in this package imports Google ADK or FastMCP.  Every module can
# be imported and exercised without a model or an MCP server.
# =============================================================================
