# =============================================================================
# naver_tools/__init__.py
# =============================================================================
# This package contains the FastMCP translation layer.
#
# ARCHITECTURAL ROLE:
#   naver_tools/ sits between the MCP protocol and naver_search/.  It:
#     1. Advertises every catalog operation as an MCP tool
#     2. Hands each tool call to the Dispatcher
#     3. Turns the ResultEnvelope into MCP content (or an isError result)
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate arguments (the Dispatcher does, before any
#     network call)
#   - They do NOT talk to Naver directly (the client does)
# =============================================================================
