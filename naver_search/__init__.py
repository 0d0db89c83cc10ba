# =============================================================================
# naver_search/__init__.py
# =============================================================================
# This package contains ALL core logic for the Naver search server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or any MCP transport code.
#   Input contracts (schemas), the upstream HTTP client, and the dispatcher
#   are plain Python (plus pydantic for validation).  You can import this
#   package in a REPL and call Dispatcher.execute() without a server.
#
# Layering, leaf-first:
#   models / errors  →  schemas  →  catalog  →  dispatcher
#                        client  ───────────────┘
# =============================================================================
