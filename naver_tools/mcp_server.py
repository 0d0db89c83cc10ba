# =============================================================================
# naver_tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes every operation from naver_search.catalog as an MCP tool.
#   Each tool is a thin wrapper around Dispatcher.execute(): it handles
#   logging and converts the ResultEnvelope into MCP content.
#
# HOW IT WORKS (the flow):
#   1. An MCP client lists tools; FastMCP advertises the catalog entries
#      with their JSON Schemas
#   2. The client calls a tool by name (e.g., "search_news")
#   3. OperationTool.run() hands name + arguments to the Dispatcher
#   4. The Dispatcher validates, calls Naver, and returns an envelope
#   5. Success → pretty-printed JSON text; failure → isError result
#
# SCHEMAS:
#   Tools are OperationTool instances, not @mcp.tool() functions.  The
#   advertised parameters are the catalog JSON Schema, unchanged, and the
#   Dispatcher is the only component that validates arguments.
#
# RUNNING THIS SERVER:
#   Use the package entry point (it loads credentials first):
#       python -m naver_tools        or        naver-search-mcp
# =============================================================================

import asyncio
import json
import logging
import sys
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import ConfigDict, Field

from naver_search.catalog import OperationSpec
from naver_search.dispatcher import Dispatcher

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT
# (stdio transport).  Anything logged to stdout would corrupt the JSON-RPC
# stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + arguments)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
#     - RED for failed calls
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses (JSON output)
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"     # Reset to default terminal color

SERVER_NAME = "naver-search"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, arguments: dict[str, Any]) -> None:
    """Log an incoming tool call with its arguments in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in arguments.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, data: Any) -> None:
    """Log the tool response as compact JSON in GREEN."""
    compact = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    logging.info(f"{_GREEN}  ← {tool_name} response: {compact}{_RESET}")


def _log_error(tool_name: str, message: str) -> None:
    logging.error(f"{_RED}  ✗ {tool_name} failed: {message}{_RESET}")


# =============================================================================
# OperationTool: one MCP tool per catalog operation
# =============================================================================
class OperationTool(Tool):
    """An MCP tool whose schema and behaviour come from the catalog."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dispatcher: Dispatcher = Field(exclude=True, repr=False)

    @classmethod
    def from_operation(cls, operation: OperationSpec, dispatcher: Dispatcher) -> "OperationTool":
        return cls(
            name=operation.name,
            description=operation.description,
            parameters=operation.input_schema,
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        _log_request(self.name, arguments or {})

        # The upstream call blocks on network I/O; keep it off the event loop.
        envelope = await asyncio.to_thread(self.dispatcher.execute, self.name, arguments)

        if not envelope.success:
            _log_error(self.name, envelope.error_message)
            raise ToolError(f"Error: {envelope.error_message}")

        _log_response(self.name, envelope.data)
        text = json.dumps(envelope.data, ensure_ascii=False, indent=2)
        return ToolResult(content=[TextContent(type="text", text=text)])


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
def create_server(dispatcher: Dispatcher) -> FastMCP:
    """Build a FastMCP server exposing every operation known to `dispatcher`."""
    mcp = FastMCP(SERVER_NAME)
    for operation in dispatcher.operations:
        mcp.add_tool(OperationTool.from_operation(operation, dispatcher))
    _log_status(f"Registered {len(dispatcher.operations)} tools")
    return mcp
