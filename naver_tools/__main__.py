# =============================================================================
# naver_tools/__main__.py  -  Entry Point for the Naver Search MCP Server
# =============================================================================
#
# HOW TO RUN:
#   NAVER_CLIENT_ID=... NAVER_CLIENT_SECRET=... python -m naver_tools
#   (installed: the `naver-search-mcp` console script runs the same main())
#   Both variables may also come from a .env file in the working directory.
#
# WHAT HAPPENS:
#   1. Loads .env into the environment (python-dotenv)
#   2. Reads NAVER_CLIENT_ID / NAVER_CLIENT_SECRET: exits with status 1
#      if either is missing, before serving anything
#   3. Builds the Naver client and the Dispatcher around it
#   4. Registers every catalog operation as an MCP tool
#   5. Serves MCP over stdio until the client disconnects
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

from naver_search.client import NaverSearchClient
from naver_search.config import load_credentials
from naver_search.dispatcher import Dispatcher
from naver_search.errors import MissingCredentialsError
from naver_tools.mcp_server import configure_logging, create_server


def main() -> None:
    # Load environment variables from .env before reading credentials.
    load_dotenv()
    configure_logging()

    try:
        credentials = load_credentials()
    except MissingCredentialsError as exc:
        logging.error(f"Error: {exc}")
        sys.exit(1)

    client = NaverSearchClient()
    client.initialize(credentials)

    server = create_server(Dispatcher(client))
    logging.info("Naver Search MCP Server running on stdio")
    server.run()


# =============================================================================
# Script entry point
# =============================================================================
if __name__ == "__main__":
    main()
