# =============================================================================
# naver_search/client.py  -  Naver Open API Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the credentials and performs ONE HTTPS request per call against
#   the Naver Open API.  It knows four request families:
#
#     A. keyword search   GET  /v1/search/<type>?query=...
#     B. local search     GET  /v1/search/local?query=...
#     C. search trend     POST /v1/datalab/search            (JSON body)
#     D. shopping trend   POST /v1/datalab/shopping/...      (JSON body)
#
# WHAT IT DOES NOT DO:
#   - No retries, no backoff, no caching.  One call, one request.
#   - No timeout override.  Deadlines belong to whoever invokes us.
#   - No response reshaping.  The parsed JSON goes back untouched.
#
# ERRORS:
#   Every HTTP or network failure leaves this module as an UpstreamError,
#   carrying Naver's own `errorMessage` when the response body has one.
#   Using the client before initialize() raises NotInitializedError and
#   sends nothing: an unauthenticated request is never attempted.
#
# LIFETIME:
#   naver_tools/__main__.py builds exactly one client and passes it to the Dispatcher.
#   Tests build their own with a fake `urlopen`.
# =============================================================================

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Callable, Optional

from naver_search.errors import NotInitializedError, UpstreamError
from naver_search.models import (
    Credentials,
    LocalSearchParams,
    SearchParams,
    SearchTrendRequest,
    ShoppingTrendRequest,
)

logger = logging.getLogger(__name__)

SEARCH_BASE_URL = "https://openapi.naver.com/v1/search"
DATALAB_BASE_URL = "https://openapi.naver.com/v1/datalab"

CLIENT_ID_HEADER = "X-Naver-Client-Id"
CLIENT_SECRET_HEADER = "X-Naver-Client-Secret"


class NaverSearchClient:
    """Thin HTTPS client for the Naver search and DataLab APIs."""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        urlopen: Callable[..., Any] = urllib.request.urlopen,
    ):
        self._credentials = credentials
        self._urlopen = urlopen

    def initialize(self, credentials: Credentials) -> None:
        """Set (or replace) the credentials used for every later request."""
        self._credentials = credentials

    @property
    def is_initialized(self) -> bool:
        return self._credentials is not None

    # -------------------------------------------------------------------------
    # Family A: keyword search
    # -------------------------------------------------------------------------
    def search(self, search_type: str, params: SearchParams) -> Any:
        """Search one content category (news, blog, shop, ...)."""
        return self._get(f"{SEARCH_BASE_URL}/{search_type}", params.as_query())

    # -------------------------------------------------------------------------
    # Family B: local business search
    # -------------------------------------------------------------------------
    def search_local(self, params: LocalSearchParams) -> Any:
        """Search local businesses.

        Items carry title, category, address / roadAddress and mapx / mapy
        coordinates rather than the generic title/link/description shape.
        """
        return self._get(f"{SEARCH_BASE_URL}/local", params.as_query())

    # -------------------------------------------------------------------------
    # Family C: DataLab search trend
    # -------------------------------------------------------------------------
    def search_trend(self, request: SearchTrendRequest) -> Any:
        return self._post(request.path, request.to_body())

    # -------------------------------------------------------------------------
    # Family D: DataLab shopping insight
    # -------------------------------------------------------------------------
    def shopping_trend(self, request: ShoppingTrendRequest) -> Any:
        # The request class carries its own endpoint path and body shape.
        return self._post(request.path, request.to_body())

    # -------------------------------------------------------------------------
    # Plumbing
    # -------------------------------------------------------------------------
    def _headers(self, content_type: Optional[str] = None) -> dict[str, str]:
        if self._credentials is None:
            raise NotInitializedError()
        headers = {
            CLIENT_ID_HEADER: self._credentials.client_id,
            CLIENT_SECRET_HEADER: self._credentials.client_secret,
        }
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    def _get(self, url: str, query: dict[str, Any]) -> Any:
        headers = self._headers()
        full_url = f"{url}?{urllib.parse.urlencode(query)}"
        logger.debug("GET %s", full_url)
        return self._send(urllib.request.Request(full_url, headers=headers, method="GET"))

    def _post(self, path: str, body: dict[str, Any]) -> Any:
        headers = self._headers("application/json")
        url = f"{DATALAB_BASE_URL}{path}"
        logger.debug("POST %s %s", url, body)
        data = json.dumps(body).encode("utf-8")
        return self._send(
            urllib.request.Request(url, data=data, headers=headers, method="POST")
        )

    def _send(self, request: urllib.request.Request) -> Any:
        try:
            with self._urlopen(request) as response:
                raw = response.read()
        except urllib.error.HTTPError as exc:
            # HTTPError is a URLError subclass, so it must be handled first.
            raise UpstreamError(
                f"Naver API Error: {_error_detail(exc)}", status=exc.code
            ) from exc
        except urllib.error.URLError as exc:
            raise UpstreamError(f"Naver API Error: {exc.reason}") from exc
        except OSError as exc:
            raise UpstreamError(f"Naver API Error: {exc}") from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise UpstreamError(f"Naver API Error: invalid JSON response ({exc})") from exc


def _error_detail(exc: urllib.error.HTTPError) -> str:
    """Prefer Naver's own errorMessage; fall back to the HTTP status line."""
    try:
        payload = json.loads(exc.read().decode("utf-8"))
    except (OSError, ValueError, AttributeError):
        payload = None
    if isinstance(payload, dict) and payload.get("errorMessage"):
        return str(payload["errorMessage"])
    return f"HTTP Error {exc.code}: {exc.reason}"
