# =============================================================================
# naver_search/config.py  -  Credential Loading
# =============================================================================
#
# The server needs exactly two settings, both issued by the Naver Developer
# Center:
#
#   NAVER_CLIENT_ID       → X-Naver-Client-Id header
#   NAVER_CLIENT_SECRET   → X-Naver-Client-Secret header
#
# They are read from the process environment.  The entry point calls load_dotenv()
# first, so a local .env file works too.  Missing (or empty) values are a
# FATAL startup condition, not a per-call error: the server must never come
# up and then answer every call with "unauthorized".
# =============================================================================

import os
from typing import Mapping, Optional

from naver_search.errors import MissingCredentialsError
from naver_search.models import Credentials

CLIENT_ID_ENV = "NAVER_CLIENT_ID"
CLIENT_SECRET_ENV = "NAVER_CLIENT_SECRET"


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """Build Credentials from the environment.

    Args:
        environ: Mapping to read from.  Defaults to os.environ.

    Raises:
        MissingCredentialsError: if either variable is unset or blank.
    """
    env = os.environ if environ is None else environ

    client_id = env.get(CLIENT_ID_ENV, "").strip()
    client_secret = env.get(CLIENT_SECRET_ENV, "").strip()

    missing = [
        name for name, value in ((CLIENT_ID_ENV, client_id), (CLIENT_SECRET_ENV, client_secret))
        if not value
    ]
    if missing:
        raise MissingCredentialsError(missing)

    return Credentials(client_id=client_id, client_secret=client_secret)
