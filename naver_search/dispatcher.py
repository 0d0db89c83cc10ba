# =============================================================================
# naver_search/dispatcher.py  -  The Dispatcher
# =============================================================================
#
# HOW A CALL FLOWS:
#   1. Look up the operation by name        → "Unknown operation: <name>"
#   2. Validate arguments against its model → "Invalid arguments for ..."
#   3. Invoke the bound upstream call       → UpstreamError, NotInitialized...
#   4. Wrap the outcome in a ResultEnvelope
#
# Step 3 only ever runs after step 2 succeeded, so nothing reaches the
# network without passing validation.  And execute() never raises: this is
# the one place where every failure becomes a failed envelope.
# =============================================================================

import logging
from typing import Any, Iterable, Mapping, Optional

from naver_search.catalog import OPERATIONS, OperationSpec, build_registry
from naver_search.client import NaverSearchClient
from naver_search.errors import NaverSearchError, OperationNotFoundError
from naver_search.models import ResultEnvelope

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes named calls to the upstream client and wraps the results."""

    def __init__(
        self,
        client: NaverSearchClient,
        operations: Iterable[OperationSpec] = OPERATIONS,
    ):
        self._client = client
        self._operations = {op.name: op for op in operations}
        self._registry = build_registry(self._operations.values())

    @property
    def operations(self) -> list[OperationSpec]:
        return list(self._operations.values())

    def execute(self, name: str, raw_args: Optional[Mapping[str, Any]] = None) -> ResultEnvelope:
        try:
            operation = self._operations.get(name)
            if operation is None:
                raise OperationNotFoundError(name)

            args = self._registry.validate(name, raw_args)
            data = operation.call(self._client, args)
        except NaverSearchError as exc:
            logger.info("%s failed: %s", name, exc)
            return ResultEnvelope.fail(str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while executing %s", name)
            return ResultEnvelope.fail(str(exc) or exc.__class__.__name__)

        return ResultEnvelope.ok(data)
