# =============================================================================
# naver_search/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every value that crosses a layer
# boundary: credentials, search parameters, DataLab request bodies, and the
# result envelope handed back to the transport.
#
# DESIGN PRINCIPLE: one dataclass per wire shape.
#   The shopping-trend endpoints look alike but are NOT interchangeable on
#   the wire.  Some take `category` as a plain code, others as a list of
#   {name, param} pairs; some carry a device filter, others ages.  Each
#   endpoint therefore gets its own request class with its own to_body(),
#   so a field from one variant can never leak into another.
#
#   All request classes are frozen: they are built once per call from
#   validated input and never modified afterwards.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union


# -----------------------------------------------------------------------------
# Credentials: the one piece of shared state in the process
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Credentials:
    """Client id/secret pair issued by the Naver Developer Center."""

    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        # Never print the secret into logs.
        return f"Credentials(client_id={self.client_id!r}, client_secret='***')"


# -----------------------------------------------------------------------------
# Keyword search parameters (GET query strings)
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchParams:
    """Query-string parameters shared by every keyword search category."""

    query: str
    display: int = 10                  # Results per page
    start: int = 1                     # 1-based offset
    sort: Optional[str] = None         # "sim" or "date"; upstream default if None

    def as_query(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "query": self.query,
            "display": self.display,
            "start": self.start,
        }
        if self.sort is not None:
            params["sort"] = self.sort
        return params


@dataclass(frozen=True)
class LocalSearchParams:
    """Query-string parameters for local business search.

    The local endpoint is much narrower than the others: at most 5 results,
    only the first page, and its own sort keys ("random" / "comment").
    """

    query: str
    display: int = 1
    start: int = 1
    sort: Optional[str] = None

    def as_query(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "query": self.query,
            "display": self.display,
            "start": self.start,
        }
        if self.sort is not None:
            params["sort"] = self.sort
        return params


# -----------------------------------------------------------------------------
# DataLab building blocks
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class KeywordGroup:
    """A named group of search terms for search-trend analysis."""

    group_name: str
    keywords: list[str]

    def to_body(self) -> dict[str, Any]:
        return {"groupName": self.group_name, "keywords": list(self.keywords)}


@dataclass(frozen=True)
class NamedParams:
    """A {name, param[]} pair.

    Used for shopping categories (name + category codes) and for shopping
    keyword groups (name + keywords); the wire shape is the same.
    """

    name: str
    param: list[str]

    def to_body(self) -> dict[str, Any]:
        return {"name": self.name, "param": list(self.param)}


@dataclass(frozen=True)
class _DatalabRequest:
    start_date: str                    # yyyy-mm-dd
    end_date: str                      # yyyy-mm-dd
    time_unit: str                     # "date", "week" or "month"

    def _period(self) -> dict[str, Any]:
        return {
            "startDate": self.start_date,
            "endDate": self.end_date,
            "timeUnit": self.time_unit,
        }


@dataclass(frozen=True)
class SearchTrendRequest(_DatalabRequest):
    """Body of POST /datalab/search."""

    path: ClassVar[str] = "/search"

    keyword_groups: list[KeywordGroup] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        body = self._period()
        body["keywordGroups"] = [group.to_body() for group in self.keyword_groups]
        return body


# -----------------------------------------------------------------------------
# Shopping trend variants (the tagged union)
# -----------------------------------------------------------------------------
# The class IS the tag: `path` tells the client which endpoint to hit, and
# to_body() emits exactly the fields that endpoint declares.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ShoppingCategoriesRequest(_DatalabRequest):
    """Trend of up to several shopping categories, compared side by side."""

    path: ClassVar[str] = "/shopping/categories"

    category: list[NamedParams] = field(default_factory=list)
    device: Optional[str] = None
    gender: Optional[str] = None
    ages: Optional[list[str]] = None

    def to_body(self) -> dict[str, Any]:
        body = self._period()
        body["category"] = [item.to_body() for item in self.category]
        # Optional filters are omitted entirely when not requested.
        if self.device is not None:
            body["device"] = self.device
        if self.gender is not None:
            body["gender"] = self.gender
        if self.ages is not None:
            body["ages"] = list(self.ages)
        return body


@dataclass(frozen=True)
class ShoppingCategoryDeviceRequest(_DatalabRequest):
    path: ClassVar[str] = "/shopping/category/device"

    category: str = ""
    device: str = ""

    def to_body(self) -> dict[str, Any]:
        body = self._period()
        body.update(category=self.category, device=self.device)
        return body


@dataclass(frozen=True)
class ShoppingCategoryGenderRequest(_DatalabRequest):
    path: ClassVar[str] = "/shopping/category/gender"

    category: str = ""
    gender: str = ""

    def to_body(self) -> dict[str, Any]:
        body = self._period()
        body.update(category=self.category, gender=self.gender)
        return body


@dataclass(frozen=True)
class ShoppingCategoryAgeRequest(_DatalabRequest):
    path: ClassVar[str] = "/shopping/category/age"

    category: str = ""
    ages: list[str] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        body = self._period()
        body.update(category=self.category, ages=list(self.ages))
        return body


@dataclass(frozen=True)
class ShoppingKeywordsRequest(_DatalabRequest):
    """Trend of several keyword groups inside one shopping category."""

    path: ClassVar[str] = "/shopping/category/keywords"

    category: str = ""
    keyword: list[NamedParams] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        body = self._period()
        body["category"] = self.category
        body["keyword"] = [item.to_body() for item in self.keyword]
        return body


# -----------------------------------------------------------------------------
# Keyword-by-dimension variants
# -----------------------------------------------------------------------------
# Upstream receives all three dimension fields on these endpoints, with the
# ones not being broken down sent as "" / [].  That is the observed wire
# behaviour and it is kept as-is rather than "cleaned up" into omission.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class _ShoppingKeywordDimensionRequest(_DatalabRequest):
    category: str = ""
    keyword: str = ""

    def _keyword_body(self, device: str = "", gender: str = "",
                      ages: Optional[list[str]] = None) -> dict[str, Any]:
        body = self._period()
        body.update(
            category=self.category,
            keyword=self.keyword,
            device=device,
            gender=gender,
            ages=list(ages or []),
        )
        return body


@dataclass(frozen=True)
class ShoppingKeywordDeviceRequest(_ShoppingKeywordDimensionRequest):
    path: ClassVar[str] = "/shopping/category/keyword/device"

    device: str = ""

    def to_body(self) -> dict[str, Any]:
        return self._keyword_body(device=self.device)


@dataclass(frozen=True)
class ShoppingKeywordGenderRequest(_ShoppingKeywordDimensionRequest):
    path: ClassVar[str] = "/shopping/category/keyword/gender"

    gender: str = ""

    def to_body(self) -> dict[str, Any]:
        return self._keyword_body(gender=self.gender)


@dataclass(frozen=True)
class ShoppingKeywordAgeRequest(_ShoppingKeywordDimensionRequest):
    path: ClassVar[str] = "/shopping/category/keyword/age"

    ages: list[str] = field(default_factory=list)

    def to_body(self) -> dict[str, Any]:
        return self._keyword_body(ages=self.ages)


ShoppingTrendRequest = Union[
    ShoppingCategoriesRequest,
    ShoppingCategoryDeviceRequest,
    ShoppingCategoryGenderRequest,
    ShoppingCategoryAgeRequest,
    ShoppingKeywordsRequest,
    ShoppingKeywordDeviceRequest,
    ShoppingKeywordGenderRequest,
    ShoppingKeywordAgeRequest,
]


# -----------------------------------------------------------------------------
# ResultEnvelope: what every operation returns, success or not
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ResultEnvelope:
    """Uniform success/failure wrapper produced by the Dispatcher.

    Exactly one of `data` (on success) or `error_message` (on failure) is
    meaningful.  `data` is the upstream JSON payload, untouched.
    """

    success: bool
    data: Any = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, data: Any) -> "ResultEnvelope":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "ResultEnvelope":
        return cls(success=False, error_message=message)

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "errorMessage": self.error_message}
