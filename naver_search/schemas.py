# =============================================================================
# naver_search/schemas.py  -  Input Contracts (the Schema Registry)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares, for every operation, exactly which arguments a caller may
#   send: names, types, ranges, enumerations and defaults.  Each contract
#   is a pydantic model; the same model produces the JSON Schema that the
#   MCP layer advertises AND validates the arguments of every call.
#
# NAMING:
#   Callers (and Naver) speak camelCase ("startDate", "keywordGroups").
#   Python attributes are snake_case; the camelCase name is the alias.
#   Both spellings are accepted on input.
#
# THE GOLDEN RULE:
#   Nothing reaches the upstream client without passing through
#   SchemaRegistry.validate().  Each model's to_params() / to_request()
#   builds the outgoing value from validated fields only; unknown caller
#   fields are dropped here and never forwarded.
# =============================================================================

from datetime import date
from typing import Annotated, Any, Literal, Mapping, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from naver_search.errors import ArgumentValidationError, OperationNotFoundError
from naver_search.models import (
    KeywordGroup,
    LocalSearchParams,
    NamedParams,
    SearchParams,
    SearchTrendRequest,
    ShoppingCategoriesRequest,
    ShoppingCategoryAgeRequest,
    ShoppingCategoryDeviceRequest,
    ShoppingCategoryGenderRequest,
    ShoppingKeywordAgeRequest,
    ShoppingKeywordDeviceRequest,
    ShoppingKeywordGenderRequest,
    ShoppingKeywordsRequest,
)

# -----------------------------------------------------------------------------
# Enumerations
# -----------------------------------------------------------------------------
# Each keyword-search category maps 1:1 onto a path segment of
# https://openapi.naver.com/v1/search/<type>.
SearchType = Literal[
    "news",          # 뉴스
    "blog",          # 블로그
    "shop",          # 쇼핑
    "image",         # 이미지
    "webkr",         # 웹문서
    "encyc",         # 지식백과
    "kin",           # 지식iN
    "book",          # 책
    "doc",           # 전문자료 (academic)
    "cafearticle",   # 카페글
]

TimeUnit = Literal["date", "week", "month"]
Device = Literal["pc", "mo"]
Gender = Literal["f", "m"]
AgeBand = Literal["10", "20", "30", "40", "50", "60"]


def _age_as_str(value: Any) -> Any:
    # Callers often send 20 instead of "20".
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


AgeBands = list[Annotated[AgeBand, BeforeValidator(_age_as_str)]]
_AGES_DESCRIPTION = "Age bands (10, 20, 30, 40, 50, 60)"


def _not_bool(value: Any) -> Any:
    # bool is an int subclass; true must not become display=1.
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer, not a boolean")
    return value


Count = Annotated[int, BeforeValidator(_not_bool)]


class _Args(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )


# =============================================================================
# Keyword search
# =============================================================================
class SearchArgs(_Args):
    query: str = Field(min_length=1, description="Search query")
    display: Count = Field(10, ge=1, le=100, description="Number of results to display (default: 10)")
    start: Count = Field(1, ge=1, le=1000, description="Start position of search results (default: 1)")
    sort: Optional[Literal["sim", "date"]] = Field(
        None, description="Sort method (sim: similarity, date: chronological)"
    )

    def to_params(self) -> SearchParams:
        return SearchParams(
            query=self.query, display=self.display, start=self.start, sort=self.sort
        )


class UnifiedSearchArgs(SearchArgs):
    type: SearchType = Field(
        description="Content category to search (news, blog, shop, image, webkr, "
                    "encyc, kin, book, doc, cafearticle)"
    )


class LocalSearchArgs(_Args):
    query: str = Field(min_length=1, description="Search query")
    display: Count = Field(1, ge=1, le=5, description="Number of results to display (default: 1, max: 5)")
    start: Count = Field(1, ge=1, le=1, description="Start position of search results (default: 1, max: 1)")
    sort: Optional[Literal["random", "comment"]] = Field(
        None, description="Sort method (random: accuracy, comment: review count)"
    )

    def to_params(self) -> LocalSearchParams:
        return LocalSearchParams(
            query=self.query, display=self.display, start=self.start, sort=self.sort
        )


# =============================================================================
# DataLab
# =============================================================================
class _DatalabArgs(_Args):
    start_date: date = Field(alias="startDate", description="Start date (yyyy-mm-dd)")
    end_date: date = Field(alias="endDate", description="End date (yyyy-mm-dd)")
    time_unit: TimeUnit = Field(alias="timeUnit", description="Time unit (date, week, month)")

    @model_validator(mode="after")
    def check_period(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

    def _period(self) -> dict[str, str]:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "time_unit": self.time_unit,
        }


class KeywordGroupArgs(_Args):
    group_name: str = Field(alias="groupName", min_length=1, description="Group name")
    keywords: list[str] = Field(min_length=1, description="Keywords in the group")


class NamedParamsArgs(_Args):
    name: str = Field(min_length=1, description="Display name")
    param: list[str] = Field(min_length=1, description="Category codes or keywords")

    def to_model(self) -> NamedParams:
        return NamedParams(name=self.name, param=list(self.param))


class SearchTrendArgs(_DatalabArgs):
    keyword_groups: list[KeywordGroupArgs] = Field(
        alias="keywordGroups", min_length=1, description="Search keyword groups"
    )

    def to_request(self) -> SearchTrendRequest:
        return SearchTrendRequest(
            **self._period(),
            keyword_groups=[
                KeywordGroup(group_name=g.group_name, keywords=list(g.keywords))
                for g in self.keyword_groups
            ],
        )


class ShoppingCategoriesArgs(_DatalabArgs):
    category: list[NamedParamsArgs] = Field(
        min_length=1, description="Array of category name and code pairs"
    )
    device: Optional[Device] = Field(None, description="Device type (pc, mo)")
    gender: Optional[Gender] = Field(None, description="Gender (f, m)")
    ages: Optional[AgeBands] = Field(None, min_length=1, description=_AGES_DESCRIPTION)

    def to_request(self) -> ShoppingCategoriesRequest:
        return ShoppingCategoriesRequest(
            **self._period(),
            category=[c.to_model() for c in self.category],
            device=self.device,
            gender=self.gender,
            ages=list(self.ages) if self.ages is not None else None,
        )


class _ShoppingCategoryArgs(_DatalabArgs):
    category: str = Field(min_length=1, description="Category code")


class ShoppingCategoryDeviceArgs(_ShoppingCategoryArgs):
    device: Device = Field(description="Device type (pc, mo)")

    def to_request(self) -> ShoppingCategoryDeviceRequest:
        return ShoppingCategoryDeviceRequest(
            **self._period(), category=self.category, device=self.device
        )


class ShoppingCategoryGenderArgs(_ShoppingCategoryArgs):
    gender: Gender = Field(description="Gender (f, m)")

    def to_request(self) -> ShoppingCategoryGenderRequest:
        return ShoppingCategoryGenderRequest(
            **self._period(), category=self.category, gender=self.gender
        )


class ShoppingCategoryAgeArgs(_ShoppingCategoryArgs):
    ages: AgeBands = Field(min_length=1, description=_AGES_DESCRIPTION)

    def to_request(self) -> ShoppingCategoryAgeRequest:
        return ShoppingCategoryAgeRequest(
            **self._period(), category=self.category, ages=list(self.ages)
        )


class ShoppingKeywordsArgs(_ShoppingCategoryArgs):
    keyword: list[NamedParamsArgs] = Field(
        min_length=1, description="Array of keyword name and keyword pairs"
    )

    def to_request(self) -> ShoppingKeywordsRequest:
        return ShoppingKeywordsRequest(
            **self._period(),
            category=self.category,
            keyword=[k.to_model() for k in self.keyword],
        )


class _ShoppingKeywordArgs(_ShoppingCategoryArgs):
    keyword: str = Field(min_length=1, description="Search keyword")


# On the keyword-level endpoints the breakdown dimension is optional; an
# absent value goes upstream as "" or [].


class ShoppingKeywordDeviceArgs(_ShoppingKeywordArgs):
    device: Optional[Device] = Field(None, description="Device type (pc, mo)")

    def to_request(self) -> ShoppingKeywordDeviceRequest:
        return ShoppingKeywordDeviceRequest(
            **self._period(), category=self.category, keyword=self.keyword,
            device=self.device or "",
        )


class ShoppingKeywordGenderArgs(_ShoppingKeywordArgs):
    gender: Optional[Gender] = Field(None, description="Gender (f, m)")

    def to_request(self) -> ShoppingKeywordGenderRequest:
        return ShoppingKeywordGenderRequest(
            **self._period(), category=self.category, keyword=self.keyword,
            gender=self.gender or "",
        )


class ShoppingKeywordAgeArgs(_ShoppingKeywordArgs):
    ages: Optional[AgeBands] = Field(None, description=_AGES_DESCRIPTION)

    def to_request(self) -> ShoppingKeywordAgeRequest:
        return ShoppingKeywordAgeRequest(
            **self._period(), category=self.category, keyword=self.keyword,
            ages=list(self.ages or []),
        )


# =============================================================================
# The registry
# =============================================================================
def _describe_errors(exc: ValidationError) -> list[str]:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        details.append(f"{location}: {error['msg']}")
    return details


class SchemaRegistry:
    """Maps operation names to their input models.

    validate() is a pure function of (name, raw input, registry contents):
    it either returns a fully-populated model instance (defaults filled in)
    or raises.  It never returns a half-defaulted invalid value.
    """

    def __init__(self, schemas: Mapping[str, type[BaseModel]]):
        self._schemas = dict(schemas)

    def schema_for(self, name: str) -> type[BaseModel]:
        try:
            return self._schemas[name]
        except KeyError:
            raise OperationNotFoundError(name) from None

    def validate(self, name: str, raw: Optional[Mapping[str, Any]]) -> BaseModel:
        schema = self.schema_for(name)
        try:
            return schema.model_validate({} if raw is None else raw)
        except ValidationError as exc:
            raise ArgumentValidationError(name, _describe_errors(exc)) from exc
