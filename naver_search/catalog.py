# =============================================================================
# naver_search/catalog.py  -  Operation Catalog
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Lists every operation the server offers, in the order it is advertised:
#   name, human description, input model, and the upstream call it maps to.
#
# TOOL NAMING CONVENTIONS:
#   - search            → unified search; the category is an argument
#   - search_<category> → same call with the category fixed by the name
#   - search_local      → local business search (its own parameter limits)
#   - datalab_*         → DataLab trend analytics (POST, JSON body)
#
# The descriptions are what an LLM reads to decide WHEN to call a tool, so
# they say what comes back, not how it is fetched.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from naver_search.schemas import (
    LocalSearchArgs,
    SchemaRegistry,
    SearchArgs,
    SearchTrendArgs,
    ShoppingCategoriesArgs,
    ShoppingCategoryAgeArgs,
    ShoppingCategoryDeviceArgs,
    ShoppingCategoryGenderArgs,
    ShoppingKeywordAgeArgs,
    ShoppingKeywordDeviceArgs,
    ShoppingKeywordGenderArgs,
    ShoppingKeywordsArgs,
    UnifiedSearchArgs,
)

# call(client, validated_args) -> upstream JSON
UpstreamCall = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class OperationSpec:
    """One invocable operation: its contract and its upstream target."""

    name: str
    description: str
    schema: type[BaseModel]
    call: UpstreamCall

    @property
    def input_schema(self) -> dict[str, Any]:
        return self.schema.model_json_schema()

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# -----------------------------------------------------------------------------
# Upstream bindings
# -----------------------------------------------------------------------------
def _unified_search(client, args: UnifiedSearchArgs):
    return client.search(args.type, args.to_params())


def _category_search(search_type: str) -> UpstreamCall:
    def call(client, args: SearchArgs):
        return client.search(search_type, args.to_params())
    return call


def _local_search(client, args: LocalSearchArgs):
    return client.search_local(args.to_params())


def _search_trend(client, args: SearchTrendArgs):
    return client.search_trend(args.to_request())


def _shopping_trend(client, args):
    return client.shopping_trend(args.to_request())


# (operation suffix, upstream type, what it searches, when to pick it)
_CATEGORIES = [
    ("news", "news", "news articles",
     "Use for current events and press coverage."),
    ("blog", "blog", "blog posts",
     "Use for personal reviews and first-hand experiences."),
    ("shop", "shop", "shopping products",
     "Use to compare products and prices on Naver Shopping."),
    ("image", "image", "images",
     "Use when the user wants pictures; items carry thumbnail and size."),
    ("webkr", "webkr", "web documents",
     "Use for general web pages when no narrower category fits."),
    ("encyc", "encyc", "encyclopedia entries",
     "Use for definitions and background facts about a topic."),
    ("kin", "kin", "Knowledge iN questions and answers",
     "Use for practical questions that other people have already asked."),
    ("book", "book", "books",
     "Use to look up a title, its author or its ISBN."),
    ("academic", "doc", "academic documents",
     "Use for papers and other scholarly material."),
    ("cafearticle", "cafearticle", "cafe articles",
     "Use for community discussion in Naver Cafe groups."),
]


def _build_operations() -> list[OperationSpec]:
    operations = [
        OperationSpec(
            name="search",
            description=(
                "Search Naver content (news, blogs, shopping, images, web "
                "documents, encyclopedia, Knowledge iN, books, academic "
                "documents, cafe articles). Choose the category with `type`."
            ),
            schema=UnifiedSearchArgs,
            call=_unified_search,
        ),
    ]

    for suffix, search_type, label, when in _CATEGORIES:
        operations.append(OperationSpec(
            name=f"search_{suffix}",
            description=f"Search Naver {label}. {when}",
            schema=SearchArgs,
            call=_category_search(search_type),
        ))

    operations += [
        OperationSpec(
            name="search_local",
            description=(
                "Search local businesses and places registered on Naver. "
                "Returns name, category, address, road address and map "
                "coordinates (max 5 results)."
            ),
            schema=LocalSearchArgs,
            call=_local_search,
        ),
        OperationSpec(
            name="datalab_search",
            description="Analyze Naver search keyword trends over a date range.",
            schema=SearchTrendArgs,
            call=_search_trend,
        ),
        OperationSpec(
            name="datalab_shopping_category",
            description="Analyze Naver Shopping trends for one or more categories.",
            schema=ShoppingCategoriesArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_by_device",
            description="Analyze Naver Shopping category trends by device (PC/mobile).",
            schema=ShoppingCategoryDeviceArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_by_gender",
            description="Analyze Naver Shopping category trends by gender.",
            schema=ShoppingCategoryGenderArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_by_age",
            description="Analyze Naver Shopping category trends by age group.",
            schema=ShoppingCategoryAgeArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_keywords",
            description="Analyze Naver Shopping keyword trends within a category.",
            schema=ShoppingKeywordsArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_keyword_by_device",
            description="Analyze a Naver Shopping keyword's trend by device (PC/mobile).",
            schema=ShoppingKeywordDeviceArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_keyword_by_gender",
            description="Analyze a Naver Shopping keyword's trend by gender.",
            schema=ShoppingKeywordGenderArgs,
            call=_shopping_trend,
        ),
        OperationSpec(
            name="datalab_shopping_keyword_by_age",
            description="Analyze a Naver Shopping keyword's trend by age group.",
            schema=ShoppingKeywordAgeArgs,
            call=_shopping_trend,
        ),
    ]
    return operations


OPERATIONS: tuple[OperationSpec, ...] = tuple(_build_operations())


def list_operations() -> list[dict[str, Any]]:
    """The advertised catalog: [{name, description, inputSchema}, ...]."""
    return [op.describe() for op in OPERATIONS]


def build_registry(operations=OPERATIONS) -> SchemaRegistry:
    return SchemaRegistry({op.name: op.schema for op in operations})
