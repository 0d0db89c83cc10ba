from naver_search.catalog import OPERATIONS, list_operations

EXPECTED_ORDER = [
    "search",
    "search_news",
    "search_blog",
    "search_shop",
    "search_image",
    "search_webkr",
    "search_encyc",
    "search_kin",
    "search_book",
    "search_academic",
    "search_cafearticle",
    "search_local",
    "datalab_search",
    "datalab_shopping_category",
    "datalab_shopping_by_device",
    "datalab_shopping_by_gender",
    "datalab_shopping_by_age",
    "datalab_shopping_keywords",
    "datalab_shopping_keyword_by_device",
    "datalab_shopping_keyword_by_gender",
    "datalab_shopping_keyword_by_age",
]


def test_catalog_order_and_uniqueness():
    names = [entry["name"] for entry in list_operations()]
    assert names == EXPECTED_ORDER
    assert len(set(names)) == len(names)


def test_every_entry_is_fully_described():
    for entry in list_operations():
        assert set(entry) == {"name", "description", "inputSchema"}
        assert entry["description"]
        assert entry["inputSchema"]["type"] == "object"


def _schema(name):
    return next(op.input_schema for op in OPERATIONS if op.name == name)


def test_unified_search_exposes_the_selector():
    schema = _schema("search")
    assert "type" in schema["properties"]
    assert set(schema["required"]) == {"query", "type"}


def test_convenience_search_hides_the_selector():
    schema = _schema("search_news")
    assert set(schema["properties"]) == {"query", "display", "start", "sort"}
    assert schema["required"] == ["query"]
    assert schema["properties"]["display"]["default"] == 10


def test_datalab_schemas_use_camel_case_names():
    schema = _schema("datalab_search")
    assert {"startDate", "endDate", "timeUnit", "keywordGroups"} <= set(schema["properties"])
    assert "start_date" not in schema["properties"]


def test_shopping_variant_schemas_carry_only_their_dimension():
    device = _schema("datalab_shopping_by_device")["properties"]
    assert "device" in device and "gender" not in device and "ages" not in device

    keyword_age = _schema("datalab_shopping_keyword_by_age")["properties"]
    assert {"keyword", "ages"} <= set(keyword_age)
    assert "device" not in keyword_age and "gender" not in keyword_age


def test_convenience_descriptions_say_when_to_use_them():
    descriptions = [
        op.description for op in OPERATIONS
        if op.name.startswith("search_") and op.name != "search_local"
    ]
    assert len(descriptions) == 10
    assert len(set(descriptions)) == len(descriptions)
    assert all("Use " in text for text in descriptions)


def test_keyword_dimension_is_not_required():
    schema = _schema("datalab_shopping_keyword_by_device")
    assert "device" in schema["properties"]
    assert "device" not in schema["required"]
    assert _schema("datalab_shopping_by_device")["required"].count("device") == 1
