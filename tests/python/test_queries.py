import pytest
from pydantic import ValidationError

from rankeval import (
    BoolQuery,
    MalformedDocumentError,
    MatchAllQuery,
    MatchQuery,
    MissingRequiredFieldError,
    ParseContext,
    TermQuery,
    UnrecognizedFieldError,
)


def _parse(registry, tree, *, strict=True):
    context = ParseContext(registry, strict=strict)
    return context.parse_query(context.open(tree, "query"))


def test_match_query_short_and_long_forms(registry) -> None:
    short = _parse(registry, {"match": {"beverage": "coffee"}})
    long = _parse(registry, {"match": {"beverage": {"query": "coffee", "operator": "AND", "boost": 3}}})

    assert short == MatchQuery(field="beverage", query="coffee")
    assert long == MatchQuery(field="beverage", query="coffee", operator="and", boost=3.0)


def test_match_query_rejects_unknown_operator(registry) -> None:
    with pytest.raises(MalformedDocumentError, match="field=operator"):
        _parse(registry, {"match": {"beverage": {"query": "coffee", "operator": "xor"}}})


def test_match_query_requires_query_in_long_form(registry) -> None:
    with pytest.raises(MissingRequiredFieldError, match="field=query"):
        _parse(registry, {"match": {"beverage": {"operator": "and"}}})


def test_term_query_short_and_long_forms(registry) -> None:
    assert _parse(registry, {"term": {"browser": "safari"}}) == TermQuery(field="browser", value="safari")
    assert _parse(registry, {"term": {"age": {"value": 30, "boost": 2}}}) == TermQuery(
        field="age", value=30, boost=2.0
    )


def test_term_query_keeps_scalar_types(registry) -> None:
    assert _parse(registry, {"term": {"active": True}}).value is True
    assert _parse(registry, {"term": {"ratio": 0.5}}).value == 0.5


def test_term_query_rejects_non_scalar_value(registry) -> None:
    with pytest.raises(MalformedDocumentError, match="field=value"):
        _parse(registry, {"term": {"browser": {"value": ["safari"]}}})


def test_term_query_requires_single_field(registry) -> None:
    with pytest.raises(MalformedDocumentError):
        _parse(registry, {"term": {"browser": "safari", "os": "mac"}})


def test_match_all_query_rejects_unknown_member(registry) -> None:
    with pytest.raises(UnrecognizedFieldError, match="field=_name"):
        _parse(registry, {"match_all": {"_name": "all"}})


def test_bool_query_accepts_single_clause_object(registry) -> None:
    query = _parse(registry, {"bool": {"filter": {"term": {"status": "published"}}, "minimum_should_match": "75%"}})

    assert query == BoolQuery(filter=(TermQuery(field="status", value="published"),), minimum_should_match="75%")


def test_bool_query_rejects_unknown_clause_in_strict_mode(registry) -> None:
    with pytest.raises(UnrecognizedFieldError, match="field=must_maybe") as excinfo:
        _parse(registry, {"bool": {"must_maybe": []}})

    assert excinfo.value.type_name == "bool"


def test_bool_query_skips_unknown_clause_in_lenient_mode(registry) -> None:
    query = _parse(registry, {"bool": {"must_maybe": [], "must": [{"match_all": {}}]}}, strict=False)

    assert query == BoolQuery(must=(MatchAllQuery(),))


def test_bool_query_rejects_boolean_minimum_should_match(registry) -> None:
    with pytest.raises(MalformedDocumentError, match="field=minimum_should_match"):
        _parse(registry, {"bool": {"minimum_should_match": True}})


def test_queries_serialize_to_compact_form(registry) -> None:
    query = BoolQuery(
        must=(MatchQuery(field="beverage", query="coffee"),),
        should=(TermQuery(field="browser", value="safari", boost=2.0),),
        must_not=(MatchQuery(field="title", query="tea", operator="and"),),
        boost=0.5,
    )

    assert registry.serialize(query) == {
        "bool": {
            "must": [{"match": {"beverage": "coffee"}}],
            "should": [{"term": {"browser": {"value": "safari", "boost": 2.0}}}],
            "must_not": [{"match": {"title": {"query": "tea", "operator": "and"}}}],
            "boost": 0.5,
        }
    }
    assert registry.serialize(MatchAllQuery()) == {"match_all": {}}


def test_serialized_query_parses_back_to_equal_model(registry) -> None:
    query = BoolQuery(
        must=(MatchAllQuery(boost=2.0),),
        should=(BoolQuery(must_not=(TermQuery(field="f", value=1),)),),
        minimum_should_match=1,
    )

    parsed = _parse(registry, registry.serialize(query))

    assert parsed == query
    assert hash(parsed) == hash(query)


def test_query_models_are_frozen_and_validated() -> None:
    query = TermQuery(field="browser", value="safari")

    with pytest.raises(ValidationError):
        query.value = "chrome"
    with pytest.raises(ValidationError):
        TermQuery(field="", value="x")
    with pytest.raises(ValidationError):
        MatchAllQuery(boost=-1.0)


@pytest.mark.parametrize(
    ("first", "second"),
    [
        (TermQuery(field="active", value=1), TermQuery(field="active", value=True)),
        (TermQuery(field="ratio", value=1), TermQuery(field="ratio", value=1.0)),
        (MatchQuery(field="flag", query=0), MatchQuery(field="flag", query=False)),
    ],
)
def test_scalar_values_of_different_types_are_not_equal(first, second) -> None:
    assert first != second


def test_scalar_value_type_survives_parse(registry) -> None:
    expected = BoolQuery(must=(TermQuery(field="active", value=True), TermQuery(field="count", value=1)))

    parsed = _parse(registry, {"bool": {"must": [{"term": {"active": True}}, {"term": {"count": 1}}]}})

    assert parsed == expected
    assert parsed != BoolQuery(must=(TermQuery(field="active", value=1), TermQuery(field="count", value=True)))
