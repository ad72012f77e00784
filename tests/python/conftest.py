from __future__ import annotations

import random
import string
from collections.abc import Callable
from typing import Any

import pytest

from rankeval import (
    BoolQuery,
    FieldRegistry,
    MatchAllQuery,
    MatchQuery,
    RatedDocument,
    RatedDocumentKey,
    RatedRequest,
    RatedRequestCodec,
    SearchSource,
    TermQuery,
    default_query_registry,
)

QA_QUERY_DOCUMENT = """ {
   "id": "my_qa_query",
   "request": {
           "query": {
               "bool": {
                   "must": [
                       {"match": {"beverage": "coffee"}},
                       {"term": {"browser": {"value": "safari"}}},
                       {"term": {"time_of_day": {"value": "morning","boost": 2}}},
                       {"term": {"ip_location": {"value": "ams","boost": 10}}}]}
           },
           "size": 10
   },
   "ratings": [
        {"key": {"index": "test", "type": "testtype", "doc_id": "1"}, "rating" : 1 },
        {"key": {"index": "test", "type": "testtype", "doc_id": "2"}, "rating" : 0 },
        {"key": {"index": "test", "type": "testtype", "doc_id": "3"}, "rating" : 1 }]
}"""


TEXT_ALPHABET = (
    string.ascii_letters
    + string.digits
    + string.punctuation
    + " \t\n\r"
    + "\x85\u2028\u2029\u00a0é검색"
)


def random_text(rng: random.Random, min_length: int, max_length: int) -> str:
    length = rng.randint(min_length, max_length)
    return "".join(rng.choice(TEXT_ALPHABET) for _ in range(length))


def shuffle_members(tree: Any, rng: random.Random) -> Any:
    """객체 멤버 순서만 섞은 복사본을 만든다. 배열 순서는 유지한다."""
    if isinstance(tree, dict):
        names = list(tree)
        rng.shuffle(names)
        return {name: shuffle_members(tree[name], rng) for name in names}
    if isinstance(tree, list):
        return [shuffle_members(item, rng) for item in tree]
    return tree


def build_rated_request(
    rng: random.Random,
    indices: list[str] | None = None,
    types: list[str] | None = None,
) -> RatedRequest:
    query = rng.choice(
        [
            MatchAllQuery(),
            BoolQuery(
                must=(
                    MatchQuery(field="beverage", query=random_text(rng, 1, 10)),
                    TermQuery(field="browser", value=random_text(rng, 1, 10), boost=2.0),
                ),
                should=(TermQuery(field="count", value=rng.randint(0, 100)),),
                minimum_should_match=1,
            ),
        ]
    )

    rated_documents = [
        RatedDocument(
            key=RatedDocumentKey(
                index=random_text(rng, 1, 10),
                type=random_text(rng, 0, 10),
                doc_id=f"{random_text(rng, 1, 10)}-{position}",
            ),
            rating=rng.randint(0, 10),
        )
        for position in range(rng.randint(0, 2))
    ]

    return RatedRequest(
        spec_id=random_text(rng, 50, 50),
        test_request=SearchSource(query=query, size=rng.randint(0, 2**31 - 1)),
        indices=indices or [],
        types=types or [],
        rated_documents=rated_documents,
    )


@pytest.fixture
def registry() -> FieldRegistry:
    return default_query_registry()


@pytest.fixture
def codec(registry: FieldRegistry) -> RatedRequestCodec:
    return RatedRequestCodec(registry)


@pytest.fixture
def qa_query_document() -> str:
    return QA_QUERY_DOCUMENT


@pytest.fixture
def shuffle() -> Callable[[Any, random.Random], Any]:
    return shuffle_members


@pytest.fixture
def rated_request_factory() -> Callable[..., RatedRequest]:
    return build_rated_request


@pytest.fixture
def text_factory() -> Callable[[random.Random, int, int], str]:
    return random_text
