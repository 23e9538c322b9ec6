import pytest

from fumo.engine_constants import EcsError
from fumo.entity_query import EntityQuery, Filter

A = 1 << 0
B = 1 << 1
C = 1 << 2


@pytest.mark.parametrize(
    "entity_mask, expected",
    [(A | B, True), (A | B | C, True), (A, False), (C, False), (0, False)],
)
def test_all_filter(entity_mask, expected):
    assert EntityQuery(A | B, Filter.ALL).filter(entity_mask) is expected


@pytest.mark.parametrize(
    "entity_mask, expected",
    [(A, True), (B | C, True), (C, False), (0, False)],
)
def test_any_filter(entity_mask, expected):
    assert EntityQuery(A | B, Filter.ANY).filter(entity_mask) is expected


@pytest.mark.parametrize(
    "entity_mask, expected",
    [(A | B, True), (A | B | C, False), (A, False), (0, False)],
)
def test_only_filter(entity_mask, expected):
    assert EntityQuery(A | B, Filter.ONLY).filter(entity_mask) is expected


@pytest.mark.parametrize(
    "entity_mask, expected",
    [(C, True), (0, True), (A | C, False), (B, False)],
)
def test_none_filter(entity_mask, expected):
    assert EntityQuery(A | B, Filter.NONE).filter(entity_mask) is expected


def test_empty_all_query_matches_everything():
    query = EntityQuery(0, Filter.ALL)
    assert all(query.filter(mask) for mask in (0, A, A | B | C))


def test_unknown_filter_raises():
    with pytest.raises(EcsError):
        EntityQuery(A, "sideways").filter(A)


def test_queries_compare_by_value():
    assert EntityQuery(A | B, Filter.ALL) == EntityQuery(A | B, Filter.ALL)
    assert EntityQuery(A, Filter.ALL) != EntityQuery(A, Filter.ANY)