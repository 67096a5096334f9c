from sentinelguard.pagination import Pagination


def test_pagination_default():
    pagination = Pagination()
    assert pagination.offset is None
    assert pagination.limit is None


def test_pagination_new():
    pagination = Pagination(10, 20)
    assert pagination.offset == 10
    assert pagination.limit == 20


def test_pagination_with_partial_values():
    pagination = Pagination(5, None)
    assert pagination.offset == 5
    assert pagination.limit is None

    pagination = Pagination(None, 15)
    assert pagination.offset is None
    assert pagination.limit == 15


def test_pagination_keywords():
    pagination = Pagination(limit=3)
    assert pagination == Pagination(None, 3)