import pytest

from postboard.services.pagination import paginate, resolve_page


@pytest.mark.parametrize(
    ("page", "page_size", "expected"),
    [
        (None, None, (1, 20)),
        ("1", "20", (1, 20)),
        ("3", "5", (3, 5)),
        ("0", "5", (1, 5)),
        ("-4", "5", (1, 5)),
        ("abc", "xyz", (1, 20)),
        ("2.5", "10", (1, 10)),
        (" 2 ", " 7 ", (2, 7)),
        ("1", "0", (1, 1)),
        ("1", "-10", (1, 1)),
        ("1", "5000", (1, 100)),
        (4, 30, (4, 30)),
    ],
)
def test_resolve_page(page, page_size, expected):
    assert resolve_page(page, page_size, default_page_size=20, max_page_size=100) == expected


def test_resolve_page_clamps_default_too():
    assert resolve_page(None, None, default_page_size=50, max_page_size=10) == (1, 10)


def test_paginate_first_page():
    result = paginate(list(range(45)), page=1, page_size=20)
    assert result.items == list(range(20))
    assert result.total == 45
    assert result.page == 1
    assert result.page_size == 20
    assert result.has_more is True


def test_paginate_last_partial_page():
    result = paginate(list(range(45)), page=3, page_size=20)
    assert result.items == list(range(40, 45))
    assert result.has_more is False


def test_paginate_exact_boundary():
    result = paginate(list(range(40)), page=2, page_size=20)
    assert len(result.items) == 20
    assert result.has_more is False


def test_paginate_past_the_end():
    result = paginate(list(range(3)), page=5, page_size=2)
    assert result.items == []
    assert result.total == 3
    assert result.has_more is False


def test_paginate_empty_collection():
    result = paginate([], page=1, page_size=20)
    assert result.items == []
    assert result.total == 0
    assert result.has_more is False


@pytest.mark.parametrize("total", [0, 1, 7, 20, 21])
@pytest.mark.parametrize("page_size", [1, 3, 20])
@pytest.mark.parametrize("page", [1, 2, 5])
def test_paginate_invariants(total, page_size, page):
    result = paginate(list(range(total)), page=page, page_size=page_size)
    start = (page - 1) * page_size
    assert len(result.items) <= page_size
    assert len(result.items) <= total
    assert result.has_more == (start + len(result.items) < total)


def test_paginate_serializes_camel_case():
    payload = paginate(["a"], page=1, page_size=20).model_dump(by_alias=True)
    assert payload == {"items": ["a"], "total": 1, "page": 1, "pageSize": 20, "hasMore": False}
