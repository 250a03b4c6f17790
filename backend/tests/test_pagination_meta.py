import pytest
from rolecatalog.config.pagination import normalize_pagination, build_list_payload, MAX_LIMIT


def test_defaults_and_clamping():
    assert normalize_pagination(None, None) == (50, 0)
    assert normalize_pagination('0', '-3') == (1, 0)
    assert normalize_pagination('5000', '2') == (MAX_LIMIT, 2)
    with pytest.raises(ValueError):
        normalize_pagination('ten', None)


def test_payload_meta_past_the_end():
    items = [{'id': i} for i in range(3)]
    assert build_list_payload(items, 2, 2) == {
        'data': [{'id': 2}],
        'pagination': {'total': 3, 'limit': 2, 'offset': 2, 'returned': 1},
    }
    assert build_list_payload(items, 2, 10)['pagination']['returned'] == 0
