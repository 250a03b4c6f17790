from typing import Any, Dict, List, Sequence, Tuple

DEFAULT_LIMIT = 50
MAX_LIMIT = 200


def normalize_pagination(limit_raw, offset_raw, default_limit: int = DEFAULT_LIMIT, max_limit: int = MAX_LIMIT) -> Tuple[int, int]:
    try:
        limit = int(limit_raw) if limit_raw is not None else default_limit
        offset = int(offset_raw) if offset_raw is not None else 0
    except ValueError:
        raise ValueError('limit/offset must be int')
    limit = max(1, min(limit, max_limit))
    offset = max(0, offset)
    return limit, offset


def build_list_payload(items: Sequence[Dict[str, Any]], limit: int, offset: int) -> Dict[str, Any]:
    """Slice an in-memory sequence into the standard {'data', 'pagination'} envelope."""
    page: List[Dict[str, Any]] = list(items[offset:offset + limit])
    return {
        'data': page,
        'pagination': {
            'total': len(items),
            'limit': limit,
            'offset': offset,
            'returned': len(page)
        }
    }
