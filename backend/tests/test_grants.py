import pytest
from rolecatalog.models.grants import ExactGrant, WildcardGrant, parse_grant, parse_grants


def test_parse_exact_and_wildcard():
    assert parse_grant('customers.view') == ExactGrant('customers', 'view')
    assert parse_grant('customers.*') == WildcardGrant('customers')


def test_split_on_first_dot_only():
    g = parse_grant('reports.export.pdf')
    assert g == ExactGrant('reports', 'export.pdf')
    assert str(g) == 'reports.export.pdf'


@pytest.mark.parametrize('raw', ['customers', '', '.view', 'customers.', '.', '.*', None, 42])
def test_malformed_strings_parse_to_none(raw):
    assert parse_grant(raw) is None


def test_str_round_trips_to_wire_format():
    assert str(ExactGrant('leads', 'convert')) == 'leads.convert'
    assert str(WildcardGrant('leads')) == 'leads.*'


def test_parse_grants_drops_malformed_and_dedupes():
    grants = parse_grants(['a.b', 'a.b', 'bad', 'a.*', 'x.'])
    assert grants == {ExactGrant('a', 'b'), WildcardGrant('a')}


def test_trailing_wildcard_takes_everything_before_it_as_module():
    assert parse_grant('customers.view.*') == WildcardGrant('customers.view')
    assert str(parse_grant('customers.view.*')) == 'customers.view.*'


def test_parse_grant_passes_grant_objects_through():
    g = WildcardGrant('m')
    assert parse_grant(g) is g
