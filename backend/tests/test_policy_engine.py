import pytest
from rolecatalog.models.grants import ExactGrant, WildcardGrant
from rolecatalog.services.policy import PermissionEngine, COVERAGE_ALL, COVERAGE_PARTIAL, COVERAGE_NONE
from tests.test_utils_seed import sales_catalog, make_catalog

CUSTOMER_ACTIONS = ['view', 'create', 'edit', 'delete', 'export']


@pytest.fixture()
def engine():
    return PermissionEngine(sales_catalog())


def test_wildcard_expands_to_every_module_action(engine):
    assert engine.expand('sales', ['customers.*']) == {f'customers.{a}' for a in CUSTOMER_ACTIONS}
    assert engine.count_effective('sales', ['customers.*']) == 5


def test_exact_grants_pass_through_verbatim(engine):
    # dangling references survive expansion; the catalog is not consulted for exact grants
    assert engine.expand('sales', ['customers.view', 'ghost.fly']) == {'customers.view', 'ghost.fly'}


def test_wildcard_and_exact_overlap_are_counted_once(engine):
    perms = ['customers.*', 'customers.view', 'leads.view']
    assert engine.count_effective('sales', perms) == 6


def test_wildcard_on_unknown_module_or_app_contributes_nothing(engine):
    assert engine.expand('sales', ['ghost.*']) == set()
    assert engine.expand('nope', ['customers.*']) == set()
    assert engine.expand('nope', ['customers.view']) == {'customers.view'}


def test_malformed_strings_are_ignored(engine):
    assert engine.expand('sales', ['customers', '', '.view', 'customers.view']) == {'customers.view'}
    assert engine.count_effective('sales', []) == 0


def test_expand_accepts_parsed_grants(engine):
    assert engine.expand('sales', {WildcardGrant('leads'), ExactGrant('customers', 'view')}) == {
        'leads.view', 'leads.convert', 'customers.view'}


def test_has_permission_exact_and_wildcard(engine):
    assert engine.has_permission('sales', ['customers.view'], 'customers.view')
    assert not engine.has_permission('sales', ['customers.view'], 'customers.edit')
    assert engine.has_permission('sales', ['customers.*'], 'customers.delete')
    assert not engine.has_permission('sales', ['customers.*'], 'leads.view')


def test_wildcard_check_holds_even_for_actions_outside_catalog(engine):
    # containment is structural; only expansion consults the catalog
    assert engine.has_permission('sales', ['customers.*'], 'customers.archive')
    assert 'customers.archive' not in engine.expand('sales', ['customers.*'])


@pytest.mark.parametrize('candidate', ['customers', '', 'customers.', '.view', 'customers.*'])
def test_has_permission_rejects_malformed_or_wildcard_candidates(engine, candidate):
    assert engine.has_permission('sales', ['customers.*', 'customers.view'], candidate) is False


def test_has_permission_agrees_with_expand_for_catalog_actions(engine):
    perm_sets = [
        [],
        ['customers.*'],
        ['customers.view', 'leads.*'],
        ['leads.convert', 'bogus', 'ghost.*'],
    ]
    codes = engine.catalog.permission_codes('sales')
    for perms in perm_sets:
        expanded = engine.expand('sales', perms)
        for code in codes:
            assert engine.has_permission('sales', perms, code) == (code in expanded), (perms, code)


def test_expansion_tracks_catalog_changes():
    cat = make_catalog({'shop': {'items': ['view']}})
    engine = PermissionEngine(cat)
    assert engine.count_effective('shop', ['items.*']) == 1
    from rolecatalog.models.catalog import Action
    cat.get_module('shop', 'items').actions.append(Action('edit', 'Edit'))
    assert engine.expand('shop', ['items.*']) == {'items.view', 'items.edit'}


def test_order_and_duplicates_do_not_matter(engine):
    a = engine.expand('sales', ['leads.*', 'customers.view', 'customers.view'])
    b = engine.expand('sales', ['customers.view', 'leads.*'])
    assert a == b


def test_module_coverage(engine):
    assert engine.module_coverage('sales', ['customers.*'], 'customers') == COVERAGE_ALL
    every = [f'customers.{a}' for a in CUSTOMER_ACTIONS]
    assert engine.module_coverage('sales', every, 'customers') == COVERAGE_ALL
    assert engine.module_coverage('sales', ['customers.view'], 'customers') == COVERAGE_PARTIAL
    assert engine.module_coverage('sales', ['leads.*'], 'customers') == COVERAGE_NONE
    assert engine.module_coverage('sales', ['ghost.*'], 'ghost') == COVERAGE_NONE


def test_wildcard_with_dotted_prefix_names_an_unknown_module(engine):
    assert engine.expand('sales', ['customers.view.*']) == set()
    assert engine.count_effective('sales', ['customers.view.*']) == 0
    assert engine.count_effective('sales', ['customers.view.*', 'customers.view']) == 1


def test_expansion_is_idempotent(engine):
    perm_sets = [
        [],
        ['customers.*'],
        ['customers.view', 'leads.*', 'ghost.*', 'ghost.fly', 'junk'],
    ]
    for perms in perm_sets:
        once = engine.expand('sales', perms)
        assert engine.expand('sales', once) == once


def test_dangling_wildcard_contains_but_does_not_expand(engine):
    assert engine.expand('sales', ['ghost.*']) == set()
    assert engine.has_permission('sales', ['ghost.*'], 'ghost.view') is True
    assert engine.has_permission('sales', ['ghost.*'], 'customers.view') is False
