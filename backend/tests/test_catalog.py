import pytest
from rolecatalog.constants.permissions import APPLICATIONS
from rolecatalog.models.catalog import Action, Module, Application, Role
from rolecatalog.services.catalog import Catalog
from tests.test_utils_seed import sales_catalog


def test_lookups_are_total_for_unknown_ids():
    cat = sales_catalog()
    assert cat.get_application('nope') is None
    assert cat.list_modules('nope') == []
    assert cat.get_module('sales', 'nope') is None
    assert cat.get_module('nope', 'customers') is None
    assert cat.list_actions('sales', 'nope') == []
    assert cat.list_actions('nope', 'customers') == []
    assert cat.permission_codes('nope') == []


def test_modules_and_actions_keep_authored_order():
    cat = sales_catalog()
    assert [m.id for m in cat.list_modules('sales')] == ['customers', 'leads']
    assert [a.id for a in cat.list_actions('sales', 'customers')] == ['view', 'create', 'edit', 'delete', 'export']
    assert cat.permission_codes('sales')[:2] == ['customers.view', 'customers.create']


def test_duplicate_ids_rejected():
    dup_app = Application(id='a', name='A')
    with pytest.raises(ValueError):
        Catalog([dup_app, Application(id='a', name='A2')])
    with pytest.raises(ValueError):
        Catalog([Application(id='a', name='A', modules=[Module('m', 'M'), Module('m', 'M2')])])
    with pytest.raises(ValueError):
        Catalog([Application(id='a', name='A', modules=[Module('m', 'M', actions=[Action('v', 'V'), Action('v', 'V')])])])


def test_same_module_id_allowed_in_different_applications():
    cat = Catalog.from_config(APPLICATIONS)
    assert cat.get_module('sales', 'reports') is not None
    assert cat.get_module('accounting', 'reports') is not None
    assert [a.id for a in cat.list_actions('sales', 'reports')] == ['view', 'export']


def test_configured_catalog_shape():
    cat = Catalog.from_config(APPLICATIONS)
    assert len(cat.list_applications()) == 9
    enabled = {a.id for a in cat.list_applications(enabled_only=True)}
    assert 'corporate-cards' not in enabled and 'nrs-einvoice' not in enabled
    assert 'sales' in enabled
    customers = cat.get_module('sales', 'customers')
    assert customers.find_action('export').name == 'Export'
    assert customers.find_action('approve') is None


def test_role_normalizes_permissions():
    role = Role(id='r1', name='R', permissions=['a.b', 'a.b', 'a.*', 'junk'])
    assert role.permissions == frozenset({'a.b', 'a.*', 'junk'})
    assert len(role.grants) == 2
    assert role.to_dict()['permissions'] == ['a.*', 'a.b', 'junk']
