"""Preset roles must reference modules and actions that exist in the catalog."""
from rolecatalog.constants.permissions import APPLICATIONS, ROLE_PRESETS
from rolecatalog.services.catalog import Catalog
from rolecatalog.services.presets import validate_presets
from rolecatalog.services.policy import PermissionEngine


def _catalog():
    return Catalog.from_config(APPLICATIONS)


def test_presets_resolve_against_catalog():
    assert validate_presets(_catalog(), ROLE_PRESETS) == []


def test_every_application_has_presets():
    assert set(ROLE_PRESETS) == {a['id'] for a in APPLICATIONS}


def test_preset_effective_counts():
    engine = PermissionEngine(_catalog())
    by_id = {(app_id, r['id']): r for app_id, roles in ROLE_PRESETS.items() for r in roles}
    assert engine.count_effective('sales', by_id[('sales', 'sales-admin')]['permissions']) == 32
    assert engine.count_effective('sales', by_id[('sales', 'sales-manager')]['permissions']) == 22
    assert engine.count_effective('sales', by_id[('sales', 'sales-viewer')]['permissions']) == 6
    assert engine.count_effective('accounting', by_id[('accounting', 'acc-admin')]['permissions']) == 21


def test_validate_reports_problems():
    problems = validate_presets(_catalog(), {
        'sales': [
            {'id': 'a', 'permissions': ['customers.fly', 'ghost.*', 'bad']},
            {'id': 'a', 'permissions': []},
        ],
        'ghost': [],
    })
    assert "sales/a: unknown action in 'customers.fly'" in problems
    assert "sales/a: unknown module in 'ghost.*'" in problems
    assert "sales/a: malformed permission 'bad'" in problems
    assert "sales: duplicate role id 'a'" in problems
    assert "Unknown application 'ghost'" in problems
