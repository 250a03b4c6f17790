#!/usr/bin/env python
"""Idempotent seed script for preset application roles (SQL role store).

Usage:
    python backend/scripts/seed_roles.py               # seed normally
    python backend/scripts/seed_roles.py --show-roles  # print role -> effective permission counts
    python backend/scripts/seed_roles.py --validate    # check preset references against the catalog
    python backend/scripts/seed_roles.py --export-json roles.json
"""
from __future__ import annotations
import os, sys, argparse, textwrap, json, hashlib

# Allow running from repo root
sys.path.append(os.path.abspath('backend'))

from rolecatalog import create_app, get_db, get_registry  # type: ignore
from rolecatalog.constants.permissions import ROLE_PRESETS
from rolecatalog.models.grants import WildcardGrant
from rolecatalog.services.presets import validate_presets


def summarize_roles(registry):
    rows = []
    for app in registry.catalog.list_applications():
        for role in registry.list_roles(app.id):
            wildcards = sum(1 for g in role.grants if isinstance(g, WildcardGrant))
            rows.append((f"{app.id}/{role.id}", registry.role_permission_count(app.id, role.id), wildcards))
    return rows


def print_role_summary(registry):
    rows = summarize_roles(registry)
    if not rows:
        print("[INFO] No roles present.")
        return
    name_w = max(len(r[0]) for r in rows)
    print(f"{'Role'.ljust(name_w)} | Effective | Wildcards")
    print('-' * (name_w + 24))
    for name, cnt, wild in rows:
        print(f"{name.ljust(name_w)} | {str(cnt).rjust(9)} | {str(wild).rjust(9)}")


def build_role_permission_map(registry):
    mapping = {}
    for app in registry.catalog.list_applications():
        for role in registry.list_roles(app.id):
            mapping[f"{app.id}/{role.id}"] = sorted(role.permissions)
    return mapping


def parse_args():
    p = argparse.ArgumentParser(
        description="Seed preset application roles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent("""Examples:\n  seed normally: seed_roles.py\n  validate only: seed_roles.py --validate --dry-run\n  show roles: seed_roles.py --show-roles\n""")
    )
    p.add_argument('--show-roles', action='store_true', help='Print role effective permission counts after seeding')
    p.add_argument('--dry-run', action='store_true', help='Validate and report without writing roles')
    p.add_argument('--export-json', nargs='?', const='-', metavar='FILE', help='Export role->permissions JSON (to FILE or stdout if omitted)')
    p.add_argument('--validate', action='store_true', help='Validate preset permission references; exits non-zero on problems')
    return p.parse_args()


def main():
    args = parse_args()
    # Seeding is explicit here so --dry-run never writes.
    app = create_app({'ROLE_STORE': 'sql', 'SEED_PRESET_ROLES': False, 'AUTO_CREATE_SCHEMA': True})
    with app.app_context():
        registry = get_registry()
        try:
            if args.validate:
                problems = validate_presets(registry.catalog, ROLE_PRESETS)
                if problems:
                    print('\n[VALIDATION] FAIL:')
                    for p in problems:
                        print(' -', p)
                    sys.exit(2)
                print('[VALIDATION] OK: All preset role references resolve.')
            if args.dry_run:
                pending = sum(len(v) for k, v in ROLE_PRESETS.items() if not registry.list_roles(k))
                print(f"[DRY-RUN] Roles would create: {pending}")
            else:
                created = registry.seed(ROLE_PRESETS)
                print(f"[DONE] Roles created: {created}")
            if args.show_roles:
                print('\nRole Permission Summary:')
                print_role_summary(registry)
            if args.export_json is not None:
                role_perm_map = build_role_permission_map(registry)
                # Deterministic checksum for change detection
                canonical = json.dumps(role_perm_map, sort_keys=True, separators=(',', ':'))
                payload = {
                    'roles': role_perm_map,
                    'meta': {
                        'roles_total': len(role_perm_map),
                        'roles_checksum_sha256': hashlib.sha256(canonical.encode('utf-8')).hexdigest(),
                        'dry_run': args.dry_run,
                    }
                }
                if args.export_json == '-':
                    print(json.dumps(payload, indent=2, sort_keys=True))
                else:
                    with open(args.export_json, 'w', encoding='utf-8') as f:
                        json.dump(payload, f, indent=2, sort_keys=True)
                    print(f"[INFO] Exported JSON to {args.export_json}")
        finally:
            get_db().close()

if __name__ == '__main__':
    main()
