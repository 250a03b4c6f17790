from flask import Blueprint, request, abort
from rolecatalog import get_registry
from rolecatalog.config.pagination import normalize_pagination, build_list_payload
from rolecatalog.errors import SystemRoleProtected
from rolecatalog.models.catalog import Role

admin_bp = Blueprint('admin', __name__)


def _app_or_404(app_id: str):
    app = get_registry().catalog.get_application(app_id)
    if app is None:
        abort(404, description=f"application '{app_id}' not found")
    return app


def _permission_list(data: dict, key: str = 'permissions'):
    perms = data.get(key)
    if not isinstance(perms, list) or any(not isinstance(p, str) for p in perms):
        abort(400, description=f'{key} must be a list of strings')
    return perms


def _role_json(app_id: str, role: Role, detail: bool = False):
    registry = get_registry()
    body = role.to_dict()
    body['permission_count'] = registry.engine.count_effective(app_id, role.grants)
    if detail:
        body['effective_permissions'] = sorted(registry.engine.expand(app_id, role.grants))
        body['modules'] = {
            m.id: registry.engine.module_coverage(app_id, role.grants, m.id)
            for m in registry.catalog.list_modules(app_id)
        }
    return body


# --- Catalog ---

@admin_bp.get('/apps')
def list_apps():
    registry = get_registry()
    enabled_only = request.args.get('enabled') in ('1', 'true')
    return {
        'data': [
            {
                'id': a.id,
                'name': a.name,
                'description': a.description,
                'is_enabled': a.is_enabled,
                'color': a.color,
                'icon': a.icon,
                'module_count': len(a.modules),
                'permission_total': a.action_count,
                'role_count': len(registry.list_roles(a.id)),
            }
            for a in registry.catalog.list_applications(enabled_only=enabled_only)
        ]
    }


@admin_bp.get('/apps/<app_id>')
def get_app(app_id: str):
    app = _app_or_404(app_id)
    body = app.to_dict()
    body['permission_total'] = app.action_count
    body['roles'] = [_role_json(app_id, r) for r in get_registry().list_roles(app_id)]
    return body


@admin_bp.get('/apps/<app_id>/permissions')
def list_app_permissions(app_id: str):
    _app_or_404(app_id)
    return {'permissions': get_registry().catalog.permission_codes(app_id)}


@admin_bp.post('/apps/<app_id>/permissions/expand')
def expand_permissions(app_id: str):
    _app_or_404(app_id)
    data = request.json or {}
    perms = _permission_list(data)
    expanded = sorted(get_registry().engine.expand(app_id, perms))
    return {'permissions': expanded, 'count': len(expanded)}


@admin_bp.post('/apps/<app_id>/permissions/check')
def check_permission(app_id: str):
    _app_or_404(app_id)
    data = request.json or {}
    perms = _permission_list(data)
    candidate = data.get('permission')
    if not isinstance(candidate, str) or not candidate:
        abort(400, description='permission required')
    return {'permission': candidate, 'granted': get_registry().engine.has_permission(app_id, perms, candidate)}


# --- Roles ---

@admin_bp.get('/apps/<app_id>/roles')
def list_roles(app_id: str):
    _app_or_404(app_id)
    try:
        limit, offset = normalize_pagination(request.args.get('limit'), request.args.get('offset'))
    except ValueError as e:
        abort(400, description=str(e))
    rows = [_role_json(app_id, r) for r in get_registry().list_roles(app_id)]
    return build_list_payload(rows, limit, offset)


@admin_bp.post('/apps/<app_id>/roles')
def create_role(app_id: str):
    _app_or_404(app_id)
    data = request.json or {}
    name = data.get('name').strip() if isinstance(data.get('name'), str) else ''
    if not name:
        abort(400, description='name required')
    perms = _permission_list(data)
    if not perms:
        abort(400, description='select at least one permission')
    role = get_registry().add_role(app_id, {
        'name': name,
        'description': data.get('description'),
        'is_system': bool(data.get('is_system', False)),
        'permissions': perms,
    })
    return _role_json(app_id, role), 201


@admin_bp.get('/apps/<app_id>/roles/<role_id>')
def get_role(app_id: str, role_id: str):
    role = get_registry().get_role(app_id, role_id)
    return _role_json(app_id, role, detail=True)


@admin_bp.patch('/apps/<app_id>/roles/<role_id>')
def update_role(app_id: str, role_id: str):
    data = request.json or {}
    updates = {}
    if 'name' in data:
        name = data['name'].strip() if isinstance(data['name'], str) else ''
        if not name:
            abort(400, description='name cannot be empty')
        updates['name'] = name
    if 'description' in data:
        updates['description'] = data['description']
    if 'is_system' in data:
        updates['is_system'] = bool(data['is_system'])
    if 'permissions' in data:
        updates['permissions'] = _permission_list(data)
    role = get_registry().update_role(app_id, role_id, updates)
    return _role_json(app_id, role, detail=True)


@admin_bp.delete('/apps/<app_id>/roles/<role_id>')
def delete_role(app_id: str, role_id: str):
    try:
        get_registry().delete_role(app_id, role_id, allow_system=False)
    except SystemRoleProtected as e:
        abort(400, description=str(e))
    return {'status': 'deleted', 'id': role_id}
