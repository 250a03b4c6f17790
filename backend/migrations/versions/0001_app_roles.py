"""application roles and role id sequences

Revision ID: 0001_app_roles
Revises:
Create Date: 2026-10-19
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

revision = '0001_app_roles'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('app_roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('app_id', sa.String(length=64), nullable=False),
        sa.Column('role_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_system', sa.Boolean(), nullable=False, server_default=sa.text('0')),
        sa.Column('permissions', sa.JSON(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'))
    )
    op.create_index('ix_app_roles_app_id', 'app_roles', ['app_id'])
    # unique constraint handled via batch for sqlite
    with op.batch_alter_table('app_roles') as batch_op:
        batch_op.create_unique_constraint('uq_app_role', ['app_id', 'role_id'])

    op.create_table('app_role_sequences',
        sa.Column('app_id', sa.String(length=64), primary_key=True),
        sa.Column('last_value', sa.Integer(), nullable=False, server_default=sa.text('0'))
    )


def downgrade():
    for tbl in ['app_role_sequences', 'app_roles']:
        op.drop_table(tbl)
