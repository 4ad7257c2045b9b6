"""users table

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

role_enum = sa.Enum('ADMIN', 'MEMBER', name='role')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(as_uuid=True), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=True),
        sa.Column('middle_name', sa.String(length=255), nullable=True),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone_number', sa.String(length=64), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('role', role_enum, nullable=False, server_default='MEMBER'),
        sa.Column('updated', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'])
    op.create_index('uq_users_email_lower', 'users', [sa.text('lower(email)')], unique=True)
    op.create_index(op.f('ix_users_updated'), 'users', ['updated'])


def downgrade() -> None:
    op.drop_index(op.f('ix_users_updated'), table_name='users')
    op.drop_index('uq_users_email_lower', table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    role_enum.drop(op.get_bind(), checkfirst=True)
