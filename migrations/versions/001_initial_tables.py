"""Create users, inspections, inspection_images and inspection_analyses tables

Revision ID: 001
Revises:
Create Date: 2025-01-23 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the four AgroScan tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.CheckConstraint("role IN ('Farmer', 'Admin')", name='ck_users_user_role'),
    )

    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2. Create inspections table
    op.create_table('inspections',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_name', sa.String(200), nullable=False),
        sa.Column('inspection_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('country', sa.String(100), nullable=False),
        sa.Column('state', sa.String(100), nullable=False),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('notes', sa.String(1000), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('category', sa.String(20), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_inspections'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_inspections_user_id_users',
            ondelete='CASCADE',
        ),
        sa.CheckConstraint(
            "status IN ('Pending', 'InProgress', 'Completed', 'Cancelled')",
            name='ck_inspections_inspection_status',
        ),
        sa.CheckConstraint(
            "category IN ('Plant', 'Vegetable')",
            name='ck_inspections_inspection_category',
        ),
    )

    op.create_index('ix_inspections_user_id', 'inspections', ['user_id'])

    # 3. Create inspection_images table
    op.create_table('inspection_images',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('inspection_id', sa.Integer(), nullable=False),
        sa.Column('image', sa.String(500), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_inspection_images'),
        sa.ForeignKeyConstraint(
            ['inspection_id'], ['inspections.id'],
            name='fk_inspection_images_inspection_id_inspections',
            ondelete='CASCADE',
        ),
    )

    op.create_index('ix_inspection_images_inspection_id', 'inspection_images', ['inspection_id'])

    # 4. Create inspection_analyses table
    op.create_table('inspection_analyses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('inspection_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('confidence_score', sa.Float(), nullable=False),
        sa.Column('description', sa.String(2000), nullable=True),
        sa.Column('treatment_recommendation', sa.String(2000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_inspection_analyses'),
        sa.ForeignKeyConstraint(
            ['inspection_id'], ['inspections.id'],
            name='fk_inspection_analyses_inspection_id_inspections',
            ondelete='CASCADE',
        ),
        sa.CheckConstraint(
            'confidence_score >= 0 AND confidence_score <= 1',
            name='ck_inspection_analyses_confidence_score_range',
        ),
        sa.CheckConstraint(
            "status IN ('Pending', 'InProgress', 'Completed', 'Failed')",
            name='ck_inspection_analyses_analysis_status',
        ),
    )

    op.create_index('ix_inspection_analyses_inspection_id', 'inspection_analyses', ['inspection_id'])
    op.create_index(
        'ix_inspection_analyses_inspection_created',
        'inspection_analyses',
        ['inspection_id', 'created_at'],
    )


def downgrade() -> None:
    """Drop the AgroScan tables, children first"""
    op.drop_index('ix_inspection_analyses_inspection_created', table_name='inspection_analyses')
    op.drop_index('ix_inspection_analyses_inspection_id', table_name='inspection_analyses')
    op.drop_table('inspection_analyses')

    op.drop_index('ix_inspection_images_inspection_id', table_name='inspection_images')
    op.drop_table('inspection_images')

    op.drop_index('ix_inspections_user_id', table_name='inspections')
    op.drop_table('inspections')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
