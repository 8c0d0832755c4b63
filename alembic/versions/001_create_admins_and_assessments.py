"""Create admins and health_assessments tables

Revision ID: 001_create_admins_and_assessments
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_create_admins_and_assessments'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('admins',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_admins_id', 'admins', ['id'], unique=False)
    op.create_index('ix_admins_email', 'admins', ['email'], unique=True)

    op.create_table('health_assessments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('patient_name', sa.String(), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('systolic', sa.Integer(), nullable=False),
        sa.Column('diastolic', sa.Integer(), nullable=False),
        sa.Column('blood_sugar', sa.Float(), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=False),
        sa.Column('is_fasting', sa.Boolean(), nullable=False),
        sa.Column('bp_risk_level', sa.String(), nullable=False),
        sa.Column('bp_risk_score', sa.Float(), nullable=False),
        sa.Column('sugar_risk_level', sa.String(), nullable=False),
        sa.Column('sugar_risk_score', sa.Float(), nullable=False),
        sa.Column('temp_risk_level', sa.String(), nullable=False),
        sa.Column('temp_risk_score', sa.Float(), nullable=False),
        sa.Column('total_score', sa.Float(), nullable=False),
        sa.Column('overall_risk', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_health_assessments_patient_name', 'health_assessments', ['patient_name'], unique=False)
    op.create_index('ix_health_assessments_created_at', 'health_assessments', ['created_at'], unique=False)


def downgrade():
    op.drop_index('ix_health_assessments_created_at', table_name='health_assessments')
    op.drop_index('ix_health_assessments_patient_name', table_name='health_assessments')
    op.drop_table('health_assessments')
    op.drop_index('ix_admins_email', table_name='admins')
    op.drop_index('ix_admins_id', table_name='admins')
    op.drop_table('admins')
