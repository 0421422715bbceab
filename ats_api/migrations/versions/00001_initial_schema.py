"""Initial schema - candidates, educations, work experiences, positions.

Revision ID: 00001
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '00001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # candidates
    op.create_table(
        'candidates',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(15), nullable=True),
        sa.Column('address', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    # positions
    op.create_table(
        'positions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(50), nullable=False, server_default='Borrador'),
        sa.Column('is_visible', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('job_description', sa.Text(), nullable=True),
        sa.Column('requirements', sa.Text(), nullable=True),
        sa.Column('responsibilities', sa.Text(), nullable=True),
        sa.Column('benefits', sa.Text(), nullable=True),
        sa.Column('salary_min', sa.Float(), nullable=True),
        sa.Column('salary_max', sa.Float(), nullable=True),
        sa.Column('employment_type', sa.String(50), nullable=True),
        sa.Column('application_deadline', sa.DateTime(), nullable=True),
        sa.Column('contact_info', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    # educations
    op.create_table(
        'educations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('institution', sa.String(100), nullable=False),
        sa.Column('title', sa.String(250), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('candidate_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['candidate_id'], ['candidates.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_educations_candidate_id', 'educations', ['candidate_id'])

    # work_experiences
    op.create_table(
        'work_experiences',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('company', sa.String(100), nullable=False),
        sa.Column('position', sa.String(100), nullable=False),
        sa.Column('description', sa.String(200), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('candidate_id', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['candidate_id'], ['candidates.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_work_experiences_candidate_id', 'work_experiences', ['candidate_id'])


def downgrade() -> None:
    op.drop_index('ix_work_experiences_candidate_id', table_name='work_experiences')
    op.drop_table('work_experiences')
    op.drop_index('ix_educations_candidate_id', table_name='educations')
    op.drop_table('educations')
    op.drop_table('positions')
    op.drop_table('candidates')
