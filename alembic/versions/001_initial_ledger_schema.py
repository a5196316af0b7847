"""initial_ledger_schema

Revision ID: 001_initial_ledger_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_ledger_schema'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table('ledger_state',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('event_count', sa.Integer(), nullable=False),
        sa.Column('last_height', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('events',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('creator', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('start_height', sa.BigInteger(), nullable=False),
        sa.Column('end_height', sa.BigInteger(), nullable=False),
        sa.Column('feedback_types', sa.JSON(), nullable=False),
        sa.Column('min_rating', sa.BigInteger(), nullable=False),
        sa.Column('max_rating', sa.BigInteger(), nullable=False),
        sa.Column('requires_authentication', sa.Boolean(), nullable=False),
        sa.Column('incentive_enabled', sa.Boolean(), nullable=False),
        sa.Column('is_closed', sa.Boolean(), nullable=False),
        sa.CheckConstraint('start_height <= end_height', name='ck_events_height_window'),
        sa.CheckConstraint('min_rating < max_rating', name='ck_events_rating_range'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_events_creator'), 'events', ['creator'], unique=False)

    op.create_table('event_participants',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('participant', sa.String(length=255), nullable=False),
        sa.Column('allowed', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('event_id', 'participant')
    )

    op.create_table('feedback_submissions',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('submission_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('submitter', sa.String(length=255), nullable=False),
        sa.Column('feedback_type', sa.String(length=20), nullable=False),
        sa.Column('rating_value', sa.BigInteger(), nullable=True),
        sa.Column('reaction_value', sa.String(length=20), nullable=True),
        sa.Column('text_value', sa.String(length=280), nullable=True),
        sa.Column('submitted_at_height', sa.BigInteger(), nullable=False),
        sa.Column('is_anonymous', sa.Boolean(), nullable=False),
        sa.CheckConstraint(
            '(CASE WHEN rating_value IS NULL THEN 0 ELSE 1 END)'
            ' + (CASE WHEN reaction_value IS NULL THEN 0 ELSE 1 END)'
            ' + (CASE WHEN text_value IS NULL THEN 0 ELSE 1 END) = 1',
            name='ck_feedback_submissions_single_payload'
        ),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('event_id', 'submission_id')
    )
    op.create_index(op.f('ix_feedback_submissions_submitter'), 'feedback_submissions', ['submitter'], unique=False)

    op.create_table('participant_submissions',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('participant', sa.String(length=255), nullable=False),
        sa.Column('feedback_type', sa.String(length=20), nullable=False),
        sa.Column('has_submitted', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('event_id', 'participant', 'feedback_type')
    )

    op.create_table('event_feedback_counters',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('event_id')
    )

    op.create_table('event_rating_stats',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('total_ratings', sa.Integer(), nullable=False),
        sa.Column('rating_sum', sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('event_id')
    )

    op.create_table('event_rating_buckets',
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('rating_value', sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column('occurrences', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id']),
        sa.PrimaryKeyConstraint('event_id', 'rating_value')
    )

def downgrade() -> None:
    op.drop_table('event_rating_buckets')
    op.drop_table('event_rating_stats')
    op.drop_table('event_feedback_counters')
    op.drop_table('participant_submissions')
    op.drop_index(op.f('ix_feedback_submissions_submitter'), table_name='feedback_submissions')
    op.drop_table('feedback_submissions')
    op.drop_table('event_participants')
    op.drop_index(op.f('ix_events_creator'), table_name='events')
    op.drop_table('events')
    op.drop_table('ledger_state')
