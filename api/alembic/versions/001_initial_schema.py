"""Initial schema: users, sessions, profiles, topics, cards, import sessions

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create user table
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    # Create user_session table
    op.create_table(
        'user_session',
        sa.Column('token', sa.String(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('token')
    )
    op.create_index(op.f('ix_user_session_user_id'), 'user_session', ['user_id'], unique=False)

    # Create user_profile table
    op.create_table(
        'user_profile',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('onboarding_complete', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('template', sa.String(), nullable=True),
        sa.Column('view_mode', sa.String(), nullable=False, server_default='list'),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('user_id')
    )

    # Create topic table
    op.create_table(
        'topic',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('number', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('emoji', sa.String(), nullable=False, server_default=''),
        sa.Column('level', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('related_topic_ids', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.ForeignKeyConstraint(['parent_id'], ['topic.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_topic_user_id'), 'topic', ['user_id'], unique=False)
    op.create_index(op.f('ix_topic_number'), 'topic', ['number'], unique=False)
    op.create_index(op.f('ix_topic_parent_id'), 'topic', ['parent_id'], unique=False)

    # Create card table
    op.create_table(
        'card',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('body', sa.String(), nullable=False, server_default=''),
        sa.Column('category', sa.String(), nullable=False, server_default='Unprocessed'),
        sa.Column('status', sa.String(), nullable=False, server_default='Unprocessed'),
        sa.Column('source_type', sa.String(), nullable=False, server_default='Note'),
        sa.Column('source_title', sa.String(), nullable=True),
        sa.Column('source_url', sa.String(), nullable=True),
        sa.Column('scripture', sa.String(), nullable=True),
        sa.Column('connected_topic_ids', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_card_user_id'), 'card', ['user_id'], unique=False)

    # Create import_session table
    op.create_table(
        'import_session',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('filename', sa.String(), nullable=False, server_default=''),
        sa.Column('state', sa.String(), nullable=False, server_default='upload'),
        sa.Column('chunks', sa.JSON(), nullable=False),
        sa.Column('total_found', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('current_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('approved', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('skipped', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_import_session_user_id'), 'import_session', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_import_session_user_id'), table_name='import_session')
    op.drop_table('import_session')
    op.drop_index(op.f('ix_card_user_id'), table_name='card')
    op.drop_table('card')
    op.drop_index(op.f('ix_topic_parent_id'), table_name='topic')
    op.drop_index(op.f('ix_topic_number'), table_name='topic')
    op.drop_index(op.f('ix_topic_user_id'), table_name='topic')
    op.drop_table('topic')
    op.drop_table('user_profile')
    op.drop_index(op.f('ix_user_session_user_id'), table_name='user_session')
    op.drop_table('user_session')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
