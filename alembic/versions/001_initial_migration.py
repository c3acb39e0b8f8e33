"""Initial migration: create users, decks and cards

Revision ID: initial
Revises: 
Create Date: 2023-12-21 10:44:24.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # Create decks table
    op.create_table(
        'decks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('from_language', sa.String(length=100), nullable=False),
        sa.Column('to_language_primary', sa.String(length=100), nullable=False),
        sa.Column('to_language_secondary', sa.String(length=100), nullable=True),
        sa.Column('design_key', sa.String(length=100), nullable=True),
        sa.Column('seen_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_decks_user_id'), 'decks', ['user_id'], unique=False)

    # Create cards table
    op.create_table(
        'cards',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('deck_id', sa.Integer(), nullable=False),
        sa.Column('related_card_ids', sa.JSON(), nullable=False),
        sa.Column('from_text', sa.String(length=100), nullable=False),
        sa.Column('to_text_primary', sa.String(length=100), nullable=False),
        sa.Column('to_text_secondary', sa.String(length=100), nullable=True),
        sa.Column('example_text', sa.String(length=255), nullable=True),
        sa.Column('audio_url', sa.String(length=255), nullable=True),
        sa.Column('seen_at', sa.DateTime(), nullable=False),
        sa.Column('seen_for', sa.Integer(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('prev_rating', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('rating BETWEEN 0 AND 4', name='ck_cards_rating_range'),
        sa.ForeignKeyConstraint(['deck_id'], ['decks.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_cards_deck_id'), 'cards', ['deck_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_cards_deck_id'), table_name='cards')
    op.drop_table('cards')
    op.drop_index(op.f('ix_decks_user_id'), table_name='decks')
    op.drop_table('decks')
    op.drop_table('users')
