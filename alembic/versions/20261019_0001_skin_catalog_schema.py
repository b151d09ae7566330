"""Skin catalog schema

Revision ID: 0001
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Skins table
    op.create_table(
        'skins',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('md5', sa.String(32), unique=True, nullable=False),
        sa.Column('skin_type', sa.Integer(), nullable=False, default=1),
        sa.Column('readme_text', sa.Text(), nullable=True),
        sa.Column('average_color', sa.String(50), nullable=True),
        sa.Column('emails', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_skins_type_md5', 'skins', ['skin_type', 'md5'])
    
    # Upload filenames
    op.create_table(
        'files',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('skin_md5', sa.String(32), sa.ForeignKey('skins.md5', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('file_path', sa.Text(), nullable=False),
    )
    
    # Moderation reviews
    op.create_table(
        'skin_reviews',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('skin_md5', sa.String(32), sa.ForeignKey('skins.md5', ondelete='CASCADE'), nullable=False),
        sa.Column('review', sa.String(20), nullable=False),
        sa.Column('reviewer', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_skin_reviews_skin_md5', 'skin_reviews', ['skin_md5'])
    op.create_index('ix_skin_reviews_review', 'skin_reviews', ['review'])
    
    # Tweets (engagement refreshed by the nightly job)
    op.create_table(
        'tweets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('skin_md5', sa.String(32), sa.ForeignKey('skins.md5', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('tweet_id', sa.String(64), unique=True, nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False, default=0),
        sa.Column('retweets', sa.Integer(), nullable=False, default=0),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    
    # Archive members
    op.create_table(
        'archive_files',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('skin_md5', sa.String(32), sa.ForeignKey('skins.md5', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('file_name', sa.Text(), nullable=False),
        sa.Column('file_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('uncompressed_size', sa.Integer(), nullable=True),
    )
    
    # Internet Archive items
    op.create_table(
        'ia_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('skin_md5', sa.String(32), sa.ForeignKey('skins.md5', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('identifier', sa.String(255), unique=True, nullable=False),
    )


def downgrade() -> None:
    op.drop_table('ia_items')
    op.drop_table('archive_files')
    op.drop_table('tweets')
    op.drop_index('ix_skin_reviews_review', table_name='skin_reviews')
    op.drop_index('ix_skin_reviews_skin_md5', table_name='skin_reviews')
    op.drop_table('skin_reviews')
    op.drop_table('files')
    op.drop_index('ix_skins_type_md5', table_name='skins')
    op.drop_table('skins')
