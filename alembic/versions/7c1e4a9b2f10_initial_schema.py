"""initial_schema

Revision ID: 7c1e4a9b2f10
Revises: 
Create Date: 2026-10-17 09:12:03.418

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String


# revision identifiers, used by Alembic.
revision: str = '7c1e4a9b2f10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # Create artists table first since albums reference it
    op.create_table('artists',
        sa.Column('id', Integer, primary_key=True),
        sa.Column('name', String, nullable=False),
        sa.Column('birth_date', Date),
        sa.Column('death_date', Date),
        *_timestamps()
    )
    op.create_index('ix_artists_name', 'artists', ['name'])

    op.create_table('albums',
        sa.Column('id', Integer, primary_key=True),
        sa.Column('title', String, nullable=False),
        sa.Column('artist_id', Integer, ForeignKey('artists.id')),
        *_timestamps()
    )
    op.create_index('ix_albums_artist_id', 'albums', ['artist_id'])

    op.create_table('tracks',
        sa.Column('id', Integer, primary_key=True),
        sa.Column('title', String, nullable=False),
        sa.Column('duration', Integer),
        sa.Column('index', Integer, nullable=False),
        sa.Column('number_of_plays', Integer, nullable=False, server_default='0'),
        sa.Column('album_id', Integer, ForeignKey('albums.id', ondelete='CASCADE'), nullable=False),
        *_timestamps()
    )
    op.create_index('ix_tracks_album_id', 'tracks', ['album_id'])

    op.create_table('genres',
        sa.Column('id', Integer, primary_key=True),
        sa.Column('name', String, nullable=False),
        sa.Column('wiki_tag', String),
        *_timestamps(),
        sa.UniqueConstraint('name', name='genres_name_key')
    )

    op.create_table('albums_genres',
        sa.Column('album_id', Integer, ForeignKey('albums.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('genre_id', Integer, ForeignKey('genres.id', ondelete='CASCADE'), primary_key=True)
    )


def downgrade() -> None:
    op.drop_table('albums_genres')
    op.drop_table('genres')
    op.drop_index('ix_tracks_album_id', table_name='tracks')
    op.drop_table('tracks')
    op.drop_index('ix_albums_artist_id', table_name='albums')
    op.drop_table('albums')
    op.drop_index('ix_artists_name', table_name='artists')
    op.drop_table('artists')
