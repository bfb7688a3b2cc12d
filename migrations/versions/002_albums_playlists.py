"""Create albums, playlists and playlist songs

Revision ID: 002
Revises: 001
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create album and playlist tables"""

    # 1. Create albums table
    op.create_table('albums',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('artist', sa.String(255), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=False),
        sa.Column('album_type', sa.String(20), nullable=False),
        sa.Column('genre', sa.String(100), nullable=True),
        sa.Column('total_tracks', sa.Integer(), server_default='0', nullable=False),
        sa.Column('record_label', sa.String(255), nullable=True),
        sa.Column('image', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_albums'),
        sa.ForeignKeyConstraint(['artist_id'], ['artists.id'], name='fk_albums_artist_id_artists'),
    )

    op.create_index('ix_albums_title', 'albums', ['title'])
    op.create_index('ix_albums_artist_id', 'albums', ['artist_id'])
    op.create_index('ix_albums_deleted_at', 'albums', ['deleted_at'])

    # 2. Create playlists table
    op.create_table('playlists',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('is_public', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('cover_image', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_playlists'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_playlists_user_id_users', ondelete='CASCADE'
        ),
    )

    op.create_index('ix_playlists_user_id', 'playlists', ['user_id'])
    op.create_index('ix_playlists_deleted_at', 'playlists', ['deleted_at'])

    # 3. Create playlist_songs table (one row per playlist -> track)
    op.create_table('playlist_songs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('playlist_id', sa.Integer(), nullable=False),
        sa.Column('music_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_playlist_songs'),
        sa.ForeignKeyConstraint(
            ['playlist_id'], ['playlists.id'],
            name='fk_playlist_songs_playlist_id_playlists', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['music_id'], ['musics.id'],
            name='fk_playlist_songs_music_id_musics', ondelete='CASCADE'
        ),
        sa.UniqueConstraint('playlist_id', 'music_id', name='uq_playlist_songs_playlist_music'),
    )

    op.create_index('ix_playlist_songs_playlist_id', 'playlist_songs', ['playlist_id'])
    op.create_index('ix_playlist_songs_music_id', 'playlist_songs', ['music_id'])


def downgrade() -> None:
    """Drop album and playlist tables"""
    op.drop_table('playlist_songs')
    op.drop_table('playlists')
    op.drop_table('albums')
