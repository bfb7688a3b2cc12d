"""Create SoundCave core tables

Revision ID: 001
Revises:
Create Date: 2026-10-16 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, catalog, follow and image tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('profile_image', sa.String(500), nullable=True),
        sa.Column('role', sa.String(20), server_default='user', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )

    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])
    op.create_index('ix_users_deleted_at', 'users', ['deleted_at'])

    # 2. Create artists table
    op.create_table('artists',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('ref_user_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False),
        sa.Column('genre', sa.String(100), nullable=True),
        sa.Column('country', sa.String(100), nullable=True),
        sa.Column('debut_year', sa.String(4), nullable=True),
        sa.Column('website', sa.String(255), nullable=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('social_media', sa.JSON(), nullable=True),
        sa.Column('profile_image', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_artists'),
        sa.ForeignKeyConstraint(
            ['ref_user_id'], ['users.id'],
            name='fk_artists_ref_user_id_users', ondelete='SET NULL'
        ),
    )

    op.create_index('ix_artists_ref_user_id', 'artists', ['ref_user_id'])
    op.create_index('ix_artists_name', 'artists', ['name'])
    op.create_index('ix_artists_email', 'artists', ['email'])
    op.create_index('ix_artists_deleted_at', 'artists', ['deleted_at'])

    # 3. Create musics table
    op.create_table('musics',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('artist', sa.String(255), nullable=False),
        sa.Column('artist_id', sa.Integer(), nullable=False),
        sa.Column('album', sa.String(255), nullable=True),
        sa.Column('genre', sa.String(100), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('duration', sa.String(10), nullable=False),
        sa.Column('language', sa.String(50), nullable=False),
        sa.Column('explicit', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('lyrics', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('tags', sa.Text(), nullable=True),
        sa.Column('audio_file_url', sa.String(500), nullable=False),
        sa.Column('cover_image_url', sa.String(500), nullable=True),
        sa.Column('play_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_musics'),
        sa.ForeignKeyConstraint(['artist_id'], ['artists.id'], name='fk_musics_artist_id_artists'),
    )

    op.create_index('ix_musics_title', 'musics', ['title'])
    op.create_index('ix_musics_artist_id', 'musics', ['artist_id'])
    op.create_index('ix_musics_deleted_at', 'musics', ['deleted_at'])

    # 4. Create music_likes table
    op.create_table('music_likes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('music_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_music_likes'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_music_likes_user_id_users', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(
            ['music_id'], ['musics.id'],
            name='fk_music_likes_music_id_musics', ondelete='CASCADE'
        ),
        sa.UniqueConstraint('user_id', 'music_id', name='uq_music_likes_user_music'),
    )

    op.create_index('ix_music_likes_user_id', 'music_likes', ['user_id'])
    op.create_index('ix_music_likes_music_id', 'music_likes', ['music_id'])

    # 5. Create follows table (one row per fan -> target edge)
    op.create_table('follows',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('fan_id', sa.Integer(), nullable=False),
        sa.Column('target_type', sa.String(10), nullable=False),
        sa.Column('target_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_follows'),
        sa.ForeignKeyConstraint(
            ['fan_id'], ['users.id'],
            name='fk_follows_fan_id_users', ondelete='CASCADE'
        ),
        sa.UniqueConstraint('fan_id', 'target_type', 'target_id', name='uq_follows_fan_target'),
        sa.CheckConstraint("target_type IN ('user', 'artist')", name='ck_follows_target_type_valid'),
        sa.CheckConstraint(
            "NOT (target_type = 'user' AND fan_id = target_id)",
            name='ck_follows_no_self_follow'
        ),
    )

    op.create_index('ix_follows_fan_id', 'follows', ['fan_id'])
    op.create_index('ix_follows_target', 'follows', ['target_type', 'target_id'])

    # 6. Create images table
    op.create_table('images',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('file_name', sa.String(255), nullable=False),
        sa.Column('file_url', sa.String(500), nullable=False),
        sa.Column('file_size', sa.BigInteger(), nullable=False),
        sa.Column('content_type', sa.String(100), nullable=False),
        sa.Column('bucket_path', sa.String(500), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_images'),
    )

    op.create_index('ix_images_deleted_at', 'images', ['deleted_at'])


def downgrade() -> None:
    """Drop SoundCave core tables"""
    op.drop_table('images')
    op.drop_table('follows')
    op.drop_table('music_likes')
    op.drop_table('musics')
    op.drop_table('artists')
    op.drop_table('users')
