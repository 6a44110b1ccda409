"""create badges, people, projects, awards

Revision ID: 3f2a9c1d7b4e
Revises:
Create Date: 2025-11-03 10:12:47.381204

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f2a9c1d7b4e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'badges',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('slug', sa.String(length=100), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('style_key', sa.String(length=50), nullable=False),
        sa.Column('prompt', sa.Text(), nullable=False),
        sa.Column('actual_prompt', sa.Text(), nullable=True),
        sa.Column('style_template', sa.String(length=100), nullable=True),
        sa.Column('reference_style', sa.Text(), nullable=True),
        sa.Column('quality_setting', sa.String(length=20), nullable=True),
        sa.Column('model_used', sa.String(length=50), nullable=False),
        sa.Column('seed', sa.Integer(), nullable=True),
        sa.Column('image_blob_url', sa.Text(), nullable=False),
        sa.Column('thumb_blob_url', sa.Text(), nullable=False),
        sa.Column('created_by', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_badges'),
        sa.UniqueConstraint('slug', name='uq_badges_slug'),
    )
    op.create_index('ix_badges_slug', 'badges', ['slug'])

    op.create_table(
        'people',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('handle', sa.String(length=100), nullable=True),
        sa.Column('title', sa.String(length=200), nullable=True),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_people'),
    )

    op.create_table(
        'projects',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('short_desc', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_projects'),
    )

    op.create_table(
        'awards',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('badge_id', sa.String(length=36), nullable=False),
        sa.Column('person_id', sa.String(length=36), nullable=False),
        sa.Column('project_id', sa.String(length=36), nullable=False),
        sa.Column('citation', sa.Text(), nullable=False),
        sa.Column('public_permalink', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_awards'),
        sa.UniqueConstraint('public_permalink', name='uq_awards_public_permalink'),
        sa.ForeignKeyConstraint(['badge_id'], ['badges.id'], name='fk_awards_badge_id_badges', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['person_id'], ['people.id'], name='fk_awards_person_id_people', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], name='fk_awards_project_id_projects', ondelete='CASCADE'),
    )

    # Índices
    op.create_index('ix_awards_badge_id', 'awards', ['badge_id'])
    op.create_index('ix_awards_person_id', 'awards', ['person_id'])
    op.create_index('ix_awards_project_id', 'awards', ['project_id'])
    op.create_index('ix_awards_public_permalink', 'awards', ['public_permalink'])
    op.create_index('ix_awards_created_at', 'awards', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_awards_created_at', table_name='awards')
    op.drop_index('ix_awards_public_permalink', table_name='awards')
    op.drop_index('ix_awards_project_id', table_name='awards')
    op.drop_index('ix_awards_person_id', table_name='awards')
    op.drop_index('ix_awards_badge_id', table_name='awards')
    op.drop_table('awards')
    op.drop_table('projects')
    op.drop_table('people')
    op.drop_index('ix_badges_slug', table_name='badges')
    op.drop_table('badges')
