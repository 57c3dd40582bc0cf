"""create_surah_tables

Revision ID: 3c1d9e7a52b4
Revises: 
Create Date: 2026-10-18 10:14:02.118734

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1d9e7a52b4'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('chapters',
        sa.Column('chapter_number', sa.Integer(), nullable=False),
        sa.Column('number_of_ayahs', sa.Integer(), nullable=False),
        sa.Column('name_arabic', sa.String(length=100), nullable=False),
        sa.Column('name_transcribed', sa.String(length=255), nullable=False),
        sa.Column('name_transliterated', sa.String(length=255), nullable=False),
        sa.Column('revelation_order', sa.Integer(), nullable=True),
        sa.Column('revelation_place', sa.String(length=20), nullable=True),
        sa.Column('pages', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('chapter_number')
    )
    op.create_table('chapter_names',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('chapter_number', sa.Integer(), nullable=False),
        sa.Column('language_code', sa.String(length=10), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['chapter_number'], ['chapters.chapter_number'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('chapter_number', 'language_code')
    )
    op.create_index(op.f('ix_chapter_names_id'), 'chapter_names', ['id'], unique=False)
    op.create_index(op.f('ix_chapter_names_chapter_number'), 'chapter_names', ['chapter_number'], unique=False)
    op.create_table('verse_segments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('chapter_number', sa.Integer(), nullable=False),
        sa.Column('sequence_index', sa.Integer(), nullable=False),
        sa.Column('verse_number', sa.Integer(), nullable=True),
        sa.Column('text_tajweed', sa.Text(), nullable=False),
        sa.Column('text_transcribed', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['chapter_number'], ['chapters.chapter_number'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('chapter_number', 'sequence_index')
    )
    op.create_index(op.f('ix_verse_segments_id'), 'verse_segments', ['id'], unique=False)
    op.create_index(op.f('ix_verse_segments_chapter_number'), 'verse_segments', ['chapter_number'], unique=False)
    op.create_index(op.f('ix_verse_segments_verse_number'), 'verse_segments', ['verse_number'], unique=False)
    op.create_table('segment_translations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('segment_id', sa.Integer(), nullable=False),
        sa.Column('resource_id', sa.Integer(), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(['segment_id'], ['verse_segments.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_segment_translations_id'), 'segment_translations', ['id'], unique=False)
    op.create_index(op.f('ix_segment_translations_segment_id'), 'segment_translations', ['segment_id'], unique=False)
    op.create_index(op.f('ix_segment_translations_resource_id'), 'segment_translations', ['resource_id'], unique=False)
    op.create_table('segment_words',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('segment_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('text', sa.String(length=255), nullable=False),
        sa.Column('translation', sa.String(length=255), nullable=False),
        sa.Column('transliteration', sa.String(length=255), nullable=False),
        sa.Column('char_type', sa.String(length=10), nullable=False),
        sa.ForeignKeyConstraint(['segment_id'], ['verse_segments.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_segment_words_id'), 'segment_words', ['id'], unique=False)
    op.create_index(op.f('ix_segment_words_segment_id'), 'segment_words', ['segment_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_segment_words_segment_id'), table_name='segment_words')
    op.drop_index(op.f('ix_segment_words_id'), table_name='segment_words')
    op.drop_table('segment_words')
    op.drop_index(op.f('ix_segment_translations_resource_id'), table_name='segment_translations')
    op.drop_index(op.f('ix_segment_translations_segment_id'), table_name='segment_translations')
    op.drop_index(op.f('ix_segment_translations_id'), table_name='segment_translations')
    op.drop_table('segment_translations')
    op.drop_index(op.f('ix_verse_segments_verse_number'), table_name='verse_segments')
    op.drop_index(op.f('ix_verse_segments_chapter_number'), table_name='verse_segments')
    op.drop_index(op.f('ix_verse_segments_id'), table_name='verse_segments')
    op.drop_table('verse_segments')
    op.drop_index(op.f('ix_chapter_names_chapter_number'), table_name='chapter_names')
    op.drop_index(op.f('ix_chapter_names_id'), table_name='chapter_names')
    op.drop_table('chapter_names')
    op.drop_table('chapters')
