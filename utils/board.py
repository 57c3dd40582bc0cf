# utils/board.py
"""Assemble the JSON payload for one board of a surah."""
import logging
from dataclasses import dataclass

from config import Config
from schemas.board_schemas import (
    AyahRange, BoardHeader, BoardRead, BoardRow, Navigation,
    SegmentAlignment, VerseAlignmentRead, WordAlignment,
)
from utils.alignment import align_verse_words, tokenize
from utils.formatting import verse_marker
from utils.languages import resource_for_language
from utils.pagination import label_range, page_for_start_index, paginate

logger = logging.getLogger(__name__)

class VerseNotFoundError(LookupError):
    pass

@dataclass(frozen=True)
class BoardConfig:
    page_size: int = 11
    language_code: str = 'de'

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        # Fails fast for languages without a translation resource
        resource_for_language(self.language_code)

    @classmethod
    def from_mapping(cls, config, language_code=None):
        return cls(
            page_size=int(config.get('PAGE_SIZE', 11)),
            language_code=(language_code or config.get('DEFAULT_LANGUAGE', 'de')).lower(),
        )

def build_navigation(window, surah, surah_count=Config.SURAH_COUNT):
    return Navigation(
        previous_page=window.clamped_page - 1 if window.has_previous else None,
        next_page=window.clamped_page + 1 if window.has_next else None,
        previous_surah=surah - 1 if surah > 1 else None,
        next_surah=surah + 1 if surah < surah_count else None,
    )

def build_board(repository, surah, board_config, requested_page=None, requested_start=None):
    """Load one surah and render the requested board as a ``BoardRead``.

    ``requested_start`` (a flat segment index) takes precedence over
    ``requested_page`` when both are given. Either is clamped to the pages
    that exist.
    """
    chapter = repository.load_chapter_meta(surah)
    segments = repository.load_verse_segments(surah, board_config.language_code)

    if requested_start is not None:
        requested_page = page_for_start_index(requested_start, board_config.page_size)

    window = paginate(len(segments), board_config.page_size, requested_page)
    label = label_range(segments, window.start_index, window.end_index, chapter.number_of_ayahs)
    logger.info(
        f"Board for surah {surah} ({board_config.language_code}): "
        f"page {window.clamped_page}/{window.page_count}, ayat {label.text}"
    )

    rows = [
        BoardRow(
            position=row,
            sequence_index=segment.sequence_index,
            verse_number=segment.verse_number,
            verse_marker=verse_marker(segment.verse_number),
            verse_marker_arabic=verse_marker(segment.verse_number, arabic=True),
            arabic=segment.arabic_text,
            transcribed=segment.transliterated_text,
            translated=segment.translated_text,
        )
        for row, segment in enumerate(segments[window.start_index:window.end_index], start=1)
    ]

    return BoardRead(
        surah=BoardHeader(
            chapter_number=chapter.chapter_number,
            name_arabic=chapter.name_arabic,
            name_transcribed=chapter.name_transcribed,
            name_translated=chapter.name_for(board_config.language_code),
            number_of_ayahs=chapter.number_of_ayahs,
        ),
        language=board_config.language_code,
        page=window.clamped_page,
        page_count=window.page_count,
        page_size=board_config.page_size,
        start_index=window.start_index,
        end_index=window.end_index,
        ayah_range=AyahRange(
            start=label.start_label,
            end=label.end_label,
            total=label.total_ayahs,
            text=label.text,
        ),
        rows=rows,
        navigation=build_navigation(window, surah),
    )

def build_verse_alignment(repository, surah, verse, language_code):
    """Word alignments for every segment of ``verse``."""
    segments = [
        s for s in repository.load_verse_segments(surah, language_code)
        if s.verse_number == verse
    ]
    if not segments:
        raise VerseNotFoundError(f"Verse {surah}:{verse} not found")

    return VerseAlignmentRead(
        surah=surah,
        verse=verse,
        language=language_code,
        segments=[
            SegmentAlignment(
                sequence_index=segment.sequence_index,
                translated=segment.translated_text,
                tokens=tokenize(segment.translated_text),
                words=[WordAlignment(**entry) for entry in align_verse_words(segment)],
            )
            for segment in segments
        ],
    )