# This file makes the models directory a Python package 
from .verse import Word, VerseSegment, ChapterMeta
from .surah import Chapter, ChapterName, VerseSegmentRecord, SegmentTranslation, SegmentWord

__all__ = [
    'Word',
    'VerseSegment',
    'ChapterMeta',
    'Chapter',
    'ChapterName',
    'VerseSegmentRecord',
    'SegmentTranslation',
    'SegmentWord',
]
