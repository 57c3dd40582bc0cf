# models/verse.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

@dataclass(frozen=True)
class Word:
    position: int
    text: str
    translation: str = ''
    transliteration: str = ''
    char_type: str = 'word'  # 'end' marks the verse-end glyph

@dataclass(frozen=True)
class VerseSegment:
    sequence_index: int
    verse_number: Optional[int] = None
    arabic_text: str = ''
    transliterated_text: str = ''
    translated_text: str = ''
    words: Tuple[Word, ...] = ()

@dataclass(frozen=True)
class ChapterMeta:
    chapter_number: int
    number_of_ayahs: int
    name_arabic: str = ''
    name_transcribed: str = ''
    name_transliterated: str = ''
    names_translated: Dict[str, str] = field(default_factory=dict)
    revelation_order: Optional[int] = None
    revelation_place: Optional[str] = None
    pages: List[int] = field(default_factory=list)

    def name_for(self, language_code):
        return self.names_translated.get(language_code, '')
