# schemas/board_schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Dict, List, Optional

class ChapterRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    chapter_number: int
    number_of_ayahs: int
    name_arabic: str
    name_transcribed: str
    name_transliterated: str
    names_translated: Dict[str, str]
    revelation_order: Optional[int] = None
    revelation_place: Optional[str] = None
    pages: List[int] = []

class BoardHeader(BaseModel):
    chapter_number: int
    name_arabic: str
    name_transcribed: str
    name_translated: str
    number_of_ayahs: int

class AyahRange(BaseModel):
    start: str
    end: str
    total: int
    text: str

class BoardRow(BaseModel):
    position: int
    sequence_index: int
    verse_number: Optional[int] = None
    verse_marker: str
    verse_marker_arabic: str
    arabic: str
    transcribed: str
    translated: str

class Navigation(BaseModel):
    previous_page: Optional[int] = None
    next_page: Optional[int] = None
    previous_surah: Optional[int] = None
    next_surah: Optional[int] = None

class BoardRead(BaseModel):
    surah: BoardHeader
    language: str
    page: int
    page_count: int
    page_size: int
    start_index: int
    end_index: int
    ayah_range: AyahRange
    rows: List[BoardRow]
    navigation: Navigation

class WordAlignment(BaseModel):
    position: int
    text: Optional[str] = None
    translation: Optional[str] = None
    token_index: Optional[int] = None

class SegmentAlignment(BaseModel):
    sequence_index: int
    translated: str
    tokens: List[str]
    words: List[WordAlignment]

class VerseAlignmentRead(BaseModel):
    surah: int
    verse: int
    language: str
    segments: List[SegmentAlignment]
