# schemas/surah_schemas.py
# Shape of the per-surah data files (quran.com verse export plus board fields)
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

class TranslationEntry(BaseModel):
    id: Optional[int] = None
    resource_id: int
    text: str = ''

class WordGloss(BaseModel):
    language_name: Optional[str] = None
    text: Optional[str] = None

class WordEntry(BaseModel):
    id: Optional[int] = None
    position: int
    text_uthmani: Optional[str] = None
    text: Optional[str] = None
    char_type_name: str = 'word'
    translation: Optional[WordGloss] = None
    transliteration: Optional[WordGloss] = None

class VerseEntry(BaseModel):
    id: Optional[int] = None
    verse_number: Optional[int] = None
    verse_key: Optional[str] = None
    text_uthmani: str = ''
    text_uthmani_tajweed_parsed: str = ''
    text_uthmani_transcribed: str = ''
    translations: List[TranslationEntry] = Field(default_factory=list)
    words: List[WordEntry] = Field(default_factory=list)

class ChapterNameEntry(BaseModel):
    language_name: Optional[str] = None
    name: str

class SurahFile(BaseModel):
    chapter_number: int = Field(..., ge=1, le=114)
    number_of_ayahs: int = Field(..., ge=0)
    chapter_name_arabic: str = ''
    chapter_name_transcribed: str = ''
    chapter_name_transliterated: str = ''
    chapter_name_translated: Dict[str, ChapterNameEntry] = Field(default_factory=dict)
    revelation_order: Optional[int] = None
    revelation_place: Optional[str] = None
    pages: List[int] = Field(default_factory=list)
    verses: List[VerseEntry] = Field(default_factory=list)
