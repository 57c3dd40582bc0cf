# utils/repository.py
"""Data access for chapter metadata and verse segments.

Boards never read files or query the database directly; they go through a
repository exposing ``load_chapter_meta`` and ``load_verse_segments``. Two
backends exist: the per-surah JSON files shipped in ``data/`` and the SQLite
tables filled by ``scripts/import_surahs.py``.
"""
import json
import logging
import os
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from database import init_db, get_db_session
from models.surah import Chapter
from models.verse import ChapterMeta, VerseSegment, Word
from schemas.surah_schemas import SurahFile
from utils.languages import resource_for_language

logger = logging.getLogger(__name__)

class SurahNotFoundError(LookupError):
    pass

class SurahDataError(Exception):
    pass

def check_surah_number(surah, surah_count=Config.SURAH_COUNT):
    if not isinstance(surah, int) or not 1 <= surah <= surah_count:
        raise SurahNotFoundError(f"Surah {surah} does not exist")

def chapter_meta_from_file(surah_file):
    return ChapterMeta(
        chapter_number=surah_file.chapter_number,
        number_of_ayahs=surah_file.number_of_ayahs,
        name_arabic=surah_file.chapter_name_arabic,
        name_transcribed=surah_file.chapter_name_transcribed,
        name_transliterated=surah_file.chapter_name_transliterated,
        names_translated={code: entry.name for code, entry in surah_file.chapter_name_translated.items()},
        revelation_order=surah_file.revelation_order,
        revelation_place=surah_file.revelation_place,
        pages=list(surah_file.pages),
    )

def words_from_entries(entries):
    return tuple(
        Word(
            position=entry.position,
            text=entry.text_uthmani or entry.text or '',
            translation=(entry.translation.text or '') if entry.translation else '',
            transliteration=(entry.transliteration.text or '') if entry.transliteration else '',
            char_type=entry.char_type_name,
        )
        for entry in entries
    )

def segments_from_file(surah_file, resource_id):
    segments = []
    for sequence_index, verse in enumerate(surah_file.verses):
        translated = next(
            (t.text for t in verse.translations if t.resource_id == resource_id), ''
        )
        segments.append(VerseSegment(
            sequence_index=sequence_index,
            verse_number=verse.verse_number,
            arabic_text=verse.text_uthmani_tajweed_parsed or verse.text_uthmani,
            transliterated_text=verse.text_uthmani_transcribed,
            translated_text=translated,
            words=words_from_entries(verse.words),
        ))
    return segments

class JsonSurahRepository:
    """Reads ``surah-{n}.json`` files from a data directory."""

    def __init__(self, data_dir=None):
        self.data_dir = data_dir or Config.DATA_DIR
        # surah -> (mtime_ns, SurahFile); a board reads meta and segments from one parse
        self._parsed = {}

    def surah_path(self, surah):
        return os.path.join(self.data_dir, f'surah-{surah}.json')

    def _read(self, surah):
        check_surah_number(surah)
        path = self.surah_path(surah)
        if not os.path.exists(path):
            raise SurahNotFoundError(f"No data file for surah {surah}")

        mtime_ns = os.stat(path).st_mtime_ns
        cached = self._parsed.get(surah)
        if cached is not None and cached[0] == mtime_ns:
            return cached[1]

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            surah_file = SurahFile.model_validate(raw)
            self._parsed[surah] = (mtime_ns, surah_file)
            return surah_file
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Could not parse {path}: {e}")
            raise SurahDataError(f"Data file for surah {surah} is not valid JSON") from e
        except ValidationError as e:
            logger.error(f"Unexpected structure in {path}: {e}")
            raise SurahDataError(f"Data file for surah {surah} has an invalid structure") from e

    def load_chapter_meta(self, surah):
        return chapter_meta_from_file(self._read(surah))

    def load_verse_segments(self, surah, language_code):
        resource_id = resource_for_language(language_code)
        surah_file = self._read(surah)
        segments = segments_from_file(surah_file, resource_id)
        logger.info(f"Loaded {len(segments)} segments for surah {surah} ({language_code})")
        return segments

class SqlSurahRepository:
    """Reads chapters and segments through SQLAlchemy."""

    def __init__(self, database_url=None):
        self.engine, self.session_factory = init_db(database_url)

    def close(self):
        self.engine.dispose()

    def load_chapter_meta(self, surah):
        check_surah_number(surah)
        try:
            with get_db_session(self.session_factory) as db:
                chapter = db.get(Chapter, surah)
                if chapter is None:
                    raise SurahNotFoundError(f"Surah {surah} has not been imported")
                pages = [int(p) for p in chapter.pages.split(',') if p] if chapter.pages else []
                return ChapterMeta(
                    chapter_number=chapter.chapter_number,
                    number_of_ayahs=chapter.number_of_ayahs,
                    name_arabic=chapter.name_arabic,
                    name_transcribed=chapter.name_transcribed,
                    name_transliterated=chapter.name_transliterated,
                    names_translated={n.language_code: n.name for n in chapter.names},
                    revelation_order=chapter.revelation_order,
                    revelation_place=chapter.revelation_place,
                    pages=pages,
                )
        except SQLAlchemyError as e:
            raise SurahDataError(f"Could not read surah {surah} from the database") from e

    def load_verse_segments(self, surah, language_code):
        resource_id = resource_for_language(language_code)
        check_surah_number(surah)
        try:
            with get_db_session(self.session_factory) as db:
                chapter = db.get(Chapter, surah)
                if chapter is None:
                    raise SurahNotFoundError(f"Surah {surah} has not been imported")
                return [
                    VerseSegment(
                        sequence_index=record.sequence_index,
                        verse_number=record.verse_number,
                        arabic_text=record.text_tajweed,
                        transliterated_text=record.text_transcribed,
                        translated_text=next(
                            (t.text for t in record.translations if t.resource_id == resource_id), ''
                        ),
                        words=tuple(
                            Word(
                                position=w.position,
                                text=w.text,
                                translation=w.translation,
                                transliteration=w.transliteration,
                                char_type=w.char_type,
                            )
                            for w in record.words
                        ),
                    )
                    for record in chapter.segments
                ]
        except SQLAlchemyError as e:
            raise SurahDataError(f"Could not read surah {surah} from the database") from e

def get_repository(config):
    """Build the repository selected by ``DATA_SOURCE`` in ``config``."""
    source = config.get('DATA_SOURCE', 'json')
    if source == 'json':
        return JsonSurahRepository(config.get('DATA_DIR'))
    if source == 'sqlite':
        return SqlSurahRepository(config.get('DATABASE_URL'))
    raise ValueError(f"Unknown DATA_SOURCE: {source}")
