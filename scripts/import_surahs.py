# scripts/import_surahs.py
import glob
import json
import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

# Add the parent directory to the Python path properly
current_dir = Path(__file__).resolve().parent
backend_dir = current_dir.parent
sys.path.insert(0, str(backend_dir))

from config import Config
from database import init_db, get_db_session
from models.surah import Chapter, ChapterName, VerseSegmentRecord, SegmentTranslation, SegmentWord
from schemas.surah_schemas import SurahFile
from utils.repository import words_from_entries

def chapter_from_file(surah_file):
    """Build the ORM rows for one parsed surah file."""
    pages = ','.join(str(p) for p in surah_file.pages) if surah_file.pages else None
    chapter = Chapter(
        chapter_number=surah_file.chapter_number,
        number_of_ayahs=surah_file.number_of_ayahs,
        name_arabic=surah_file.chapter_name_arabic,
        name_transcribed=surah_file.chapter_name_transcribed,
        name_transliterated=surah_file.chapter_name_transliterated,
        revelation_order=surah_file.revelation_order,
        revelation_place=surah_file.revelation_place,
        pages=pages,
    )
    chapter.names = [
        ChapterName(language_code=code, name=entry.name)
        for code, entry in surah_file.chapter_name_translated.items()
    ]
    for sequence_index, verse in enumerate(surah_file.verses):
        segment = VerseSegmentRecord(
            sequence_index=sequence_index,
            verse_number=verse.verse_number,
            text_tajweed=verse.text_uthmani_tajweed_parsed or verse.text_uthmani,
            text_transcribed=verse.text_uthmani_transcribed,
        )
        segment.translations = [
            SegmentTranslation(resource_id=t.resource_id, text=t.text)
            for t in verse.translations
        ]
        segment.words = [
            SegmentWord(
                position=w.position,
                text=w.text,
                translation=w.translation,
                transliteration=w.transliteration,
                char_type=w.char_type,
            )
            for w in words_from_entries(verse.words)
        ]
        chapter.segments.append(segment)
    return chapter

def import_surahs(data_dir, database_url=None):
    """Import every surah-*.json file in data_dir, replacing existing chapters"""
    print(f"Reading surah files from: {data_dir}")

    load_dotenv()
    engine, session_factory = init_db(database_url)

    paths = sorted(glob.glob(os.path.join(data_dir, 'surah-*.json')))
    imported = []
    skipped = []

    try:
        for path in paths:
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    surah_file = SurahFile.model_validate(json.load(f))
            except (json.JSONDecodeError, ValidationError) as e:
                print(f"Error reading '{path}': {e}")
                skipped.append(path)
                continue

            with get_db_session(session_factory) as db:
                existing = db.get(Chapter, surah_file.chapter_number)
                if existing is not None:
                    db.delete(existing)
                    db.flush()
                db.add(chapter_from_file(surah_file))

            imported.append(surah_file.chapter_number)
            print(f"Imported surah {surah_file.chapter_number} ({len(surah_file.verses)} segments)")
    finally:
        engine.dispose()

    print(f"\nImport complete!")
    print(f"Imported {len(imported)} surahs")
    if skipped:
        print(f"Skipped {len(skipped)} files due to errors")
    return imported

if __name__ == '__main__':
    if len(sys.argv) not in (1, 2):
        print("Usage: python import_surahs.py [<data_dir>]")
        sys.exit(1)

    data_dir = sys.argv[1] if len(sys.argv) == 2 else Config.DATA_DIR
    import_surahs(data_dir)
