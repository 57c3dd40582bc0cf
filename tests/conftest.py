"""Pytest fixtures for the board backend.

Surah files are written to a temporary data directory so every test controls
exactly which verses (and which split segments) a surah contains.
"""

import json
from pathlib import Path

import pytest

from app import create_app
from models.verse import VerseSegment

REPO_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

LANGUAGE_RESOURCES = {"de": 27, "en": 19, "ru": 45}


def make_verse(verse_number, part=1, sequence=0):
    """One verse record in the data file shape; ``part`` tags split segments."""
    suffix = f" ({part})" if part > 1 else ""
    return {
        "id": sequence + 1,
        "verse_number": verse_number,
        "text_uthmani_tajweed_parsed": f"آية {verse_number}{suffix}",
        "text_uthmani_transcribed": f"ayah {verse_number}{suffix}",
        "translations": [
            {"resource_id": resource_id, "text": f"{code} verse {verse_number}{suffix}"}
            for code, resource_id in LANGUAGE_RESOURCES.items()
        ],
        "words": [],
    }


def make_surah(chapter_number, layout, number_of_ayahs=None):
    """Build a surah file from ``layout``: a list of verse numbers, repeated for split verses.

    ``[1, 1, 2]`` means verse 1 is split into two segments followed by verse 2.
    """
    verses = []
    seen = {}
    for sequence, verse_number in enumerate(layout):
        seen[verse_number] = seen.get(verse_number, 0) + 1
        verses.append(make_verse(verse_number, part=seen[verse_number], sequence=sequence))

    return {
        "chapter_number": chapter_number,
        "number_of_ayahs": number_of_ayahs if number_of_ayahs is not None else len(set(layout)),
        "chapter_name_arabic": "سُورَة",
        "chapter_name_transcribed": f"Sūrah {chapter_number}",
        "chapter_name_transliterated": f"Surah {chapter_number}",
        "chapter_name_translated": {
            "de": {"language_name": "german", "name": f"Sure {chapter_number}"},
            "en": {"language_name": "english", "name": f"Chapter {chapter_number}"},
        },
        "revelation_order": chapter_number,
        "revelation_place": "makkah",
        "pages": [1, 2],
        "verses": verses,
    }


def segments_for(layout):
    """In-memory VerseSegments for ``layout`` (see make_surah)."""
    return [
        VerseSegment(sequence_index=index, verse_number=verse_number)
        for index, verse_number in enumerate(layout)
    ]


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A data directory holding surahs 1 (20 verses, verse 11 split across boards 1 and 2) and 2 (11 verses)."""
    surah_dir = tmp_path / "data"
    surah_dir.mkdir()

    long_layout = list(range(1, 11)) + [11, 11] + list(range(12, 21))
    files = {
        1: make_surah(1, long_layout),
        2: make_surah(2, list(range(1, 12))),
    }
    for number, content in files.items():
        (surah_dir / f"surah-{number}.json").write_text(
            json.dumps(content, ensure_ascii=False), encoding="utf-8"
        )
    return surah_dir


@pytest.fixture
def app(data_dir: Path):
    return create_app({
        "TESTING": True,
        "DATA_SOURCE": "json",
        "DATA_DIR": str(data_dir),
        "PAGE_SIZE": 11,
        "DEFAULT_LANGUAGE": "de",
    })


@pytest.fixture
def client(app):
    return app.test_client()
