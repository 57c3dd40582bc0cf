"""Tests for the board HTTP endpoints."""

from pathlib import Path

from app import create_app
from conftest import REPO_DATA_DIR


class TestHealth:
    def test_health_reports_data_source(self, client) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json()["data_source"] == "json"

    def test_health_fails_without_data(self, tmp_path: Path) -> None:
        app = create_app({"DATA_SOURCE": "json", "DATA_DIR": str(tmp_path)})
        response = app.test_client().get("/health")

        assert response.status_code == 500
        assert response.get_json()["status"] == "unhealthy"


class TestBoardEndpoint:
    """Tests for /api/surah/<n>/lang/<code>."""

    def test_first_board_ends_inside_split_verse(self, client) -> None:
        data = client.get("/api/surah/1/lang/de").get_json()

        assert data["page"] == 1
        assert data["page_count"] == 2
        assert len(data["rows"]) == 11
        assert data["ayah_range"] == {"start": "1", "end": "11.1", "total": 20, "text": "1-11.1 [20]"}

    def test_second_board_starts_inside_split_verse(self, client) -> None:
        data = client.get("/api/surah/1/lang/de?page=2").get_json()

        assert (data["start_index"], data["end_index"]) == (11, 21)
        assert data["ayah_range"]["start"] == "11.2"
        assert data["ayah_range"]["end"] == "20"
        assert data["rows"][0]["position"] == 1
        assert data["rows"][0]["verse_number"] == 11

    def test_rows_carry_language_text(self, client) -> None:
        row = client.get("/api/surah/2/lang/en").get_json()["rows"][4]

        assert row["translated"] == "en verse 5"
        assert row["transcribed"] == "ayah 5"
        assert row["verse_marker"] == "﴾5﴿"
        assert row["verse_marker_arabic"] == "﴿٥﴾"

    def test_header(self, client) -> None:
        surah = client.get("/api/surah/2/lang/de").get_json()["surah"]

        assert surah["chapter_number"] == 2
        assert surah["name_translated"] == "Sure 2"
        assert surah["number_of_ayahs"] == 11

    def test_out_of_range_page_is_clamped(self, client) -> None:
        assert client.get("/api/surah/1/lang/de?page=99").get_json()["page"] == 2
        assert client.get("/api/surah/1/lang/de?page=-1").get_json()["page"] == 1

    def test_non_numeric_page_defaults_to_first(self, client) -> None:
        assert client.get("/api/surah/1/lang/de?page=abc").get_json()["page"] == 1

    def test_start_index_selects_containing_page(self, client) -> None:
        data = client.get("/api/surah/1/lang/de?start=13&page=1").get_json()
        assert data["page"] == 2

    def test_navigation(self, client) -> None:
        first = client.get("/api/surah/1/lang/de").get_json()["navigation"]
        assert first == {"previous_page": None, "next_page": 2, "previous_surah": None, "next_surah": 2}

        second = client.get("/api/surah/1/lang/de?page=2").get_json()["navigation"]
        assert second["previous_page"] == 1
        assert second["next_page"] is None

    def test_default_language(self, client) -> None:
        data = client.get("/api/surah/2").get_json()

        assert data["language"] == "de"
        assert data["rows"][0]["translated"] == "de verse 1"

    def test_language_code_is_case_insensitive(self, client) -> None:
        assert client.get("/api/surah/2/lang/EN").get_json()["language"] == "en"

    def test_unknown_language(self, client) -> None:
        response = client.get("/api/surah/2/lang/fr")

        assert response.status_code == 404
        assert "error" in response.get_json()

    def test_unknown_surah(self, client) -> None:
        assert client.get("/api/surah/7/lang/de").status_code == 404
        assert client.get("/api/surah/115/lang/de").status_code == 404

    def test_broken_data_file(self, client, data_dir: Path) -> None:
        (data_dir / "surah-3.json").write_text("[]", encoding="utf-8")
        assert client.get("/api/surah/3/lang/de").status_code == 500


class TestMetaAndLanguages:
    def test_chapter_meta(self, client) -> None:
        data = client.get("/api/surah/1/meta").get_json()

        assert data["chapter_number"] == 1
        assert data["names_translated"] == {"de": "Sure 1", "en": "Chapter 1"}
        assert data["pages"] == [1, 2]

    def test_languages(self, client) -> None:
        data = client.get("/api/languages").get_json()

        assert data["default"] == "de"
        assert {"resource_id": 27, "code": "de"} in data["languages"]
        assert [language["code"] for language in data["languages"]] == ["de", "en", "ru"]


class TestAlignmentEndpoint:
    """Tests for /api/surah/<n>/lang/<code>/verse/<v>/alignment."""

    def test_aligns_fatiha_words(self) -> None:
        app = create_app({"DATA_SOURCE": "json", "DATA_DIR": str(REPO_DATA_DIR)})
        data = app.test_client().get("/api/surah/1/lang/en/verse/2/alignment").get_json()

        words = data["segments"][0]["words"]
        assert [w["token_index"] for w in words] == [0, 3, 4, 7]
        assert data["segments"][0]["tokens"][4] == "Lord"

    def test_split_verse_returns_every_segment(self, client) -> None:
        data = client.get("/api/surah/1/lang/de/verse/11/alignment").get_json()
        assert [s["sequence_index"] for s in data["segments"]] == [10, 11]

    def test_unknown_verse(self, client) -> None:
        assert client.get("/api/surah/2/lang/de/verse/40/alignment").status_code == 404
