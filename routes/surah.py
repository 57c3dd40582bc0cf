# routes/surah.py
from flask import Blueprint, current_app, jsonify, request
import logging

from schemas.board_schemas import ChapterRead
from utils.board import BoardConfig, VerseNotFoundError, build_board, build_verse_alignment
from utils.languages import UnknownLanguageError, resource_for_language, supported_languages
from utils.repository import SurahDataError, SurahNotFoundError

surah_bp = Blueprint('surah', __name__)
logger = logging.getLogger(__name__)

def get_repository():
    return current_app.extensions['surah_repository']

def _board_response(surah, lang=None):
    try:
        board_config = BoardConfig.from_mapping(current_app.config, lang)
        board = build_board(
            get_repository(),
            surah,
            board_config,
            # Non-numeric values come back as None and fall through to page 1
            requested_page=request.args.get('page', type=int),
            requested_start=request.args.get('start', type=int),
        )
        return jsonify(board.model_dump())
    except UnknownLanguageError as e:
        return jsonify({"error": str(e)}), 404
    except SurahNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except SurahDataError as e:
        logger.error(f"Broken data for surah {surah}: {str(e)}")
        return jsonify({"error": str(e)}), 500
    except Exception as e:
        logger.error(f"Error building board for surah {surah}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to build board"}), 500

@surah_bp.route('/languages', methods=['GET'])
def get_languages():
    return jsonify({
        "default": current_app.config.get('DEFAULT_LANGUAGE', 'de'),
        "languages": [
            {"resource_id": resource_for_language(code), "code": code}
            for code in supported_languages()
        ],
    })

@surah_bp.route('/surah/<int:surah>', methods=['GET'])
def get_default_board(surah):
    return _board_response(surah)

@surah_bp.route('/surah/<int:surah>/lang/<lang>', methods=['GET'])
def get_board(surah, lang):
    return _board_response(surah, lang)

@surah_bp.route('/surah/<int:surah>/meta', methods=['GET'])
def get_chapter_meta(surah):
    try:
        chapter = get_repository().load_chapter_meta(surah)
        return jsonify(ChapterRead.model_validate(chapter).model_dump())
    except SurahNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except SurahDataError as e:
        logger.error(f"Broken data for surah {surah}: {str(e)}")
        return jsonify({"error": str(e)}), 500
    except Exception as e:
        logger.error(f"Error loading metadata for surah {surah}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to load surah metadata"}), 500

@surah_bp.route('/surah/<int:surah>/lang/<lang>/verse/<int:verse>/alignment', methods=['GET'])
def get_verse_alignment(surah, verse, lang):
    try:
        alignment = build_verse_alignment(get_repository(), surah, verse, lang.lower())
        return jsonify(alignment.model_dump())
    except (UnknownLanguageError, SurahNotFoundError, VerseNotFoundError) as e:
        return jsonify({"error": str(e)}), 404
    except SurahDataError as e:
        logger.error(f"Broken data for surah {surah}: {str(e)}")
        return jsonify({"error": str(e)}), 500
    except Exception as e:
        logger.error(f"Alignment error for {surah}:{verse}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to align verse words"}), 500
