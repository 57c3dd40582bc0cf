# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from routes.surah import surah_bp
from utils.repository import get_repository
from config import Config
from dotenv import load_dotenv
import os
import logging
import time
import sys
from werkzeug.middleware.proxy_fix import ProxyFix

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

def create_app(config_object=Config):
    """Build the Flask app; ``config_object`` is a config class or a dict of overrides."""
    app = Flask(__name__)

    # Use ProxyFix to handle proxy headers properly
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    if isinstance(config_object, dict):
        app.config.from_object(Config)
        app.config.update(config_object)
    else:
        app.config.from_object(config_object)

    app.json.sort_keys = False  # Preserve order of keys in JSON responses
    app.json.ensure_ascii = False  # Arabic and transliteration stay readable
    app.config['CORS_HEADERS'] = 'Content-Type'

    # Boards are read-only, so any origin may fetch them
    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    # Ensure URLs with or without trailing slashes are handled the same way
    app.url_map.strict_slashes = False

    logger.info(f"Using '{app.config['DATA_SOURCE']}' surah data source")
    app.extensions['surah_repository'] = get_repository(app.config)

    app.register_blueprint(surah_bp, url_prefix='/api')

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        # Log request duration
        duration = time.time() - g.start_time
        logger.info(f"Request to {request.path} took {duration:.2f} seconds")
        return response

    @app.route('/test', methods=['GET'])
    def test():
        return {'message': 'Flask server is working!'}

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also verifies the surah data source"""
        try:
            chapter = app.extensions['surah_repository'].load_chapter_meta(1)
            return jsonify({
                'status': 'healthy',
                'data_source': app.config['DATA_SOURCE'],
                'sample_surah': chapter.chapter_number,
                'timestamp': time.time()
            })
        except Exception as e:
            logger.error(f"Health check failed: {str(e)}")
            return jsonify({
                'status': 'unhealthy',
                'error': str(e),
                'timestamp': time.time()
            }), 500

    return app

app = create_app()

if __name__ == '__main__':
    print("Starting Flask server...")
    port = int(os.getenv('PORT', 5001))
    app.run(debug=True, port=port)
