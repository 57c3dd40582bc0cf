# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()

class Config:
    DATA_DIR = os.getenv('DATA_DIR', os.path.join(BASE_DIR, 'data'))
    DATA_SOURCE = os.getenv('DATA_SOURCE', 'json')  # 'json' or 'sqlite'
    SQLITE_DB_PATH = os.path.join(BASE_DIR, 'quran.db')
    DATABASE_URL = os.getenv('DATABASE_URL', f'sqlite:///{SQLITE_DB_PATH}')

    PAGE_SIZE = int(os.getenv('PAGE_SIZE', 11))  # verse rows per board
    DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'de')
    SURAH_COUNT = 114
