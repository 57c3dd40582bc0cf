# gunicorn.conf.py
import os
import logging
import sys
import multiprocessing

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Get PORT from environment or use default
port = os.getenv('PORT', '8080')
bind = f"0.0.0.0:{port}"

# Boards are cheap to build; scale workers with cores but keep it small
cores = multiprocessing.cpu_count()
workers = min(cores * 2 + 1, 4)
threads = 2

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} workers on port {port}")
    logger.info(f"Serving surah data from {os.getenv('DATA_SOURCE', 'json')} source")

timeout = 30
keepalive = 5
worker_class = "sync"  # Use sync workers for Flask

# Process naming
proc_name = "quran_board"
default_proc_name = "quran_board"

# Graceful server restart
graceful_timeout = 30
